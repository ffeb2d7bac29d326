"""
File system port interface defining the contract for filesystem operations.
"""

from abc import ABC, abstractmethod

from file_explorer.entities.entry import Entry
from file_explorer.entities.reports import RemovalReport, SearchReport


class FileSystemPort(ABC):
    """Port interface for filesystem operations. All paths are absolute."""

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return whether ``path`` is an existing directory."""
        pass

    @abstractmethod
    def list_directory(self, directory: str) -> list[Entry]:
        """
        List the direct children of a directory.

        Args:
            directory: Directory to list

        Returns:
            Entry for every child that could be stat'ed, in read order

        Raises:
            FileOperationError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def ensure_directory(self, path: str) -> None:
        """
        Check that ``path`` can become a working directory.

        Raises:
            FileOperationError: If the path is missing, not a directory or not searchable
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy a file byte for byte, overwriting the destination.

        Raises:
            FileOperationError: If either file cannot be opened or a write fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Rename ``source`` to ``destination``.

        Raises:
            FileOperationError: On failure, with kind CROSS_DEVICE across filesystems
        """
        pass

    @abstractmethod
    def remove_tree(self, path: str) -> RemovalReport:
        """
        Remove a file, or a directory and everything below it.

        Args:
            path: File or directory to remove

        Returns:
            RemovalReport listing visited paths in removal order and those left behind
        """
        pass

    @abstractmethod
    def search(self, root: str, pattern: str) -> SearchReport:
        """
        Find entries whose name contains ``pattern``, at any depth.

        Args:
            root: Directory to search from
            pattern: Substring to look for in entry names

        Returns:
            SearchReport with matching paths, scanned directories and unreadable ones
        """
        pass

    @abstractmethod
    def touch(self, path: str) -> None:
        """
        Create an empty file or update the timestamps of an existing one.

        Raises:
            FileOperationError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create a single directory level.

        Raises:
            FileOperationError: If it exists or the parent is missing
        """
        pass
