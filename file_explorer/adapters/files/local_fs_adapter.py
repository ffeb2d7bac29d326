"""
Local file system adapter implementation for filesystem operations.
"""

import errno
import logging
import os
import stat
from collections.abc import Callable

from typing_extensions import override

from file_explorer.entities.entry import Entry
from file_explorer.entities.reports import RemovalReport, SearchReport
from file_explorer.exceptions import ErrorKind, FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.utils.paths import is_directory
from file_explorer.utils.walker import DepthFirstWalker, DirectoryIterator, WalkEntry

COPY_CHUNK_SIZE = 4096
DIRECTORY_MODE = 0o755


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._walker = DepthFirstWalker(self._logger)

    @override
    def is_directory(self, path: str) -> bool:
        return is_directory(path)

    @override
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
        entries: list[Entry] = []
        try:
            for child in DirectoryIterator(directory):
                try:
                    stat_result = os.stat(child.path)
                except OSError as e:
                    # Log the error but continue with other entries
                    self._logger.warning(f"Could not stat {child.path}: {e}")
                    continue
                entries.append(Entry.from_stat(child.name, child.path, stat_result))
        except OSError as e:
            raise FileOperationError.from_os_error(e, directory) from e
        return entries

    @override
    def ensure_directory(self, path: str) -> None:
        try:
            stat_result = os.stat(path)
        except OSError as e:
            raise FileOperationError.from_os_error(e, path) from e

        if not stat.S_ISDIR(stat_result.st_mode):
            raise FileOperationError(
                os.strerror(errno.ENOTDIR), ErrorKind.NOT_A_DIRECTORY, path
            )
        if not os.access(path, os.X_OK):
            raise FileOperationError(
                os.strerror(errno.EACCES), ErrorKind.PERMISSION_DENIED, path
            )

    @override
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy a file in fixed-size chunks, overwriting the destination.

        A failure mid-stream leaves the partially written destination in place.

        Args:
            source: File to read
            destination: File to create or truncate

        Raises:
            FileOperationError: If either file cannot be opened or a read/write fails
        """
        try:
            if os.path.exists(destination) and os.path.samefile(source, destination):
                raise FileOperationError(
                    "Source and destination are the same file",
                    ErrorKind.OTHER,
                    destination,
                )
            with open(source, "rb") as src:
                with open(destination, "wb") as dst:
                    while True:
                        chunk = src.read(COPY_CHUNK_SIZE)
                        if not chunk:
                            break
                        dst.write(chunk)
        except OSError as e:
            raise FileOperationError.from_os_error(e) from e

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileOperationError.from_os_error(e, source) from e

    @override
    def remove_tree(self, path: str) -> RemovalReport:
        """
        Remove a file, or a directory depth-first.

        Failures never stop the removal; they are collected in the report.
        Symlinks are removed, never followed.

        Args:
            path: File or directory to remove

        Returns:
            RemovalReport with every visited path in removal order
        """
        report = RemovalReport()

        def _remove(target: str, remover: Callable[[str], None]) -> None:
            try:
                remover(target)
            except OSError as e:
                self._logger.warning(f"Could not remove {target}: {e}")
                report.skipped.append(target)
            report.visited.append(target)

        def _visit(entry: WalkEntry) -> None:
            if not entry.is_dir:
                _remove(entry.path, os.remove)

        if is_directory(path) and not os.path.islink(path):
            unreadable = self._walker.walk(
                path,
                visit=_visit,
                leave=lambda directory: _remove(directory, os.rmdir),
                follow_symlinks=False,
            )
            report.skipped.extend(unreadable)
        else:
            _remove(path, os.remove)
        return report

    @override
    def search(self, root: str, pattern: str) -> SearchReport:
        """
        Find entries whose name contains ``pattern``.

        Matching is a plain substring test on the entry name, so "a.txt"
        also matches "a.txt.bak".

        Args:
            root: Directory to search from
            pattern: Substring to look for

        Returns:
            SearchReport with matches in traversal order
        """
        report = SearchReport()

        def _visit(entry: WalkEntry) -> None:
            if pattern in entry.name:
                report.matches.append(entry.path)

        report.skipped = self._walker.walk(
            root, visit=_visit, leave=report.scanned.append
        )
        return report

    @override
    def touch(self, path: str) -> None:
        try:
            with open(path, "ab"):
                pass
            os.utime(path, None)
        except OSError as e:
            raise FileOperationError.from_os_error(e, path) from e

    @override
    def make_directory(self, path: str) -> None:
        try:
            os.mkdir(path, DIRECTORY_MODE)
        except OSError as e:
            raise FileOperationError.from_os_error(e, path) from e
