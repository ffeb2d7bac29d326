"""
Depth-first directory traversal shared by listing, search and removal.
"""

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

from file_explorer.utils.paths import is_directory


@dataclass(frozen=True)
class WalkEntry:
    """A directory child as seen during traversal."""

    name: str
    path: str
    is_dir: bool


class DirectoryIterator:
    """
    Lazy iterator over the direct children of one directory.

    Each call to ``iter()`` reopens the directory, so the same instance can
    be iterated again after the directory changed.
    """

    def __init__(self, path: str, follow_symlinks: bool = True):
        """
        Args:
            path: Directory to read
            follow_symlinks: Treat symlinks to directories as directories
        """
        self.path = path
        self.follow_symlinks = follow_symlinks

    def __iter__(self) -> Iterator[WalkEntry]:
        # os.scandir never yields '.' or '..'
        with os.scandir(self.path) as it:
            for item in it:
                if self.follow_symlinks:
                    is_dir = is_directory(item.path)
                else:
                    is_dir = item.is_dir(follow_symlinks=False)
                yield WalkEntry(name=item.name, path=item.path, is_dir=is_dir)


class DepthFirstWalker:
    """
    Depth-first walker parameterized by visit callbacks.

    ``visit`` is called for every entry before descending into it.
    ``leave`` is called for every directory whose children were all read,
    after its whole subtree was walked. Directories that cannot be read end
    their branch: they are reported in the returned list and ``leave`` is
    not called for them.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def walk(
        self,
        root: str,
        visit: Optional[Callable[[WalkEntry], None]] = None,
        leave: Optional[Callable[[str], None]] = None,
        follow_symlinks: bool = True,
    ) -> list[str]:
        """
        Walk ``root`` depth-first.

        Args:
            root: Directory to start from
            visit: Callback for each entry found
            leave: Callback for each fully read directory, root included
            follow_symlinks: Descend into symlinked directories

        Returns:
            Paths of directories that could not be read
        """
        skipped: list[str] = []
        # Explicit stack, so depth is not bounded by the recursion limit.
        # Children are read up front, so no directory handle stays open per level.
        stack: list[tuple[str, Iterator[WalkEntry]]] = []
        self._enter(stack, root, follow_symlinks, skipped)
        while stack:
            directory, children = stack[-1]
            entry = next(children, None)
            if entry is None:
                stack.pop()
                if leave is not None:
                    leave(directory)
                continue

            if visit is not None:
                visit(entry)
            if entry.is_dir:
                self._enter(stack, entry.path, follow_symlinks, skipped)
        return skipped

    def _enter(
        self,
        stack: list[tuple[str, Iterator[WalkEntry]]],
        directory: str,
        follow_symlinks: bool,
        skipped: list[str],
    ) -> None:
        try:
            children = list(DirectoryIterator(directory, follow_symlinks))
        except OSError as e:
            self._logger.warning(f"Skipping unreadable directory {directory}: {e}")
            skipped.append(directory)
            return
        stack.append((directory, iter(children)))
