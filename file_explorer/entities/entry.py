"""
Directory entry domain entity.
"""

import os
import stat
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Entry:
    """
    A single child of a listed directory (file or directory).
    """

    name: str
    path: str
    is_dir: bool
    size: int

    @classmethod
    def from_stat(cls, name: str, path: str, stat_result: os.stat_result) -> "Entry":
        """
        Build an entry from a stat result.

        Args:
            name: Entry name inside its parent directory
            path: Full path of the entry
            stat_result: Result of os.stat on the entry

        Returns:
            Entry instance
        """
        return cls(
            name=name,
            path=path,
            is_dir=stat.S_ISDIR(stat_result.st_mode),
            size=stat_result.st_size,
        )

    def get_details(self) -> dict[str, Any]:
        """
        Get entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "type": "directory" if self.is_dir else "file",
        }

    def format_line(self) -> str:
        """Render the entry as a listing line."""
        marker = "[DIR]  " if self.is_dir else "       "
        return f"{marker}{self.name}\t({self.size} bytes)"

    def __str__(self) -> str:
        return f"Entry(name='{self.name}', size={self.size}, is_dir={self.is_dir})"
