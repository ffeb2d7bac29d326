"""
Shell session entity.
"""

import os
from typing import Optional

from file_explorer.utils.paths import resolve_path


class Session:
    """
    Per-shell context holding the working directory.

    Relative paths typed by the user are resolved against ``cwd``; the
    process working directory is never changed.
    """

    def __init__(self, cwd: Optional[str] = None):
        """
        Initialize the session.

        Args:
            cwd: Starting directory. Defaults to the process working directory.
        """
        self.cwd = os.path.normpath(os.path.abspath(cwd or os.getcwd()))

    def resolve(self, path: str) -> str:
        """Resolve a user path against the session directory."""
        return resolve_path(self.cwd, path)

    def change_to(self, path: str) -> None:
        """Set the session directory. The caller validates the target."""
        self.cwd = self.resolve(path)

    def prompt(self) -> str:
        return f"{self.cwd} $ "

    def __repr__(self) -> str:
        return f"Session(cwd='{self.cwd}')"
