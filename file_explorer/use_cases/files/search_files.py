"""
Use case for searching entries by name below a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.reports import SearchReport
from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort
from file_explorer.utils.paths import display_path


class SearchFilesUseCase:
    """Use case for recursively searching entries whose name contains a pattern."""

    def __init__(
        self,
        file_system: FileSystemPort,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            activity_log: Log receiving one record per scanned directory
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, pattern: str, root: str = ".") -> SearchReport:
        """
        Search ``root`` and all its subdirectories for names containing ``pattern``.

        Returned paths are expressed from ``root`` as typed, e.g. ``./sub/a.txt``.

        Args:
            session: Session used to resolve relative paths
            pattern: Substring to look for in entry names
            root: Directory to start from, as typed by the user

        Returns:
            SearchReport with display paths

        Raises:
            FileOperationError: If the search fails unexpectedly
        """
        try:
            self._logger.info(
                f"Searching for entries containing '{pattern}' in directory: {root}"
            )
            resolved = session.resolve(root)
            found = self._file_system.search(resolved, pattern)
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            raise FileOperationError(
                f"Failed to search {root} for {pattern}: {str(e)}"
            )

        report = SearchReport(
            matches=[display_path(root, resolved, p) for p in found.matches],
            scanned=[display_path(root, resolved, p) for p in found.scanned],
            skipped=[display_path(root, resolved, p) for p in found.skipped],
        )
        for directory in report.scanned:
            self._activity_log.log_action(f"Searched for: {pattern} in {directory}")
        self._logger.info(
            f"Found {len(report.matches)} entries matching pattern '{pattern}'"
        )
        return report
