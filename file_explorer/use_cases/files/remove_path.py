"""
Use case for recursively removing a file or directory.
"""

import logging
from typing import Optional

from file_explorer.entities.reports import RemovalReport
from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort
from file_explorer.utils.paths import display_path


class RemovePathUseCase:
    """Use case for removing a file, or a directory and everything below it."""

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
            activity_log: Log receiving one record per visited path
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, path: str) -> RemovalReport:
        """
        Remove ``path`` depth-first.

        Every visited path is logged, whether or not its removal succeeded.
        Entries that could not be removed are returned in ``skipped``.

        Args:
            session: Session used to resolve relative paths
            path: File or directory as typed by the user

        Returns:
            RemovalReport with display paths

        Raises:
            FileOperationError: If the removal fails unexpectedly
        """
        try:
            self._logger.info(f"Removing: {path}")
            resolved = session.resolve(path)
            removed = self._file_system.remove_tree(resolved)
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error removing path: {e}")
            raise FileOperationError(f"Failed to remove {path}: {str(e)}")

        report = RemovalReport(
            visited=[display_path(path, resolved, p) for p in removed.visited],
            skipped=[display_path(path, resolved, p) for p in removed.skipped],
        )
        for visited in report.visited:
            self._activity_log.log_action(f"Removed: {visited}")
        if report.skipped:
            self._logger.warning(
                f"{len(report.skipped)} entries could not be removed under {path}"
            )
        return report
