"""
Use case for listing the contents of a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.entry import Entry
from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class ListFilesUseCase:
    """Use case for listing the contents of a directory."""

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
            activity_log: Log receiving one record per listing
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, path: str = ".") -> list[Entry]:
        """
        List the direct children of a directory.

        Nothing is recorded in the activity log when the listing fails.

        Args:
            session: Session used to resolve relative paths
            path: Directory as typed by the user

        Returns:
            List of Entry entities

        Raises:
            FileOperationError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {path}")
            entries = self._file_system.list_directory(session.resolve(path))
            self._logger.info(f"Found {len(entries)} entries")
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileOperationError(f"Failed to list {path}: {str(e)}")

        self._activity_log.log_action(f"Listed contents of: {path}")
        return entries
