"""
Use case for creating a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class MakeDirectoryUseCase:
    """Use case for creating one directory level."""

    def __init__(
        self,
        file_system: FileSystemPort,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, path: str) -> None:
        """
        Create ``path``. Parents are not created.

        Raises:
            FileOperationError: If the directory exists or its parent is missing
        """
        try:
            self._logger.info(f"Creating directory: {path}")
            self._file_system.make_directory(session.resolve(path))
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise FileOperationError(f"Failed to create directory {path}: {str(e)}")
        finally:
            self._activity_log.log_action(f"Created directory: {path}")
