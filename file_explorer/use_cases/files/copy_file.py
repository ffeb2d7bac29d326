"""
Use case for copying a file.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class CopyFileUseCase:
    """Use case for copying a file byte for byte."""

    def __init__(
        self,
        file_system: FileSystemPort,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, source: str, destination: str) -> None:
        """
        Copy ``source`` over ``destination``. Only a successful copy is logged.

        Raises:
            FileOperationError: If the copy fails
        """
        try:
            self._logger.info(f"Copying {source} -> {destination}")
            self._file_system.copy_file(
                session.resolve(source), session.resolve(destination)
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise FileOperationError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

        self._activity_log.log_action(f"Copied file: {source} -> {destination}")
