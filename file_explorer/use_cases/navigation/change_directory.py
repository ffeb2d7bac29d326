"""
Use case for changing the session working directory.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class ChangeDirectoryUseCase:
    """Use case for changing the session working directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to validate the target directory
            activity_log: Log receiving one record per attempt
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, path: str) -> str:
        """
        Move the session to ``path``.

        The session is left unchanged when the target is invalid.

        Args:
            session: Session to update
            path: Target directory as typed by the user

        Returns:
            The new absolute working directory

        Raises:
            FileOperationError: If the target is missing, not a directory or not searchable
        """
        try:
            target = session.resolve(path)
            self._logger.info(f"Changing directory to: {target}")
            self._file_system.ensure_directory(target)
            session.change_to(target)
            return session.cwd
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileOperationError(f"Failed to change directory to {path}: {str(e)}")
        finally:
            self._activity_log.log_action(f"Changed directory to: {path}")
