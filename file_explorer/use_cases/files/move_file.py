"""
Use case for moving or renaming an entry.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class MoveFileUseCase:
    """Use case for moving or renaming an entry within one filesystem."""

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
        Rename ``source`` to ``destination``.

        The attempt is logged whether or not it succeeds. Moves across
        filesystems fail with kind CROSS_DEVICE; there is no copy fallback.

        Raises:
            FileOperationError: If the rename fails
        """
        try:
            self._logger.info(f"Moving {source} -> {destination}")
            self._file_system.move(
                session.resolve(source), session.resolve(destination)
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error moving file: {e}")
            raise FileOperationError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )
        finally:
            self._activity_log.log_action(f"Moved/Renamed: {source} -> {destination}")
