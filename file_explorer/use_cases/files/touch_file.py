"""
Use case for creating an empty file or refreshing its timestamps.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class TouchFileUseCase:
    """Use case behind the ``touch`` command."""

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
        try:
            self._logger.info(f"Touching file: {path}")
            self._file_system.touch(session.resolve(path))
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error touching file: {e}")
            raise FileOperationError(f"Failed to touch {path}: {str(e)}")
        finally:
            self._activity_log.log_action(f"Created or updated file: {path}")
