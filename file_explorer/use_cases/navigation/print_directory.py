"""
Use case for reporting the session working directory.
"""

import errno
import logging
import os
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import ErrorKind, FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort


class PrintDirectoryUseCase:
    """Use case behind the ``pwd`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session) -> str:
        """
        Return the session directory.

        Raises:
            FileOperationError: If the directory was removed since the last ``cd``
        """
        try:
            if not self._file_system.is_directory(session.cwd):
                raise FileOperationError(
                    os.strerror(errno.ENOENT), ErrorKind.NOT_FOUND, session.cwd
                )
            return session.cwd
        finally:
            self._activity_log.log_action("Checked current directory.")
