"""
Plain-text activity log adapter.
"""

import logging
import os
from collections.abc import Callable
from datetime import datetime
from typing import Optional

from typing_extensions import override

from file_explorer.entities.log_record import LogRecord
from file_explorer.ports.history.activity_log_port import ActivityLogPort

ACTIVITY_LOG_FILENAME = "activity_log.txt"


class TextFileActivityLog(ActivityLogPort):
    """
    Append-only activity log stored as one ``[timestamp] description`` line per record.

    The file is opened and closed for every record.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the log.

        Args:
            path: Log file location. Defaults to ``activity_log.txt`` in the current directory.
            clock: Returns the local time used for timestamps
            logger: Logger instance to use for logging
        """
        self.path = os.path.abspath(path or ACTIVITY_LOG_FILENAME)
        self._clock = clock or datetime.now
        self._logger = logger or logging.getLogger(__name__)

    @override
    def log_action(self, description: str) -> None:
        record = LogRecord(timestamp=self._clock(), description=description)
        try:
            # Undecodable file names keep their original bytes
            with open(self.path, "a", encoding="utf-8", errors="surrogateescape") as f:
                f.write(record.format() + "\n")
        except (OSError, ValueError) as e:
            # Logging failures are never surfaced to the user
            self._logger.debug(f"Could not write activity log {self.path}: {e}")

    @override
    def read_history(self) -> Optional[list[str]]:
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                return [line.rstrip("\r\n") for line in f]
        except FileNotFoundError:
            return None
        except OSError as e:
            self._logger.debug(f"Could not read activity log {self.path}: {e}")
            return None
