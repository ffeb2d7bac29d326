"""
Use case for reading back the activity log.
"""

import logging
from typing import Optional

from file_explorer.ports.history.activity_log_port import ActivityLogPort


class ShowHistoryUseCase:
    """Use case for reading the whole activity log."""

    def __init__(
        self,
        activity_log: ActivityLogPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._activity_log = activity_log
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> Optional[list[str]]:
        """
        Read every record, oldest first.

        Returns:
            Log lines, or None when no history has been recorded yet
        """
        lines = self._activity_log.read_history()
        if lines is None:
            self._logger.info("No activity log found")
        else:
            self._logger.info(f"Read {len(lines)} activity records")
        return lines
