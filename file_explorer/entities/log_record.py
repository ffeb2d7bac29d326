"""
Activity log record entity.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_LINE_PATTERN = re.compile(r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] (.*)$")


@dataclass(frozen=True)
class LogRecord:
    """One line of the activity log: ``[<timestamp>] <description>``."""

    timestamp: datetime
    description: str

    def format(self) -> str:
        return f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] {self.description}"

    @classmethod
    def parse(cls, line: str) -> Optional["LogRecord"]:
        """
        Parse a log line back into a record.

        Args:
            line: A single line from the log file, with or without newline

        Returns:
            LogRecord, or None if the line is not in the record format
        """
        match = _LINE_PATTERN.match(line.rstrip("\r\n"))
        if not match:
            return None
        try:
            timestamp = datetime.strptime(match.group(1), TIMESTAMP_FORMAT)
        except ValueError:
            return None
        return cls(timestamp=timestamp, description=match.group(2))
