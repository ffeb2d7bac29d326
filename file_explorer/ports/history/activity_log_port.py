"""
Activity log port interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ActivityLogPort(ABC):
    """Port interface for the persistent activity log."""

    @abstractmethod
    def log_action(self, description: str) -> None:
        """
        Append one timestamped record. Never raises.

        Args:
            description: Human-readable description of the action
        """
        pass

    @abstractmethod
    def read_history(self) -> Optional[list[str]]:
        """
        Read every record of the log.

        Returns:
            Lines of the log without newlines, or None if no log exists yet
        """
        pass
