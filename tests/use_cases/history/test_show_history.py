"""
Tests for the ShowHistoryUseCase.
"""

from unittest.mock import MagicMock

from file_explorer.ports.history.activity_log_port import ActivityLogPort
from file_explorer.use_cases.history.show_history import ShowHistoryUseCase


class TestShowHistoryUseCase:
    def test_returns_log_lines(self, mock_logger):
        mock_activity_log = MagicMock(spec=ActivityLogPort)
        mock_activity_log.read_history.return_value = [
            "[2024-01-01 10:00:00] Checked current directory.",
        ]

        use_case = ShowHistoryUseCase(mock_activity_log, mock_logger)

        assert use_case.execute() == ["[2024-01-01 10:00:00] Checked current directory."]
        mock_logger.info.assert_called_once_with("Read 1 activity records")

    def test_no_history(self, mock_logger):
        mock_activity_log = MagicMock(spec=ActivityLogPort)
        mock_activity_log.read_history.return_value = None

        use_case = ShowHistoryUseCase(mock_activity_log, mock_logger)

        assert use_case.execute() is None
        mock_logger.info.assert_called_once_with("No activity log found")
