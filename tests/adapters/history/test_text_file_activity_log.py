"""
Tests for the TextFileActivityLog.
"""

import os
import re
from datetime import datetime

from file_explorer.adapters.history.text_file_activity_log import (
    ACTIVITY_LOG_FILENAME,
    TextFileActivityLog,
)

LINE_FORMAT = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] .+$")


class TestTextFileActivityLog:
    """Test cases for the TextFileActivityLog."""

    def test_log_action_creates_file(self, log_path, mock_logger):
        activity_log = TextFileActivityLog(log_path, logger=mock_logger)
        assert not os.path.exists(log_path)

        activity_log.log_action("Checked current directory.")

        assert os.path.exists(log_path)

    def test_log_action_format(self, log_path, mock_logger):
        clock = lambda: datetime(2024, 3, 9, 7, 5, 1)  # noqa: E731
        activity_log = TextFileActivityLog(log_path, clock=clock, logger=mock_logger)

        activity_log.log_action("Created directory: sub")

        with open(log_path, encoding="utf-8") as f:
            assert f.read() == "[2024-03-09 07:05:01] Created directory: sub\n"

    def test_log_action_appends_in_order(self, log_path, mock_logger):
        activity_log = TextFileActivityLog(log_path, logger=mock_logger)

        for i in range(3):
            activity_log.log_action(f"action {i}")

        lines = activity_log.read_history()
        assert len(lines) == 3
        assert all(LINE_FORMAT.match(line) for line in lines)
        assert [line.split("] ", 1)[1] for line in lines] == [
            "action 0",
            "action 1",
            "action 2",
        ]

    def test_log_action_keeps_existing_records(self, log_path, mock_logger):
        with open(log_path, "w", encoding="utf-8") as f:
            f.write("[2020-01-01 00:00:00] earlier session\n")
        activity_log = TextFileActivityLog(log_path, logger=mock_logger)

        activity_log.log_action("later")

        lines = activity_log.read_history()
        assert lines[0] == "[2020-01-01 00:00:00] earlier session"
        assert lines[1].endswith("] later")

    def test_log_action_failure_is_silent(self, tmp_path, mock_logger):
        """A log path that cannot be opened never raises."""
        activity_log = TextFileActivityLog(str(tmp_path), logger=mock_logger)

        activity_log.log_action("anything")

        mock_logger.debug.assert_called_once()

    def test_read_history_without_log(self, log_path, mock_logger):
        activity_log = TextFileActivityLog(log_path, logger=mock_logger)

        assert activity_log.read_history() is None

    def test_default_path_is_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        activity_log = TextFileActivityLog()

        assert activity_log.path == os.path.join(os.getcwd(), ACTIVITY_LOG_FILENAME)

    def test_log_action_keeps_undecodable_names(self, log_path, mock_logger):
        """Names read from the file system as surrogate escapes are logged byte for byte."""
        activity_log = TextFileActivityLog(log_path, logger=mock_logger)
        name = os.fsdecode(b"bad\xff.txt")

        activity_log.log_action(f"Removed: {name}")

        with open(log_path, "rb") as f:
            assert f.read().endswith(b"] Removed: bad\xff.txt\n")
        mock_logger.debug.assert_not_called()
        assert activity_log.read_history()[0].endswith("] Removed: bad\ufffd.txt")
