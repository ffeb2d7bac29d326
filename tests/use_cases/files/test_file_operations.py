"""
Tests for the copy, move, remove, touch and mkdir use cases.
"""

from unittest.mock import MagicMock

import pytest

from file_explorer.entities.reports import RemovalReport
from file_explorer.entities.session import Session
from file_explorer.exceptions import ErrorKind, FileOperationError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort
from file_explorer.use_cases.files.copy_file import CopyFileUseCase
from file_explorer.use_cases.files.make_directory import MakeDirectoryUseCase
from file_explorer.use_cases.files.move_file import MoveFileUseCase
from file_explorer.use_cases.files.remove_path import RemovePathUseCase
from file_explorer.use_cases.files.touch_file import TouchFileUseCase


@pytest.fixture
def mock_file_system():
    return MagicMock(spec=FileSystemPort)


@pytest.fixture
def mock_activity_log():
    return MagicMock(spec=ActivityLogPort)


@pytest.fixture
def session():
    return Session("/work")


def _denied():
    return FileOperationError("Permission denied", ErrorKind.PERMISSION_DENIED)


class TestCopyFileUseCase:
    def test_success_is_logged(self, mock_file_system, mock_activity_log, session, mock_logger):
        use_case = CopyFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        use_case.execute(session, "a.txt", "backup/a.txt")

        mock_file_system.copy_file.assert_called_once_with(
            "/work/a.txt", "/work/backup/a.txt"
        )
        mock_activity_log.log_action.assert_called_once_with(
            "Copied file: a.txt -> backup/a.txt"
        )

    def test_failure_is_not_logged(self, mock_file_system, mock_activity_log, session, mock_logger):
        mock_file_system.copy_file.side_effect = _denied()
        use_case = CopyFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        with pytest.raises(FileOperationError) as exc_info:
            use_case.execute(session, "a.txt", "b.txt")

        assert exc_info.value.kind == ErrorKind.PERMISSION_DENIED
        mock_activity_log.log_action.assert_not_called()


class TestMoveFileUseCase:
    def test_success_is_logged(self, mock_file_system, mock_activity_log, session, mock_logger):
        use_case = MoveFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        use_case.execute(session, "old.txt", "/tmp/new.txt")

        mock_file_system.move.assert_called_once_with("/work/old.txt", "/tmp/new.txt")
        mock_activity_log.log_action.assert_called_once_with(
            "Moved/Renamed: old.txt -> /tmp/new.txt"
        )

    def test_failed_attempt_is_logged(self, mock_file_system, mock_activity_log, session, mock_logger):
        mock_file_system.move.side_effect = FileOperationError(
            "Invalid cross-device link", ErrorKind.CROSS_DEVICE
        )
        use_case = MoveFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        with pytest.raises(FileOperationError) as exc_info:
            use_case.execute(session, "a", "/mnt/b")

        assert exc_info.value.kind == ErrorKind.CROSS_DEVICE
        mock_activity_log.log_action.assert_called_once_with("Moved/Renamed: a -> /mnt/b")

    def test_unexpected_error(self, mock_file_system, mock_activity_log, session, mock_logger):
        mock_file_system.move.side_effect = Exception("boom")
        use_case = MoveFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        with pytest.raises(FileOperationError, match="Failed to move a to b: boom"):
            use_case.execute(session, "a", "b")

        mock_logger.error.assert_called_once_with("Error moving file: boom")


class TestRemovePathUseCase:
    def test_every_visited_path_is_logged(
        self, mock_file_system, mock_activity_log, session, mock_logger
    ):
        mock_file_system.remove_tree.return_value = RemovalReport(
            visited=["/work/tree/x.txt", "/work/tree/sub", "/work/tree"],
            skipped=["/work/tree/sub"],
        )
        use_case = RemovePathUseCase(mock_file_system, mock_activity_log, mock_logger)

        report = use_case.execute(session, "tree")

        mock_file_system.remove_tree.assert_called_once_with("/work/tree")
        assert report.visited == ["tree/x.txt", "tree/sub", "tree"]
        assert report.skipped == ["tree/sub"]
        assert [c.args[0] for c in mock_activity_log.log_action.call_args_list] == [
            "Removed: tree/x.txt",
            "Removed: tree/sub",
            "Removed: tree",
        ]
        mock_logger.warning.assert_called_once()

    def test_single_file(self, mock_file_system, mock_activity_log, session, mock_logger):
        mock_file_system.remove_tree.return_value = RemovalReport(
            visited=["/work/a.txt"]
        )
        use_case = RemovePathUseCase(mock_file_system, mock_activity_log, mock_logger)

        report = use_case.execute(session, "a.txt")

        assert report.visited == ["a.txt"]
        assert report.succeeded
        mock_activity_log.log_action.assert_called_once_with("Removed: a.txt")


class TestTouchFileUseCase:
    def test_success(self, mock_file_system, mock_activity_log, session, mock_logger):
        use_case = TouchFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        use_case.execute(session, "notes.md")

        mock_file_system.touch.assert_called_once_with("/work/notes.md")
        mock_activity_log.log_action.assert_called_once_with(
            "Created or updated file: notes.md"
        )

    def test_failed_attempt_is_logged(self, mock_file_system, mock_activity_log, session, mock_logger):
        mock_file_system.touch.side_effect = _denied()
        use_case = TouchFileUseCase(mock_file_system, mock_activity_log, mock_logger)

        with pytest.raises(FileOperationError):
            use_case.execute(session, "locked.md")

        mock_activity_log.log_action.assert_called_once_with(
            "Created or updated file: locked.md"
        )


class TestMakeDirectoryUseCase:
    def test_success(self, mock_file_system, mock_activity_log, session, mock_logger):
        use_case = MakeDirectoryUseCase(mock_file_system, mock_activity_log, mock_logger)

        use_case.execute(session, "sub")

        mock_file_system.make_directory.assert_called_once_with("/work/sub")
        mock_activity_log.log_action.assert_called_once_with("Created directory: sub")

    def test_already_exists_is_still_logged(
        self, mock_file_system, mock_activity_log, session, mock_logger
    ):
        mock_file_system.make_directory.side_effect = FileOperationError(
            "File exists", ErrorKind.ALREADY_EXISTS
        )
        use_case = MakeDirectoryUseCase(mock_file_system, mock_activity_log, mock_logger)

        with pytest.raises(FileOperationError) as exc_info:
            use_case.execute(session, "sub")

        assert exc_info.value.kind == ErrorKind.ALREADY_EXISTS
        mock_activity_log.log_action.assert_called_once_with("Created directory: sub")
