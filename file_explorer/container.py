"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.adapters.history.text_file_activity_log import TextFileActivityLog
from file_explorer.entities.session import Session
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.ports.history.activity_log_port import ActivityLogPort
from file_explorer.use_cases.files.copy_file import CopyFileUseCase
from file_explorer.use_cases.files.list_files import ListFilesUseCase
from file_explorer.use_cases.files.make_directory import MakeDirectoryUseCase
from file_explorer.use_cases.files.move_file import MoveFileUseCase
from file_explorer.use_cases.files.remove_path import RemovePathUseCase
from file_explorer.use_cases.files.search_files import SearchFilesUseCase
from file_explorer.use_cases.files.touch_file import TouchFileUseCase
from file_explorer.use_cases.history.show_history import ShowHistoryUseCase
from file_explorer.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from file_explorer.use_cases.navigation.print_directory import PrintDirectoryUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, cwd: Optional[str] = None, log_path: Optional[str] = None):
        """
        Args:
            cwd: Starting directory of the session (default: process working directory)
            log_path: Activity log location (default: activity_log.txt in the process working directory)
        """
        self._cwd = cwd
        self._log_path = log_path
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_session(self) -> Session:
        if "session" not in self._instances:
            self._instances["session"] = Session(self._cwd)
        return self._instances["session"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get filesystem adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_activity_log(self) -> ActivityLogPort:
        """
        Get activity log adapter instance.

        Returns:
            ActivityLogPort implementation
        """
        if "activity_log" not in self._instances:
            self._instances["activity_log"] = TextFileActivityLog(
                self._log_path, logger=self._logger
            )
        return self._instances["activity_log"]

    def _file_use_case(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory(
                self.get_file_system(), self.get_activity_log(), self._logger
            )
        return self._instances[key]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        return self._file_use_case("list_files_use_case", ListFilesUseCase)

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        return self._file_use_case("search_files_use_case", SearchFilesUseCase)

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._file_use_case("copy_file_use_case", CopyFileUseCase)

    def get_move_file_use_case(self) -> MoveFileUseCase:
        return self._file_use_case("move_file_use_case", MoveFileUseCase)

    def get_remove_path_use_case(self) -> RemovePathUseCase:
        return self._file_use_case("remove_path_use_case", RemovePathUseCase)

    def get_touch_file_use_case(self) -> TouchFileUseCase:
        return self._file_use_case("touch_file_use_case", TouchFileUseCase)

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        return self._file_use_case("make_directory_use_case", MakeDirectoryUseCase)

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._file_use_case("change_directory_use_case", ChangeDirectoryUseCase)

    def get_print_directory_use_case(self) -> PrintDirectoryUseCase:
        return self._file_use_case("print_directory_use_case", PrintDirectoryUseCase)

    def get_show_history_use_case(self) -> ShowHistoryUseCase:
        """
        Get show history use case with injected dependencies.

        Returns:
            Configured ShowHistoryUseCase
        """
        if "show_history_use_case" not in self._instances:
            self._instances["show_history_use_case"] = ShowHistoryUseCase(
                self.get_activity_log(), self._logger
            )
        return self._instances["show_history_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
