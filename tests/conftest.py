"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_explorer.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def log_path(tmp_path):
    """Activity log location kept outside of temp_directory."""
    return str(tmp_path / "activity_log.txt")


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(temp_directory, log_path, mock_logger):
    """
    Create a dependency container rooted in temp_directory for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(cwd=temp_directory, log_path=log_path)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def console():
    """Console writing plain text into a buffer."""
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        soft_wrap=True,
        highlight=False,
    )
