"""
Custom exceptions for the application.
"""

import errno
from enum import Enum
from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ErrorKind(str, Enum):
    """Classification of a failed filesystem call."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    CROSS_DEVICE = "cross_device"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    OTHER = "other"


_ERRNO_KINDS: dict[int, ErrorKind] = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.EACCES: ErrorKind.PERMISSION_DENIED,
    errno.EPERM: ErrorKind.PERMISSION_DENIED,
    errno.EEXIST: ErrorKind.ALREADY_EXISTS,
    errno.EXDEV: ErrorKind.CROSS_DEVICE,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: ErrorKind.IS_A_DIRECTORY,
}


class FileOperationError(BaseAppError):
    """
    Exception raised when a filesystem operation fails.

    Carries the error kind so callers can branch on it instead of parsing
    the OS-provided message.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.OTHER,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.path = path

    @classmethod
    def from_os_error(
        cls, error: OSError, path: Optional[str] = None
    ) -> "FileOperationError":
        """
        Build an error from an OSError raised by a syscall wrapper.

        Args:
            error: The original OS error
            path: Path to report; defaults to the error's own filename

        Returns:
            FileOperationError with the kind mapped from errno
        """
        kind = _ERRNO_KINDS.get(error.errno or 0, ErrorKind.OTHER)
        message = error.strerror or str(error)
        if path is None and error.filename is not None:
            path = str(error.filename)
        return cls(message, kind=kind, path=path)

    def __str__(self) -> str:
        return self.message
