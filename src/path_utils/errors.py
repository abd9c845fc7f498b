"""
Error kinds and exception types for path-utils.

Public operations never let these escape: they are raised by the
validation helpers and converted to a ``False``/``None`` result by the
operation that detects them.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failure reported by path-utils operations."""

    EMPTY_PATH = "EmptyPath"
    INVALID_EXTENSION = "InvalidExtension"
    EMPTY_PATH_SEGMENT = "EmptyPathSegment"
    NULL_DATA = "NullData"
    DIRECTORY_CREATION_FAILURE = "DirectoryCreationFailure"
    FILE_CREATION_FAILURE = "FileCreationFailure"
    READ_FAILURE = "ReadFailure"


class PathUtilsError(Exception):
    """Base exception for path-utils errors."""

    kind: ErrorKind = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyPathError(PathUtilsError):
    """Path is empty or whitespace-only."""

    kind = ErrorKind.EMPTY_PATH


class InvalidExtensionError(PathUtilsError):
    """File path does not carry the extension its handle requires."""

    kind = ErrorKind.INVALID_EXTENSION


class EmptyPathSegmentError(PathUtilsError):
    """Path contains an empty segment, like 'a//b' or 'a/ /b'."""

    kind = ErrorKind.EMPTY_PATH_SEGMENT


class NullDataError(PathUtilsError):
    """Write called without data."""

    kind = ErrorKind.NULL_DATA


class DirectoryCreationError(PathUtilsError):
    """A directory level could not be created."""

    kind = ErrorKind.DIRECTORY_CREATION_FAILURE


class FileCreationError(PathUtilsError):
    """A file could not be created or written."""

    kind = ErrorKind.FILE_CREATION_FAILURE


class ReadFailureError(PathUtilsError):
    """A file could not be read or parsed."""

    kind = ErrorKind.READ_FAILURE
