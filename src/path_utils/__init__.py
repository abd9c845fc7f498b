"""
path-utils - filesystem convenience helpers.

This package provides:
- Complete path creation for directories and files (CreatePath)
- JSON file handles with lazy creation (JsonFile)
- Text file handles with push/unshift (TextFile)
- Directory listing with name exclusion (read_directory)
"""

import logging

__version__ = "1.1.0"
__author__ = "path-utils Contributors"

# Path creation
from .create_path import CreatePath, create_directory, create_file

# Diagnostics
from .diagnostics import DiagnosticSink, LoggingSink, NullSink, Options

# Errors
from .errors import ErrorKind, PathUtilsError

# File handles
from .json_file import JsonFile, JsonFileOptions
from .text_file import TextFile, TextFileOptions

# Directory listing
from .read_directory import DirectoryListing, read_directory

_package_logger = logging.getLogger(__name__)
_package_logger.addHandler(logging.NullHandler())
_package_logger.propagate = False

__all__ = [
    # Path creation
    "CreatePath",
    "create_directory",
    "create_file",
    # Diagnostics
    "DiagnosticSink",
    "LoggingSink",
    "NullSink",
    "Options",
    # Errors
    "ErrorKind",
    "PathUtilsError",
    # File handles
    "JsonFile",
    "JsonFileOptions",
    "TextFile",
    "TextFileOptions",
    # Directory listing
    "DirectoryListing",
    "read_directory",
    # Version
    "__version__",
]
