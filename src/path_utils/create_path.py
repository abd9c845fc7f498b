"""
Directory and file path creation.

Creates complete paths such as ``path/to/dir``, ``path/to/file.ext`` or
``D:/path/to/dir``, one directory level at a time, and writes the initial
content of files (serialized as JSON for ``.json`` paths).
"""

import json
import logging
import os
from typing import Any, Optional

from .constants import CREATE_PATH_MESSAGES as MESSAGES
from .constants import (
    DEFAULT_DISPLAY_INFO,
    FILE_ENCODING,
    JSON_EXTENSION,
    JSON_SEPARATORS,
    SEPARATOR,
)
from .diagnostics import DiagnosticSink, Reporter
from .errors import DirectoryCreationError, FileCreationError
from .normalize import normalize_path, split_segments

logger = logging.getLogger(__name__)


def serialize_content(path: str, content: Any) -> str:
    """
    Turn file content into the text written to disk.

    JSON paths get compact JSON; anything else is written as ``str(content)``.
    """
    if JSON_EXTENSION.search(path):
        return json.dumps(content, separators=JSON_SEPARATORS, ensure_ascii=False, allow_nan=False)
    return str(content)


class CreatePath:
    """
    Creates directory and file paths with per-level error reporting.

    Example:
        creator = CreatePath()
        creator.make_dir("output/nested/folders")
        creator.make_file("output/config.json", {"name": "path-utils"})
    """

    def __init__(self, display: bool = DEFAULT_DISPLAY_INFO, sink: Optional[DiagnosticSink] = None):
        """
        Args:
            display: Whether diagnostic messages are emitted.
            sink: Diagnostic sink. Defaults to a LoggingSink.
        """
        self.display = display
        self.reporter = Reporter(sink=sink, display=display)

    def make_dir(self, path: str = "", nested: bool = False) -> bool:
        """
        Create a directory path, including every missing parent.

        Args:
            path: The directory path to create.
            nested: True when called from make_file with an already
                normalized path; skips normalization.

        Returns:
            True if every level exists or was created, False otherwise.
        """
        if not nested:
            proceed, outcome, path = normalize_path(path, "Directory", self.reporter)
            if not proceed:
                return outcome

        segments = split_segments(path)

        current = ""
        for index, segment in enumerate(segments):
            current += segment + ("" if index == len(segments) - 1 else SEPARATOR)

            if os.path.exists(current):
                self.reporter.success(f"\tDirectory '{current}' Already Exist.")
                continue

            try:
                self._create_level(current)
            except DirectoryCreationError as e:
                self.reporter.error(f"\t{e.message}\n")
                return False
            self.reporter.success(f"\tDirectory '{current}' Was Created.")

        if not nested:
            self.reporter.normal("")
        return True

    def make_file(self, path: str = "", content: Any = "") -> bool:
        """
        Create a file with the given content, creating parent directories first.

        An existing file is left untouched and counts as success.

        Args:
            path: The file path to create.
            content: Content to write. Serialized as JSON when the path ends
                in '.json', written as text otherwise.

        Returns:
            True if the file was created, False otherwise.
        """
        proceed, outcome, path = normalize_path(path, "File", self.reporter)
        if not proceed:
            return outcome

        parts = path.split(SEPARATOR)
        parent = SEPARATOR.join(parts[:-1])

        if len(parts) > 1 and not self.make_dir(parent, nested=True):
            return False

        try:
            self._write(path, content)
        except FileCreationError as e:
            self.reporter.error(f"\t{e.message}\n")
            return False

        self.reporter.success(f"\tFile '{path}' Was Created.\n")
        return True

    def _create_level(self, path: str) -> None:
        """Create exactly one directory level; its parent must already exist."""
        try:
            os.mkdir(path)
        except (OSError, ValueError) as e:
            raise DirectoryCreationError(
                f"{MESSAGES['DIR_CREATION_ERROR']} '{path}' | Error Message : {e}"
            ) from e

    def _write(self, path: str, content: Any) -> None:
        try:
            text = serialize_content(path, content)
            with open(path, "w", encoding=FILE_ENCODING, newline="") as f:
                f.write(text)
        except (OSError, TypeError, ValueError) as e:
            raise FileCreationError(
                f"{MESSAGES['FILE_CREATION_ERROR']} '{path}' | Error: {e}"
            ) from e
        logger.debug(f"Wrote {len(text)} characters to {path}")


def create_directory(
    path: str,
    display: bool = DEFAULT_DISPLAY_INFO,
    sink: Optional[DiagnosticSink] = None,
) -> bool:
    """Create a directory path with a one-off CreatePath. See CreatePath.make_dir."""
    return CreatePath(display=display, sink=sink).make_dir(path)


def create_file(
    path: str,
    content: Any = "",
    display: bool = DEFAULT_DISPLAY_INFO,
    sink: Optional[DiagnosticSink] = None,
) -> bool:
    """Create a file with a one-off CreatePath. See CreatePath.make_file."""
    return CreatePath(display=display, sink=sink).make_file(path, content)
