"""
Common behavior of the file handles (JsonFile, TextFile).

A handle is bound to one path. On construction it checks the path and
creates the file with an initial value when it is missing. Reads are
asynchronous, writes are synchronous, and every failure is turned into a
``None``/``False`` result plus an error message.
"""

import logging
import os
import re
from typing import Any, ClassVar, Dict, Optional

import aiofiles

from .constants import FILE_ENCODING
from .create_path import CreatePath
from .diagnostics import Options, Reporter
from .errors import (
    EmptyPathError,
    FileCreationError,
    InvalidExtensionError,
    PathUtilsError,
    ReadFailureError,
)

logger = logging.getLogger(__name__)


class ManagedFile:
    """
    Base class for handles bound to a single file path.

    Subclasses set ``extension`` (a compiled regex), ``messages`` and
    ``options_class``.
    """

    extension: ClassVar[re.Pattern]
    messages: ClassVar[Dict[str, str]]
    options_class: ClassVar[type] = Options

    def __init__(self, file_path: str = "", options: Optional[Options] = None):
        if options is None:
            options = self.options_class()
        self.options = options
        self.display = options.display
        self._file_path = self._coerce_path(file_path)
        self.reporter = Reporter.from_options(options)
        self.path_creator = CreatePath(display=options.display, sink=options.sink)

        self._check_path()

        if not self._exists():
            self.path_creator.make_file(self._file_path, self._initial_content())

    @property
    def path(self) -> str:
        """The path this handle is bound to."""
        return self._file_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._file_path!r})"

    @staticmethod
    def _coerce_path(file_path: Any) -> Any:
        """Convert os.PathLike paths to str; other values are kept and fail validation."""
        try:
            return os.fspath(file_path)
        except TypeError:
            return file_path

    def _initial_content(self) -> Any:
        if hasattr(self.options, "initial_value"):
            return self.options.initial_value
        return self.options_class().initial_value

    def _exists(self) -> bool:
        try:
            return os.path.exists(self._file_path)
        except (TypeError, ValueError):
            return False

    def _error(self, message: str) -> None:
        self.reporter.error(f"{self.messages['ID']} {message}")

    def _validate(self) -> None:
        """
        Raise if the bound path is unusable.

        Raises:
            EmptyPathError: If the path is empty or whitespace-only.
            InvalidExtensionError: If the path lacks the handle's extension.
        """
        path = self._file_path
        if not isinstance(path, str) or path.strip() == "":
            raise EmptyPathError(self.messages["EMPTY_PATH"])
        if not self.extension.search(path):
            raise InvalidExtensionError(self.messages["INVALID_TYPE"])

    def _check_path(self) -> bool:
        """Validate the bound path, reporting the failure. Returns True if valid."""
        try:
            self._validate()
        except PathUtilsError as e:
            self._error(e.message)
            return False
        return True

    async def _read_text(self) -> str:
        """
        Read the whole file as text.

        Raises:
            ReadFailureError: If the file cannot be opened or decoded.
        """
        try:
            async with aiofiles.open(self._file_path, "r", encoding=FILE_ENCODING, newline="") as f:
                return await f.read()
        except (OSError, ValueError) as e:
            raise ReadFailureError(
                f"{self.messages['READ_ERROR']} '{self._file_path}'\nError Message : '{e}'"
            ) from e

    def _write_text(self, text: str) -> None:
        """
        Overwrite the file with text.

        Raises:
            FileCreationError: If the file cannot be written.
        """
        try:
            with open(self._file_path, "w", encoding=FILE_ENCODING, newline="") as f:
                f.write(text)
        except (OSError, ValueError) as e:
            raise FileCreationError(
                f"{self.messages['WRITE_ERROR']} '{self._file_path}'\nError Message : '{e}'"
            ) from e
        logger.debug(f"Wrote {len(text)} characters to {self._file_path}")

