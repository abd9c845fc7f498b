"""
JSON file handle: read and write a single ``.json`` file.

The file is created with an initial value the first time a handle is
constructed for a missing path.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from .constants import JSON_EXTENSION, JSON_FILE_MESSAGES, JSON_SEPARATORS
from .diagnostics import Options
from .errors import FileCreationError, NullDataError, PathUtilsError, ReadFailureError
from .managed_file import ManagedFile


@dataclass
class JsonFileOptions(Options):
    """Options for JsonFile; initial_value is written when the file is missing."""

    initial_value: Any = field(default_factory=dict)


class JsonFile(ManagedFile):
    """
    Manage a JSON file (read | write).

    Example:
        data_file = JsonFile("output/data.json", JsonFileOptions(initial_value={"items": []}))
        data = await data_file.read()
        data["items"].append({"id": 1})
        data_file.write(data)
    """

    extension = JSON_EXTENSION
    messages = JSON_FILE_MESSAGES
    options_class = JsonFileOptions

    async def read(self) -> Any:
        """
        Read and parse the JSON file.

        Returns:
            The parsed value, or None if the path is invalid, the file
            cannot be read, or its content is not valid JSON.
        """
        if not self._check_path():
            return None

        try:
            text = await self._read_text()
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise ReadFailureError(
                    f"{self.messages['READ_ERROR']} '{self._file_path}'\nError Message : 'Invalid JSON: {e}'"
                ) from e
        except PathUtilsError as e:
            self._error(e.message)
            return None

    def write(self, data: Any = None) -> bool:
        """
        Serialize data as JSON and overwrite the file with it.

        Args:
            data: Any JSON-serializable value except None.

        Returns:
            True if the file was written, False otherwise.
        """
        try:
            if data is None:
                raise NullDataError(self.messages["NULL_DATA"])
            if not self._check_path():
                return False
            try:
                text = json.dumps(data, separators=JSON_SEPARATORS, ensure_ascii=False, allow_nan=False)
            except (TypeError, ValueError) as e:
                raise FileCreationError(
                    f"{self.messages['WRITE_ERROR']} '{self._file_path}'\nError Message : '{e}'"
                ) from e
            self._write_text(text)
        except PathUtilsError as e:
            self._error(e.message)
            return False
        return True
