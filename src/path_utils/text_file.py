"""
Text file handle: read, write, push and unshift a single ``.txt`` file.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import TEXT_FILE_MESSAGES, TXT_EXTENSION
from .diagnostics import Options
from .errors import PathUtilsError
from .managed_file import ManagedFile


@dataclass
class TextFileOptions(Options):
    """Options for TextFile; initial_value is written when the file is missing."""

    initial_value: str = ""


class TextFile(ManagedFile):
    """
    Manage a text file (read | write | push | unshift).

    push and unshift read the file, change the text and write it back. They
    are not atomic: two concurrent calls on the same file can lose an update,
    so callers sharing a file must serialize them.
    """

    extension = TXT_EXTENSION
    messages = TEXT_FILE_MESSAGES
    options_class = TextFileOptions

    async def read(self) -> Optional[str]:
        """
        Read the text file.

        Returns:
            The file content, or None if the path is invalid or the file
            cannot be read.
        """
        if not self._check_path():
            return None

        try:
            return await self._read_text()
        except PathUtilsError as e:
            self._error(e.message)
            return None

    def write(self, text: str = "") -> bool:
        """Overwrite the file with text. Returns True on success."""
        if not self._check_path():
            return False

        try:
            self._write_text(str(text))
        except PathUtilsError as e:
            self._error(e.message)
            return False
        return True

    async def push(self, text: str = "", new_line: bool = False) -> bool:
        """
        Append text at the end of the file.

        Args:
            text: Text to append.
            new_line: Put a newline between the old content and the text.

        Returns:
            True if the new content was written, False otherwise.
        """
        old_content = await self.read()
        if old_content is None:
            return False

        separator = "\n" if new_line else ""
        return self.write(f"{old_content}{separator}{text}")

    async def unshift(self, text: str = "", new_line: bool = False) -> bool:
        """
        Insert text at the beginning of the file.

        Args:
            text: Text to prepend.
            new_line: Put a newline between the text and the old content.

        Returns:
            True if the new content was written, False otherwise.
        """
        old_content = await self.read()
        if old_content is None:
            return False

        separator = "\n" if new_line else ""
        return self.write(f"{text}{separator}{old_content}")
