"""
Directory listing with name exclusion.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import aiofiles.os

from .constants import READ_DIRECTORY_MESSAGES as MESSAGES

logger = logging.getLogger(__name__)


@dataclass
class DirectoryListing:
    """Result of read_directory. ``items`` is None when ``error`` is True."""

    items: Optional[List[str]] = None
    error: bool = False
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {"items": self.items, "error": self.error, "message": self.message}


async def read_directory(
    path: str = "",
    names_to_exclude: Optional[Iterable[str]] = None,
) -> DirectoryListing:
    """
    List the names of the entries in a directory, skipping some of them.

    Exclusion is by exact entry name. The order of the remaining items is
    the order the operating system returns them in.

    Args:
        path: Directory to list.
        names_to_exclude: Entry names to leave out.

    Returns:
        DirectoryListing with the items, or with ``error`` set and the
        reason in ``message``.
    """
    if not path or not isinstance(path, str):
        return DirectoryListing(None, True, f"{MESSAGES['ID']} {MESSAGES['INVALID_PATH']}")

    excluded = set(names_to_exclude or ())

    try:
        entries = await aiofiles.os.listdir(path)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not list {path}: {e}")
        return DirectoryListing(None, True, f"{MESSAGES['ID']} {e}")

    items = [name for name in entries if name not in excluded]
    return DirectoryListing(items, False, "")
