"""
Path normalization: the first step of every path creation.

Strips boundary separators, rejects empty paths and empty segments, and
short-circuits when the target already exists.
"""

import logging
import os
from typing import List, NamedTuple

from .constants import CREATE_PATH_MESSAGES as MESSAGES
from .constants import PATH_START_END_SLASHES, SPLIT_DIRS
from .diagnostics import Reporter
from .errors import EmptyPathError, EmptyPathSegmentError, PathUtilsError

logger = logging.getLogger(__name__)


class NormalizationResult(NamedTuple):
    """
    Decision reached by normalize_path.

    Attributes:
        proceed: False when a terminal decision was reached; the caller must
            return ``outcome`` without doing anything else.
        outcome: Result to return when ``proceed`` is False.
        path: The path with leading and trailing separators removed.
    """

    proceed: bool
    outcome: bool
    path: str


def strip_separators(path: str) -> str:
    """Remove every leading and trailing '/' from a path."""
    return PATH_START_END_SLASHES.sub("", path)


def split_segments(path: str) -> List[str]:
    """Split a path on interior separator runs, keeping 'D:/' drive prefixes whole."""
    return SPLIT_DIRS.split(path)


def check_segments(path: str) -> None:
    """
    Ensure no segment of the path is empty or whitespace-only.

    Raises:
        EmptyPathSegmentError: If a segment is blank.
    """
    for segment in split_segments(path):
        if segment.strip() == "":
            raise EmptyPathSegmentError(f"Path '{path}' {MESSAGES['EMPTY_DIR_IN_PATH']}")


def normalize_path(path: str, kind: str, reporter: Reporter) -> NormalizationResult:
    """
    Run the normalization steps on a raw path.

    Args:
        path: Raw directory or file path.
        kind: Label used in messages, "Directory" or "File".
        reporter: Where progress and failures are reported.

    Returns:
        NormalizationResult telling the caller whether to continue.
    """
    reporter.normal(f"Start Create {kind} Path '{path}'")

    try:
        path = strip_separators(os.fspath(path))

        if path.strip() == "":
            raise EmptyPathError(MESSAGES["EMPTY_PATH"])

        if os.path.exists(path):
            reporter.success(f"\t{kind} '{path}' Already Exist\n")
            return NormalizationResult(False, True, path)

        check_segments(path)
    except PathUtilsError as e:
        logger.debug(f"Normalization of {path!r} stopped: {e.kind.value}")
        reporter.error(f"\t{kind} {e.message}\n")
        return NormalizationResult(False, False, path)
    except (TypeError, ValueError) as e:
        reporter.error(f"\tUnexpected error in path processing: {e}\n")
        return NormalizationResult(False, False, str(path))

    return NormalizationResult(True, False, path)
