"""Test configuration and fixtures for path-utils tests."""

import sys
from pathlib import Path
from typing import List, Tuple

import pytest

# Add src to path for development testing
_src_dir = Path(__file__).parent.parent / "src"
if _src_dir.exists():
    sys.path.insert(0, str(_src_dir))


# ==============================================================================
# Diagnostic sink that records calls
# ==============================================================================

class RecordingSink:
    """Sink that keeps every (level, message) pair it receives."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def normal(self, message: str) -> None:
        self.records.append(("normal", message))

    def success(self, message: str) -> None:
        self.records.append(("success", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> List[str]:
        """Return the messages recorded at one level."""
        return [message for lvl, message in self.records if lvl == level]


# ==============================================================================
# Shared pytest fixtures
# ==============================================================================

@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """
    Run the test inside tmp_path.

    Leading separators are stripped during normalization, so tests work
    with relative paths from a temporary working directory.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink."""
    return RecordingSink()
