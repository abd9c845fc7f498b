"""
Tests for path_utils.read_directory module.
"""

import os

import pytest

from path_utils.read_directory import DirectoryListing, read_directory


@pytest.fixture
def populated(tmp_path):
    """A directory holding three files and one sub-directory."""
    for name in ("a.txt", "b.json", "c.log"):
        (tmp_path / name).write_text("")
    (tmp_path / "sub").mkdir()
    return tmp_path


class TestReadDirectory:
    """Tests for read_directory function."""

    @pytest.mark.asyncio
    async def test_lists_all_entries(self, populated):
        result = await read_directory(str(populated))

        assert result.error is False
        assert result.message == ""
        assert sorted(result.items) == ["a.txt", "b.json", "c.log", "sub"]

    @pytest.mark.asyncio
    async def test_excludes_names_keeping_order(self, populated):
        expected = [n for n in os.listdir(populated) if n not in ("b.json", "sub")]

        result = await read_directory(str(populated), ["b.json", "sub"])

        assert result.items == expected
        assert "b.json" not in result.items

    @pytest.mark.asyncio
    async def test_exclusion_is_exact_name(self, populated):
        result = await read_directory(str(populated), ["a", "*.log", "sub/"])

        assert sorted(result.items) == ["a.txt", "b.json", "c.log", "sub"]

    @pytest.mark.asyncio
    async def test_empty_directory(self, tmp_path):
        result = await read_directory(str(tmp_path))

        assert result == DirectoryListing([], False, "")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["", None, 42])
    async def test_invalid_path(self, path):
        result = await read_directory(path)

        assert result == DirectoryListing(None, True, "READDIR ERROR: Invalid directory path")

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path):
        result = await read_directory(str(tmp_path / "missing"))

        assert result.items is None
        assert result.error is True
        assert result.message.startswith("READDIR ERROR: ")
        assert "missing" in result.message

    @pytest.mark.asyncio
    async def test_to_dict(self, tmp_path):
        result = await read_directory(str(tmp_path))

        assert result.to_dict() == {"items": [], "error": False, "message": ""}

    @pytest.mark.asyncio
    async def test_null_byte_path(self):
        result = await read_directory("a\x00b")

        assert result.items is None
        assert result.error is True
        assert result.message.startswith("READDIR ERROR: ")
