"""
Tests for path_utils.text_file module.

Tests lazy creation, read/write and the push/unshift edits of TextFile.
"""

from pathlib import Path

import pytest

from path_utils.text_file import TextFile, TextFileOptions


@pytest.fixture
def text_file(workdir, sink) -> TextFile:
    """Return a TextFile over output/data.txt holding "A"."""
    handle = TextFile("output/data.txt", TextFileOptions(sink=sink))
    handle.write("A")
    return handle


class TestTextFileCreation:
    """Tests for TextFile construction."""

    def test_creates_empty_file(self, workdir, sink):
        TextFile("notes/log.txt", TextFileOptions(sink=sink))

        assert (workdir / "notes" / "log.txt").read_text() == ""

    def test_creates_file_with_initial_value(self, workdir, sink):
        TextFile("log.txt", TextFileOptions(sink=sink, initial_value="first line"))

        assert (workdir / "log.txt").read_text() == "first line"

    def test_existing_file_untouched(self, workdir, sink):
        (workdir / "log.txt").write_text("kept")

        TextFile("log.txt", TextFileOptions(sink=sink, initial_value="new"))

        assert (workdir / "log.txt").read_text() == "kept"

    def test_extension_check_is_case_insensitive(self, workdir, sink):
        TextFile("UPPER.TXT", TextFileOptions(sink=sink))

        assert sink.messages("error") == []

    def test_invalid_extension_reported(self, workdir, sink):
        TextFile("log.md", TextFileOptions(sink=sink))

        assert "TextFile ERROR : File must be txt type '.txt'" in sink.messages("error")

    def test_default_options(self, workdir):
        handle = TextFile("default.txt")

        assert handle.display is True
        assert (workdir / "default.txt").exists()


class TestTextFileReadWrite:
    """Tests for TextFile.read and TextFile.write."""

    @pytest.mark.asyncio
    async def test_write_then_read(self, text_file):
        assert text_file.write("hello\nworld") is True
        assert await text_file.read() == "hello\nworld"

    @pytest.mark.asyncio
    async def test_crlf_preserved(self, text_file):
        assert text_file.write("a\r\nb") is True
        assert await text_file.read() == "a\r\nb"

    @pytest.mark.asyncio
    async def test_read_invalid_path(self, workdir, sink):
        handle = TextFile("log.md", TextFileOptions(sink=sink))

        assert await handle.read() is None

    @pytest.mark.asyncio
    async def test_read_missing_file(self, text_file, workdir):
        (workdir / "output" / "data.txt").unlink()

        assert await text_file.read() is None

    def test_write_invalid_path(self, workdir, sink):
        handle = TextFile("log.md", TextFileOptions(sink=sink))

        assert handle.write("x") is False


class TestTextFilePushUnshift:
    """Tests for TextFile.push and TextFile.unshift."""

    @pytest.mark.asyncio
    async def test_push(self, text_file):
        assert await text_file.push("B") is True
        assert await text_file.read() == "AB"

    @pytest.mark.asyncio
    async def test_push_new_line(self, text_file):
        assert await text_file.push("B", True) is True
        assert await text_file.read() == "A\nB"

    @pytest.mark.asyncio
    async def test_unshift(self, text_file):
        assert await text_file.unshift("B") is True
        assert await text_file.read() == "BA"

    @pytest.mark.asyncio
    async def test_unshift_new_line(self, text_file):
        assert await text_file.unshift("B", new_line=True) is True
        assert await text_file.read() == "B\nA"

    @pytest.mark.asyncio
    async def test_sequence(self, workdir, sink):
        handle = TextFile("seq.txt", TextFileOptions(sink=sink))
        handle.write("1. First Line")

        await handle.push("2. Appended")
        await handle.push("3. Appended with new line", True)
        await handle.unshift("0. Prepended")
        await handle.unshift("-1. Prepended with new line", True)

        assert await handle.read() == (
            "-1. Prepended with new line\n"
            "0. Prepended1. First Line2. Appended\n"
            "3. Appended with new line"
        )

    @pytest.mark.asyncio
    async def test_push_fails_when_read_fails(self, text_file, workdir):
        (workdir / "output" / "data.txt").unlink()

        assert await text_file.push("B") is False
        assert not (workdir / "output" / "data.txt").exists()

    @pytest.mark.asyncio
    async def test_unshift_invalid_path(self, workdir, sink):
        handle = TextFile("log.md", TextFileOptions(sink=sink))

        assert await handle.unshift("x") is False


class TestTextFileUnusablePath:
    """A path the operating system rejects gives None/False results."""

    @pytest.mark.asyncio
    async def test_null_byte_path(self, workdir, sink):
        handle = TextFile("a\x00b.txt", TextFileOptions(sink=sink))

        assert await handle.read() is None
        assert handle.write("x") is False
        assert await handle.push("x") is False
        assert await handle.unshift("x") is False

    @pytest.mark.asyncio
    async def test_pathlike_path(self, workdir, sink):
        handle = TextFile(Path("notes.txt"), TextFileOptions(sink=sink, initial_value="A"))

        assert await handle.push("B") is True
        assert (workdir / "notes.txt").read_text() == "AB"
