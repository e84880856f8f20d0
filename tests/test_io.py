"""Tests for the line source and the output writer."""

import pytest

from oneginsort import InputFileError, LineBuffer, OutputFileError
from oneginsort.config import EmissionFilter
from oneginsort.io import (
    ORIGINAL_SEPARATOR,
    OutputWriter,
    apply_filter,
    read_buffer,
    read_lines,
    write_lines,
)


def lines_of(*texts):
    return LineBuffer.from_lines(list(texts)).lines()


class TestReader:

    def test_read_lines(self, tmp_path):
        path = tmp_path / "poem.txt"
        path.write_bytes(b"My uncle\r\n\r\nrules of honour\n")

        buffer, lines = read_lines(path)
        assert [line.text for line in lines] == ["My uncle", "", "rules of honour"]
        assert all(line.buffer is buffer for line in lines)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        buffer, lines = read_lines(path)
        assert lines == []
        assert len(buffer) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputFileError) as exc_info:
            read_buffer(tmp_path / "missing.txt")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "not-utf8.txt"
        path.write_bytes("Татьяна\n".encode("cp1251"))
        with pytest.raises(InputFileError):
            read_buffer(path, encoding="utf-8")

    def test_encoding(self, tmp_path):
        path = tmp_path / "cp1251.txt"
        path.write_bytes("Татьяна\n".encode("cp1251"))
        _, lines = read_lines(path, encoding="cp1251")
        assert lines[0].text == "Татьяна"


class TestFilters:

    def test_all(self):
        assert apply_filter(lines_of("")[0], EmissionFilter.ALL) == ""
        assert apply_filter(lines_of("  x")[0], EmissionFilter.ALL) == "  x"

    def test_non_empty(self):
        assert apply_filter(lines_of("")[0], EmissionFilter.NON_EMPTY) is None
        assert apply_filter(lines_of(" ")[0], EmissionFilter.NON_EMPTY) == " "

    @pytest.mark.parametrize("text,expected", [
        ("    Hello there", "Hello there"),
        ("My uncle", "My uncle"),
        ("HELLO", None),
        ("I", None),
        ("I am", None),
        ("XXXVIII", None),
        ("1. Onegin", None),
        ("", None),
        ("\tAb", "Ab"),
        ("lowercase", None),
    ])
    def test_verse(self, text, expected):
        assert apply_filter(lines_of(text)[0], EmissionFilter.VERSE) == expected


class TestWriter:

    def test_writes_records(self, tmp_path):
        path = tmp_path / "out.txt"
        result = write_lines(path, lines_of("b", "", "a"))

        assert path.read_text() == "b\na\n"
        assert result.lines_seen == 3
        assert result.lines_written == 2
        assert result.lines_dropped == 1
        assert not result.original_appended

    def test_truncates_existing_output(self, tmp_path):
        path = tmp_path / "out.txt"
        path.write_text("old content\nthat is long\n")
        write_lines(path, lines_of("new"))
        assert path.read_text() == "new\n"

    def test_append_original(self, tmp_path):
        path = tmp_path / "out.txt"
        original = LineBuffer("b\n\na\n")
        sorted_lines = [original.lines()[2], original.lines()[0]]

        result = write_lines(path, sorted_lines, original=original)

        assert path.read_text() == f"a\nb\n{ORIGINAL_SEPARATOR}\nb\n\na\n"
        assert result.original_appended

    def test_filter_by_name(self, tmp_path):
        path = tmp_path / "out.txt"
        write_lines(path, lines_of("", "x"), emission_filter="all")
        assert path.read_text() == "\nx\n"

    def test_write_outside_context_fails(self, tmp_path):
        writer = OutputWriter(tmp_path / "out.txt")
        with pytest.raises(OutputFileError):
            writer.write_lines(lines_of("x"))

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OutputFileError):
            write_lines(tmp_path / "no" / "such" / "dir" / "out.txt", lines_of("x"))
