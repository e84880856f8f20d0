"""Output writer: filter sorted lines and write them to a file.

The ordered index emits every line it holds. Deciding which of them are
worth writing (blank lines, prose fragments between stanzas) happens here,
through an EmissionFilter.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Union

from ..config import DEFAULT_ENCODING, EmissionFilter, parse_emission_filter
from ..core.line import Line, LineBuffer
from ..errors import OutputFileError

logger = logging.getLogger(__name__)

ORIGINAL_SEPARATOR = "=" * 40


def _emit_all(line: Line) -> Optional[str]:
    return line.text


def _emit_non_empty(line: Line) -> Optional[str]:
    if len(line) == 0:
        return None
    return line.text


def _emit_verse(line: Line) -> Optional[str]:
    """Keep lines that read like verse: Upper+lower after leading whitespace.

    Drops stanza numbers and headings in capitals. The leading whitespace
    is not written.
    """
    text = line.text.lstrip()
    if len(text) < 2:
        return None
    if "A" <= text[0] <= "Z" and "a" <= text[1] <= "z":
        return text
    return None


_FILTERS: Dict[EmissionFilter, Callable[[Line], Optional[str]]] = {
    EmissionFilter.ALL: _emit_all,
    EmissionFilter.NON_EMPTY: _emit_non_empty,
    EmissionFilter.VERSE: _emit_verse,
}


def apply_filter(line: Line, emission_filter: EmissionFilter) -> Optional[str]:
    """Text to write for ``line``, or None if the filter drops it."""
    return _FILTERS[emission_filter](line)


@dataclass
class WriteResult:
    """What an OutputWriter did."""
    path: Path
    lines_seen: int = 0
    lines_written: int = 0
    original_appended: bool = False

    @property
    def lines_dropped(self) -> int:
        return self.lines_seen - self.lines_written


class OutputWriter:
    """Writes one ``\\n``-terminated record per emitted line.

    The file is opened in truncate mode when the writer is entered, so an
    earlier output is replaced, never appended to.

    Example:
        >>> with OutputWriter("output.txt") as writer:
        ...     writer.write_lines(index)
        ...     writer.write_original(buffer)
    """

    def __init__(self,
                 path: Union[str, Path],
                 emission_filter: Union[EmissionFilter, str] = EmissionFilter.NON_EMPTY,
                 encoding: str = DEFAULT_ENCODING):
        self.path = Path(path)
        self.emission_filter = parse_emission_filter(emission_filter)
        self.encoding = encoding
        self.result = WriteResult(path=self.path)
        self._file = None

    def __enter__(self) -> 'OutputWriter':
        try:
            self._file = open(self.path, "w", encoding=self.encoding, newline="\n")
        except OSError as e:
            raise OutputFileError(f"Cannot open output file {self.path}: {e}") from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is not None:
            try:
                self._file.close()
            except OSError as e:
                if exc_type is None:
                    raise OutputFileError(f"Cannot close output file {self.path}: {e}") from e
            finally:
                self._file = None
        return None

    def _write(self, text: str) -> None:
        if self._file is None:
            raise OutputFileError(f"Output file {self.path} is not open")
        try:
            self._file.write(text)
            self._file.write("\n")
        except (OSError, UnicodeEncodeError) as e:
            raise OutputFileError(f"Cannot write output file {self.path}: {e}") from e

    def write_lines(self, lines: Iterable[Line]) -> WriteResult:
        """Write the lines that pass the emission filter, in the given order."""
        for line in lines:
            self.result.lines_seen += 1
            text = apply_filter(line, self.emission_filter)
            if text is None:
                continue
            self._write(text)
            self.result.lines_written += 1

        logger.debug("Wrote %d of %d lines to %s (filter=%s)",
                     self.result.lines_written, self.result.lines_seen,
                     self.path, self.emission_filter.value)
        return self.result

    def write_original(self, buffer: LineBuffer,
                       separator: str = ORIGINAL_SEPARATOR) -> WriteResult:
        """Append the original text, unfiltered, after a separator line."""
        self._write(separator)
        for line in buffer.lines():
            self._write(line.text)
        self.result.original_appended = True
        logger.debug("Appended original text (%d lines) to %s",
                     len(buffer.lines()), self.path)
        return self.result


def write_lines(path: Union[str, Path],
                lines: Iterable[Line],
                emission_filter: Union[EmissionFilter, str] = EmissionFilter.NON_EMPTY,
                original: Optional[LineBuffer] = None,
                encoding: str = DEFAULT_ENCODING) -> WriteResult:
    """Write sorted lines (and optionally the original text) to ``path``.

    Args:
        path: Output file, truncated if it exists
        lines: Lines in output order
        emission_filter: Which lines to keep
        original: Buffer whose text is appended after the sorted lines
        encoding: Output encoding

    Returns:
        WriteResult with line counts

    Raises:
        OutputFileError: If the file cannot be written
    """
    with OutputWriter(path, emission_filter, encoding) as writer:
        writer.write_lines(lines)
        if original is not None:
            writer.write_original(original)
    return writer.result
