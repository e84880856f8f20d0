"""Line spans over a shared text buffer.

The whole input is read once into a LineBuffer (the arena). Each Line is a
view into it: the buffer, a start offset and a length. The core reads
characters through the view and never slices the text; ``Line.text`` builds
a ``str`` only when a line is about to be written out.
"""

from typing import Iterator, List, Optional


class LineBuffer:
    """Owned text buffer that Lines point into.

    Every Line keeps a reference to its buffer, so the buffer outlives any
    Line (and any tree built from those Lines).
    """

    __slots__ = ("_text", "_lines")

    def __init__(self, text: str):
        self._text = text
        self._lines: Optional[List['Line']] = None

    @property
    def text(self) -> str:
        """The complete original text."""
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"LineBuffer(chars={len(self._text)}, lines={len(self.lines())})"

    def lines(self) -> List['Line']:
        """Split the buffer into Line spans, terminators excluded.

        Lines are separated by ``\\n``; a ``\\r`` right before it is dropped
        too. A trailing newline does not produce an extra empty line, but
        blank lines in the middle are kept as zero-length Lines.

        Returns:
            List of Lines in file order (empty for an empty buffer)
        """
        if self._lines is None:
            self._lines = list(self._split())
        return self._lines

    def _split(self) -> Iterator['Line']:
        text = self._text
        end = len(text)
        start = 0

        while start < end:
            newline = text.find("\n", start)
            if newline == -1:
                newline = end
                next_start = end
            else:
                next_start = newline + 1

            stop = newline
            if stop > start and text[stop - 1] == "\r":
                stop -= 1

            yield Line(self, start, stop - start)
            start = next_start

    @classmethod
    def from_lines(cls, texts) -> 'LineBuffer':
        """Build a buffer from already separated strings.

        Convenient for tests and for callers that hold lines in memory.
        """
        return cls("\n".join(texts) + "\n" if texts else "")


class Line:
    """Immutable view over a run of characters in a LineBuffer.

    Indexing returns single characters of the line (``line[0]`` is its
    first character). Two Lines are the same Line only if they are the same
    object; equality of content is the comparator's business.
    """

    __slots__ = ("_buffer", "_start", "_length")

    def __init__(self, buffer: LineBuffer, start: int, length: int):
        if start < 0 or length < 0 or start + length > len(buffer):
            raise ValueError(
                f"Span [{start}, {start + length}) is outside buffer of {len(buffer)} chars"
            )
        self._buffer = buffer
        self._start = start
        self._length = length

    @classmethod
    def of(cls, text: str) -> 'Line':
        """Create a Line backed by its own single-line buffer."""
        return cls(LineBuffer(text), 0, len(text))

    @property
    def buffer(self) -> LineBuffer:
        return self._buffer

    @property
    def start(self) -> int:
        return self._start

    @property
    def text(self) -> str:
        """Materialise the line as a string."""
        return self._buffer.text[self._start:self._start + self._length]

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> str:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("line index out of range")
        return self._buffer.text[self._start + index]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Line({self.text!r})"
