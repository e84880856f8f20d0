"""Line source: read a text file into a LineBuffer.

The file is read in one go; the buffer is the arena every Line points
into, so it has to stay alive as long as any Line or tree built from them.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..config import DEFAULT_ENCODING
from ..core.line import Line, LineBuffer
from ..errors import InputFileError

logger = logging.getLogger(__name__)


def read_buffer(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> LineBuffer:
    """Read a whole file into a LineBuffer.

    Newlines are kept as they are in the file (no universal-newline
    translation); ``LineBuffer.lines`` drops a ``\\r`` before ``\\n``.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        LineBuffer holding the file contents

    Raises:
        InputFileError: If the file cannot be opened, read or decoded
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Cannot read input file {path}: {e}") from e

    logger.debug("Read %d chars from %s", len(text), path)
    return LineBuffer(text)


def read_lines(path: Union[str, Path],
               encoding: str = DEFAULT_ENCODING) -> Tuple[LineBuffer, List[Line]]:
    """Read a file and split it into Lines.

    Returns:
        Tuple of (buffer, lines). Keep the buffer around for as long as the
        lines are in use; ``lines`` is empty for an empty file.
    """
    buffer = read_buffer(path, encoding)
    lines = buffer.lines()
    logger.debug("Split %s into %d lines", path, len(lines))
    return buffer, lines
