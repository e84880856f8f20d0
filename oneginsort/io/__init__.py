"""File input and output around the core: line source and output writer."""

from .reader import read_buffer, read_lines
from .writer import (
    ORIGINAL_SEPARATOR,
    OutputWriter,
    WriteResult,
    apply_filter,
    write_lines,
)

__all__ = [
    "read_buffer",
    "read_lines",
    "ORIGINAL_SEPARATOR",
    "OutputWriter",
    "WriteResult",
    "apply_filter",
    "write_lines",
]
