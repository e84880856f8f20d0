"""High-level API for onegin-sort.

This module provides simple, functional interfaces for the common cases:
sorting Lines already in memory, and running a whole file-to-file sort
from a SortConfig.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from .config import Direction, SortAlgorithm, SortConfig, parse_algorithm, parse_direction
from .core.comparator import LineComparator
from .core.line import Line
from .core.tree import OrderedIndex
from .errors import ConfigurationError, EmptyInputError
from .io.reader import read_lines
from .io.writer import write_lines

logger = logging.getLogger(__name__)


def tree_sort(lines: Sequence[Line],
              direction: Union[Direction, str] = Direction.FORWARD) -> List[Line]:
    """Sort lines with the ordered index.

    Builds the tree, reads it back in order and tears it down.

    Args:
        lines: Lines in input order
        direction: Comparator scan direction

    Returns:
        Lines in ascending comparator order (empty for empty input)

    Example:
        >>> buffer = LineBuffer.from_lines(["Hello, world!", "apple", "Banana"])
        >>> [line.text for line in tree_sort(buffer.lines())]
        ['apple', 'Banana', 'Hello, world!']
    """
    if not lines:
        return []

    with OrderedIndex.from_lines(lines, parse_direction(direction)) as index:
        return index.sorted_lines()


def comparison_sort(lines: Sequence[Line],
                    direction: Union[Direction, str] = Direction.FORWARD) -> List[Line]:
    """Sort lines with a generic comparison sort and the same comparator.

    Agrees with :func:`tree_sort` on key order. Unlike the tree, it keeps
    equal lines in input order.
    """
    comparator = LineComparator(direction)
    return sorted(lines, key=comparator.key)


def sort_lines(lines: Sequence[Line],
               direction: Union[Direction, str] = Direction.FORWARD,
               algorithm: Union[SortAlgorithm, str] = SortAlgorithm.TREE) -> List[Line]:
    """Sort lines with the chosen algorithm."""
    if parse_algorithm(algorithm) is SortAlgorithm.TREE:
        return tree_sort(lines, direction)
    return comparison_sort(lines, direction)


@dataclass
class SortReport:
    """Summary of a file-to-file sort."""
    input_path: Path
    output_path: Path
    direction: Direction
    algorithm: SortAlgorithm
    lines_read: int
    lines_written: int
    original_appended: bool = False


def sort_file(config: SortConfig) -> SortReport:
    """Read, sort and write according to ``config``.

    Args:
        config: Complete run configuration

    Returns:
        SortReport with line counts

    Raises:
        ConfigurationError: If the config does not validate
        InputFileError: If the input cannot be read
        EmptyInputError: If the input has no lines; no output is created
        OutputFileError: If the output cannot be written
    """
    errors = config.validate()
    if errors:
        raise ConfigurationError(errors)

    buffer, lines = read_lines(config.input_path, config.encoding)
    if not lines:
        raise EmptyInputError(f"Input file {config.input_path} was empty")

    logger.info("Sorting %d lines from %s (%s, %s)", len(lines), config.input_path,
                config.algorithm.value, config.direction.value)

    ordered = sort_lines(lines, config.direction, config.algorithm)
    result = write_lines(
        config.output_path,
        ordered,
        emission_filter=config.emission_filter,
        original=buffer if config.append_original else None,
        encoding=config.encoding,
    )

    logger.info("Wrote %d lines to %s", result.lines_written, config.output_path)
    return SortReport(
        input_path=config.input_path,
        output_path=config.output_path,
        direction=config.direction,
        algorithm=config.algorithm,
        lines_read=len(lines),
        lines_written=result.lines_written,
        original_appended=result.original_appended,
    )
