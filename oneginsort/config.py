"""Configuration system for onegin-sort.

This module defines how users specify a sort run: which direction lines are
scanned in, which algorithm orders them, which lines make it to the output
file and where that file goes.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar, Union


class Direction(Enum):
    """Which end of a line the alphabetic-only scan starts from."""
    FORWARD = "forward"     # First character to last (default)
    BACKWARD = "backward"   # Last character to first (rhyme order)


class SortAlgorithm(Enum):
    """How the lines are ordered.

    Both algorithms use the same comparator, so they agree on key order.
    They may disagree on the relative order of lines that compare equal.
    """
    TREE = "tree"     # Binary search tree + in-order traversal
    QSORT = "qsort"   # Generic comparison sort


class EmissionFilter(Enum):
    """Which sorted lines are written to the output file."""
    ALL = "all"               # Every line, blank ones included
    NON_EMPTY = "non-empty"   # Drop zero-length lines
    VERSE = "verse"           # Only lines starting with an Upper+lower pair


DEFAULT_OUTPUT = "output.txt"
DEFAULT_ENCODING = "utf-8"

E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Accept either an enum member or its value/name as a string.

    Raises:
        ValueError: If the string does not name a member of ``enum_cls``
    """
    if isinstance(value, enum_cls):
        return value

    text = str(value).strip().lower()
    for member in enum_cls:
        if text in (member.value, member.name.lower(), member.name.lower().replace("_", "-")):
            return member

    choices = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"Unknown {enum_cls.__name__}: {value}. Choose from: {choices}")


def parse_direction(value: Union[Direction, str]) -> Direction:
    return _parse_enum(Direction, value)


def parse_algorithm(value: Union[SortAlgorithm, str]) -> SortAlgorithm:
    return _parse_enum(SortAlgorithm, value)


def parse_emission_filter(value: Union[EmissionFilter, str]) -> EmissionFilter:
    return _parse_enum(EmissionFilter, value)


@dataclass
class SortConfig:
    """Complete configuration for one sort run.

    This is what the CLI builds from its arguments and what
    :func:`oneginsort.api.sort_file` consumes.
    """

    # Files
    input_path: Optional[Path] = None
    output_path: Path = Path(DEFAULT_OUTPUT)
    encoding: str = DEFAULT_ENCODING

    # Ordering
    direction: Direction = Direction.FORWARD
    algorithm: SortAlgorithm = SortAlgorithm.TREE

    # Output shaping
    emission_filter: EmissionFilter = EmissionFilter.NON_EMPTY
    append_original: bool = False

    def __post_init__(self):
        # Normalise loose inputs so callers can pass strings
        if self.input_path is not None and not isinstance(self.input_path, Path):
            self.input_path = Path(self.input_path)
        if not isinstance(self.output_path, Path):
            self.output_path = Path(self.output_path)
        self.direction = parse_direction(self.direction)
        self.algorithm = parse_algorithm(self.algorithm)
        self.emission_filter = parse_emission_filter(self.emission_filter)

    @classmethod
    def from_namespace(cls, namespace: Any) -> 'SortConfig':
        """Create config from an ``argparse.Namespace``.

        Args:
            namespace: Parsed command line arguments

        Returns:
            SortConfig reflecting the arguments
        """
        return cls(
            input_path=namespace.input,
            output_path=namespace.output,
            encoding=namespace.encoding,
            direction=Direction.BACKWARD if namespace.reversed else Direction.FORWARD,
            algorithm=namespace.algorithm,
            emission_filter=namespace.filter,
            append_original=namespace.append_original,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.input_path is None:
            errors.append("input_path is required")
        elif self.input_path.is_dir():
            errors.append(f"input_path is a directory: {self.input_path}")

        if str(self.output_path) in ("", "."):
            errors.append("output_path cannot be empty")
        elif self.output_path.is_dir():
            errors.append(f"output_path is a directory: {self.output_path}")

        if (self.input_path is not None and self.input_path.exists()
                and self.output_path.exists()
                and self.input_path.resolve() == self.output_path.resolve()):
            errors.append("output_path would overwrite input_path")

        if not self.encoding:
            errors.append("encoding cannot be empty")
        else:
            try:
                "".encode(self.encoding)
            except LookupError:
                errors.append(f"unknown encoding: {self.encoding}")

        return errors
