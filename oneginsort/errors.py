"""Exception hierarchy for onegin-sort.

Everything the package raises on purpose derives from OneginSortError, so
callers can catch the whole family in one place. The core (comparator and
ordered index) raises and never logs; turning errors into messages and exit
codes is the command line's job.
"""


class OneginSortError(Exception):
    """Base class for all onegin-sort errors."""
    pass


class InvariantViolation(OneginSortError):
    """Raised when the calling layer misuses the ordered index.

    Building from an empty sequence, or touching an index after teardown,
    are programmer errors and fail fast.
    """
    pass


class AllocationFailure(OneginSortError):
    """Raised when a tree node cannot be allocated during insertion.

    Nodes inserted before the failure stay attached. The partially built
    index travels on the exception as ``index`` so the caller can tear it
    down, including when the failure happened inside ``from_lines``.
    """

    def __init__(self, message: str, inserted: int = 0, index=None):
        super().__init__(message)
        self.inserted = inserted
        self.index = index


class ConfigurationError(OneginSortError):
    """Raised when a SortConfig fails validation."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")


class EmptyInputError(OneginSortError):
    """Raised when the input has no lines to sort.

    The ordered index is never built from zero lines, so the line source
    short-circuits with this error first.
    """
    pass


class InputFileError(OneginSortError):
    """Raised when the input file cannot be read."""
    pass


class OutputFileError(OneginSortError):
    """Raised when the output file cannot be written."""
    pass
