"""onegin-sort - sort lines of text by their letters alone.

Lines are compared ignoring everything but ASCII letters, case-insensitively,
scanning either from the start of each line or from its end. Sorting is done
by a binary search tree read back in order, or by a generic comparison sort.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
In memory:
    from oneginsort import LineBuffer, tree_sort
    sorted_lines = tree_sort(LineBuffer(text).lines())

File to file:
    from oneginsort import SortConfig, sort_file
    sort_file(SortConfig(input_path="onegin.txt"))
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.3.0"

from .config import (
    Direction,
    SortAlgorithm,
    EmissionFilter,
    SortConfig,
)
from .errors import (
    OneginSortError,
    InvariantViolation,
    AllocationFailure,
    ConfigurationError,
    EmptyInputError,
    InputFileError,
    OutputFileError,
)
from .core import (
    Line,
    LineBuffer,
    LineComparator,
    alphabetic_key,
    compare,
    OrderedIndex,
    TreeState,
    build,
)
from .api import (
    tree_sort,
    comparison_sort,
    sort_lines,
    sort_file,
    SortReport,
)

__all__ = [
    "__version__",
    # Config
    "Direction",
    "SortAlgorithm",
    "EmissionFilter",
    "SortConfig",
    # Errors
    "OneginSortError",
    "InvariantViolation",
    "AllocationFailure",
    "ConfigurationError",
    "EmptyInputError",
    "InputFileError",
    "OutputFileError",
    # Core
    "Line",
    "LineBuffer",
    "LineComparator",
    "alphabetic_key",
    "compare",
    "OrderedIndex",
    "TreeState",
    "build",
    # API
    "tree_sort",
    "comparison_sort",
    "sort_lines",
    "sort_file",
    "SortReport",
]
