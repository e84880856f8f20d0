"""Core of onegin-sort: the line comparator and the ordered index.

Nothing in here does I/O or logging. Errors are raised to the caller.
"""

from .line import Line, LineBuffer
from .comparator import LineComparator, alphabetic_key, compare, is_alpha, to_lower
from .node import TreeNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PostOrderTraverser,
)
from .tree import OrderedIndex, TreeState, build

__all__ = [
    "Line",
    "LineBuffer",
    "LineComparator",
    "alphabetic_key",
    "compare",
    "is_alpha",
    "to_lower",
    "TreeNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "OrderedIndex",
    "TreeState",
    "build",
]
