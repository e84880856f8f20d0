"""TreeNode for the ordered index.

The node is intentionally kept simple - it's a data container holding one
Line and two child links. Ordering decisions belong to the OrderedIndex,
walking orders belong to the traversers.
"""

from typing import Iterator, Optional

from .line import Line


class TreeNode:
    """One inserted Line plus its left and right subtrees.

    Everything in ``left`` compares not after this node's line; everything in
    ``right`` compares after it.
    """

    __slots__ = ("line", "left", "right")

    def __init__(self, line: Line):
        self.line = line
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['TreeNode']:
        """Yield existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"TreeNode({self.line.text!r})"
