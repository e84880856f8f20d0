"""Tree traversal strategies for the ordered index.

Traversers implement the different orders for walking a binary tree of
TreeNodes. All of them are iterative and keep their own explicit stack,
so a tree skewed into a long chain (sorted or reverse-sorted input) walks
without hitting the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    A traverser holds no state between calls: every call to ``traverse``
    starts a fresh, independent walk.
    """

    @abstractmethod
    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        """Traverse the tree starting from root.

        Args:
            root: Root of the tree, or None for an empty tree

        Yields:
            TreeNode instances in this strategy's order
        """
        pass

    def __call__(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        return self.traverse(root)


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal (left subtree, node, right subtree).

    On a binary search tree this visits the nodes in ascending key order,
    which is what turns the tree into a sort.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        stack: List[TreeNode] = []
        current = root

        while stack or current is not None:
            # Slide down the left spine, remembering the way back up
            while current is not None:
                stack.append(current)
                current = current.left

            current = stack.pop()
            yield current
            current = current.right


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal (left subtree, right subtree, node).

    Visits children before their parent, which is the order teardown
    needs: a node is only released once nothing below it is left.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        if root is None:
            return

        # (node, children_done) pairs
        stack: List[Tuple[TreeNode, bool]] = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                yield node
                continue

            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

