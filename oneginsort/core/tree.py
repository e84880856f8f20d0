"""Ordered index: a binary search tree of Lines.

Lines are inserted one by one, in input order, descending from the root by
the alphabetic-only comparator. Reading the tree back with an in-order walk
yields the lines sorted. Once the lines have been emitted the whole tree is
torn down in one post-order pass.

Tie-break: when a node compares greater than *or equal to* the line being
inserted, the line goes left. Lines with equal keys therefore do not keep
their input order in general; where they land depends on the tree's shape.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional

from ..config import Direction, parse_direction
from ..errors import AllocationFailure, InvariantViolation
from .comparator import compare
from .line import Line
from .node import TreeNode
from .traverser import InOrderTraverser, PostOrderTraverser


class TreeState(Enum):
    """Lifecycle of an OrderedIndex."""
    EMPTY = "empty"           # No root yet
    BUILT = "built"           # Root set, insertions allowed
    DESTROYED = "destroyed"   # Torn down; terminal


class OrderedIndex:
    """Binary search tree over Lines, ordered by the line comparator.

    The index owns every node it allocates. Nodes form a strict tree and are
    only ever released by :meth:`teardown`.

    Example:
        >>> with OrderedIndex.from_lines(lines) as index:
        ...     for line in index:
        ...         print(line)
    """

    # Traversers keep no per-walk state, so one instance serves every index
    _in_order = InOrderTraverser()
    _post_order = PostOrderTraverser()

    def __init__(self, direction: Direction = Direction.FORWARD):
        self.direction = parse_direction(direction)
        self.root: Optional[TreeNode] = None
        self._size = 0
        self._state = TreeState.EMPTY

    @classmethod
    def from_lines(cls, lines: Iterable[Line],
                   direction: Direction = Direction.FORWARD) -> 'OrderedIndex':
        """Build an index from lines in input order.

        Args:
            lines: Non-empty sequence of Lines
            direction: Scan direction for the comparator

        Returns:
            A BUILT OrderedIndex

        Raises:
            InvariantViolation: If ``lines`` is empty
            AllocationFailure: If a node cannot be allocated
        """
        index = cls(direction)
        for line in lines:
            index.insert(line)

        if index.state is TreeState.EMPTY:
            raise InvariantViolation("Cannot build an ordered index from zero lines")
        return index

    @property
    def state(self) -> TreeState:
        return self._state

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(direction={self.direction.value}, "
                f"size={self._size}, state={self._state.value})")

    def __enter__(self) -> 'OrderedIndex':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._state is not TreeState.DESTROYED:
            self.teardown()
        return None

    def _require_alive(self, operation: str) -> None:
        if self._state is TreeState.DESTROYED:
            raise InvariantViolation(f"Cannot {operation} an ordered index after teardown")

    def _allocate_node(self, line: Line) -> TreeNode:
        """Create the node for a newly inserted line."""
        return TreeNode(line)

    def _release_node(self, node: TreeNode) -> None:
        """Unlink a node during teardown; its children are already released."""
        node.left = None
        node.right = None

    def _new_node(self, line: Line) -> TreeNode:
        try:
            return self._allocate_node(line)
        except MemoryError as e:
            raise AllocationFailure(
                f"Could not allocate node for line {self._size + 1}",
                inserted=self._size,
                index=self,
            ) from e

    def insert(self, line: Line) -> TreeNode:
        """Insert one line.

        The first line becomes the root. Later lines descend from the root:
        left when the node compares greater than or equal to the line,
        right otherwise, until a free child slot is found.

        Args:
            line: Line to insert

        Returns:
            The new TreeNode

        Raises:
            InvariantViolation: If the index was torn down
            AllocationFailure: If the node cannot be allocated
        """
        self._require_alive("insert into")

        if self.root is None:
            self.root = self._new_node(line)
            self._size = 1
            self._state = TreeState.BUILT
            return self.root

        parent = self.root
        direction = self.direction
        while True:
            if compare(parent.line, line, direction) >= 0:
                if parent.left is None:
                    parent.left = node = self._new_node(line)
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node = self._new_node(line)
                    break
                parent = parent.right

        self._size += 1
        return node

    def extend(self, lines: Iterable[Line]) -> None:
        """Insert several lines in order."""
        for line in lines:
            self.insert(line)

    def traverse_in_order(self) -> Iterator[Line]:
        """Lines in ascending comparator order.

        Each call starts a new walk, so the result can be consumed more than
        once by calling again. A walk still in progress when the index is
        torn down raises on its next step.

        Raises:
            InvariantViolation: If the index was torn down
        """
        self._require_alive("traverse")
        return self._walk_in_order(self.root)

    def _walk_in_order(self, root: Optional[TreeNode]) -> Iterator[Line]:
        for node in self._in_order.traverse(root):
            self._require_alive("traverse")
            yield node.line
        self._require_alive("traverse")

    def __iter__(self) -> Iterator[Line]:
        return self.traverse_in_order()

    def sorted_lines(self) -> List[Line]:
        """Materialise :meth:`traverse_in_order` into a list."""
        return list(self.traverse_in_order())

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        self._require_alive("measure")
        if self.root is None:
            return 0

        height = 0
        level = [self.root]
        while level:
            height += 1
            level = [child for node in level for child in node.children()]
        return height

    def teardown(self) -> int:
        """Release every node, children before parents.

        Returns:
            Number of nodes released

        Raises:
            InvariantViolation: If called a second time
        """
        self._require_alive("tear down")

        released = 0
        for node in self._post_order.traverse(self.root):
            self._release_node(node)
            released += 1

        self.root = None
        self._size = 0
        self._state = TreeState.DESTROYED
        return released


def build(lines: Iterable[Line], direction: Direction = Direction.FORWARD) -> OrderedIndex:
    """Build an OrderedIndex from lines in input order.

    See :meth:`OrderedIndex.from_lines`.
    """
    return OrderedIndex.from_lines(lines, direction)
