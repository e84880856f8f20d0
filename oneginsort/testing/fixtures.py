"""Test fixtures for onegin-sort consumers.

These fixtures give tests a view of node allocation and release inside an
OrderedIndex without making that bookkeeping part of the public API.
"""

from typing import Any, Dict, Iterable, Optional, Set

from ..config import Direction
from ..core.line import Line
from ..core.node import TreeNode
from ..core.tree import OrderedIndex, TreeState
from ..errors import InvariantViolation


class AllocationTracker:
    """Counts node allocations and releases.

    Nodes are tracked by identity, so releasing the same node twice or
    releasing a node that was never allocated is recorded rather than
    silently absorbed.

    Example:
        tracker = AllocationTracker()
        index = CountingOrderedIndex.from_lines(lines, tracker=tracker)
        index.teardown()
        assert tracker.get_summary()['leaked'] == 0
    """

    def __init__(self, fail_after: Optional[int] = None):
        """Initialize the tracker.

        Args:
            fail_after: Raise MemoryError on allocation number
                ``fail_after + 1`` (None = never fail)
        """
        self.fail_after = fail_after
        self.allocated = 0
        self.released = 0
        self.double_released = 0
        self.foreign_released = 0
        self._live: Set[int] = set()
        self._dead: Set[int] = set()

    def on_allocate(self, node: TreeNode) -> None:
        self.allocated += 1
        self._live.add(id(node))

    def check_budget(self) -> None:
        if self.fail_after is not None and self.allocated >= self.fail_after:
            raise MemoryError("simulated allocation failure")

    def on_release(self, node: TreeNode) -> None:
        node_id = id(node)
        if node_id in self._dead:
            self.double_released += 1
            return
        if node_id not in self._live:
            self.foreign_released += 1
            return
        self._live.remove(node_id)
        self._dead.add(node_id)
        self.released += 1

    @property
    def live(self) -> int:
        return len(self._live)

    def get_summary(self) -> Dict[str, Any]:
        """Returns allocation state for testing.

        Returns:
            Dictionary containing:
            - allocated: Nodes created
            - released: Nodes released exactly once
            - leaked: Nodes created but never released
            - double_released: Release calls on an already released node
            - foreign_released: Release calls on nodes this tracker never saw
        """
        return {
            'allocated': self.allocated,
            'released': self.released,
            'leaked': self.live,
            'double_released': self.double_released,
            'foreign_released': self.foreign_released,
        }


class CountingOrderedIndex(OrderedIndex):
    """OrderedIndex that reports every allocation and release to a tracker."""

    def __init__(self, direction: Direction = Direction.FORWARD,
                 tracker: Optional[AllocationTracker] = None):
        super().__init__(direction)
        self.tracker = tracker or AllocationTracker()

    @classmethod
    def from_lines(cls, lines: Iterable[Line],
                   direction: Direction = Direction.FORWARD,
                   tracker: Optional[AllocationTracker] = None) -> 'CountingOrderedIndex':
        index = cls(direction, tracker)
        index.extend(lines)
        if index.state is TreeState.EMPTY:
            raise InvariantViolation("Cannot build an ordered index from zero lines")
        return index

    def _allocate_node(self, line: Line) -> TreeNode:
        self.tracker.check_budget()
        node = super()._allocate_node(line)
        self.tracker.on_allocate(node)
        return node

    def _release_node(self, node: TreeNode) -> None:
        self.tracker.on_release(node)
        super()._release_node(node)
