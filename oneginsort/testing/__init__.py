"""Testing utilities for onegin-sort consumers."""

from .fixtures import AllocationTracker, CountingOrderedIndex

__all__ = ['AllocationTracker', 'CountingOrderedIndex']
