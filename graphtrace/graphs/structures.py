"""
Supporting data structures: union-find and a binary min-heap priority queue.

UnionFind backs Kruskal's cycle test. PriorityQueue backs Dijkstra and Prim;
it has no decrease-key, so consumers push a node again when its priority
improves and skip stale entries when they are popped.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 6.5 (priority queues) and 21.3 (disjoint-set forests).
"""

import heapq
from itertools import count
from typing import Any, List, Tuple


class UnionFind:
    """
    Union-Find (Disjoint Set) over elements 0..n-1 with path compression
    and union by rank.

    Used by Kruskal's algorithm for efficient cycle detection.
    """

    def __init__(self, size: int):
        """
        Initialize union-find with `size` singleton sets.

        Args:
            size: Number of elements.
        """
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size

    def find(self, x: int) -> int:
        """
        Find root of x with path compression.

        Args:
            x: Element index.

        Returns:
            Index of the representative of x's set.
        """
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> bool:
        """
        Union sets containing x and y using union by rank.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True

    def __len__(self) -> int:
        return len(self.parent)


class PriorityQueue:
    """
    Binary min-heap of (item, priority) pairs.

    Equal priorities pop in insertion order. The same item may be queued
    several times; callers filter stale entries themselves.

    Complexity:
        - push: O(log n)
        - pop: O(log n)
        - is_empty: O(1)
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Any]] = []
        self._counter = count()

    def push(self, item: Any, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> Any:
        """
        Remove and return the item with the smallest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        return item

    def pop_with_priority(self) -> Tuple[Any, float]:
        """Remove and return the smallest (item, priority) pair."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
