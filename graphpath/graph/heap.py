"""Indexed binary min-heap with in-place decrease-key.

Slots are 1-based: slot 1 holds the vertex with the smallest priority and
the parent of slot ``i`` is ``i // 2``. A side index maps each vertex to
its current slot (0 when the vertex is not in the heap), which lets
``push_or_decrease`` locate and re-sift an existing entry in O(log n).
"""

from __future__ import annotations

from typing import List, Optional

from ..domain.models import Distance


class IndexedMinHeap:
    """Binary min-heap of ``(vertex, priority)`` pairs keyed by vertex id.

    Args:
        capacity: Maximum number of distinct vertices held at once.
        index_size: Number of addressable vertex ids (ids are
            ``0 .. index_size - 1``). Defaults to ``capacity + 1``.
    """

    def __init__(self, capacity: int, index_size: Optional[int] = None) -> None:
        if capacity < 0:
            raise ValueError(f"Heap capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.data: List[int] = [0] * (capacity + 1)
        self.prio: List[Distance] = [0] * (capacity + 1)
        self.index: List[int] = [0] * (
            index_size if index_size is not None else capacity + 1
        )
        self.len = 0

    def push_or_decrease(self, v: int, p: Distance) -> None:
        """Insert ``v`` with priority ``p``, or move it up if already present.

        The caller guarantees that ``p`` is no worse than ``v``'s current
        priority; the entry is only ever sifted towards the root.
        """
        i = self.index[v]
        if i == 0:
            if self.len == self.capacity:
                raise OverflowError(f"Heap is full ({self.capacity} entries)")
            self.len += 1
            i = self.len
        j = i // 2
        while i > 1:
            if self.prio[j] <= p:
                break
            self.data[i] = self.data[j]
            self.prio[i] = self.prio[j]
            self.index[self.data[i]] = i
            i = j
            j = j // 2
        self.data[i] = v
        self.prio[i] = p
        self.index[v] = i

    def _min_slot(self, i: int, j: int, k: int) -> int:
        m = i
        if j <= self.len and self.prio[j] < self.prio[m]:
            m = j
        if k <= self.len and self.prio[k] < self.prio[m]:
            m = k
        return m

    def pop_min(self) -> int:
        """Remove and return the vertex with the smallest priority.

        The last entry is sifted down from the root, following the
        smaller child at each level, until no child is smaller than it.

        Raises:
            IndexError: If the heap is empty.
        """
        if self.len == 0:
            raise IndexError("pop from empty heap")
        v = self.data[1]
        last = self.len
        i = 1
        while True:
            j = self._min_slot(last, 2 * i, 2 * i + 1)
            if j == last:
                break
            self.data[i] = self.data[j]
            self.prio[i] = self.prio[j]
            self.index[self.data[i]] = i
            i = j
        self.data[i] = self.data[last]
        self.prio[i] = self.prio[last]
        self.index[self.data[i]] = i
        self.len -= 1
        self.index[v] = 0
        return v

    def peek_priority(self) -> Distance:
        """Priority of the entry at the root."""
        if self.len == 0:
            raise IndexError("peek at empty heap")
        return self.prio[1]

    def is_empty(self) -> bool:
        return self.len == 0

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and 0 <= v < len(self.index) and self.index[v] != 0

    def __len__(self) -> int:
        return self.len
