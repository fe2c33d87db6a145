"""Query-local adjacency structure.

The transient graph is built once per query from the host graph's
edges, searched read-only by the Dijkstra engine, and discarded when
the query ends. Vertices are addressed by integer index and slots are
grown on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..domain.models import INFINITY, Distance

# Predecessor sentinel meaning "no predecessor".
NO_VERTEX = 0


@dataclass(frozen=True, slots=True)
class OutEdge:
    """A directed arc to ``vertex`` with integer ``weight``."""

    vertex: int
    weight: int


@dataclass(slots=True)
class VertexSlot:
    """Out-edges of one vertex plus its per-query search state.

    Attributes:
        edges: Out-edges in insertion order
        dist: Tentative distance from the source
        prev: Predecessor index, NO_VERTEX when there is none
        visited: True once the vertex has been finalised
    """

    edges: List[OutEdge] = field(default_factory=list)
    dist: Distance = INFINITY
    prev: int = NO_VERTEX
    visited: bool = False

    def reset(self) -> None:
        self.dist = INFINITY
        self.prev = NO_VERTEX
        self.visited = False


class TransientGraph:
    """Growable sequence of vertex slots indexed by vertex id.

    The backing sequence doubles when an id beyond its end is added,
    with a floor of ``id + 4``. Empty positions hold ``None``.
    """

    def __init__(self) -> None:
        self._slots: List[Optional[VertexSlot]] = []
        self._vertex_count = 0

    def add_vertex(self, i: int) -> None:
        """Ensure a slot exists at position ``i``; no-op if it already does."""
        if i < 0:
            raise ValueError(f"Vertex id must be non-negative, got {i}")
        size = len(self._slots)
        if size < i + 1:
            new_size = size * 2 if size * 2 > i else i + 4
            self._slots.extend([None] * (new_size - size))
        if self._slots[i] is None:
            self._slots[i] = VertexSlot()
            self._vertex_count += 1

    def add_edge(self, a: int, b: int, w: int) -> None:
        """Append the arc ``a -> b`` with weight ``w`` to ``a``'s out-edges.

        Both endpoints are created if needed. Parallel edges and
        self-loops are kept as given.
        """
        self.add_vertex(a)
        self.add_vertex(b)
        self._slots[a].edges.append(OutEdge(vertex=b, weight=w))

    def out_edges(self, a: int) -> Iterator[OutEdge]:
        """Iterate over ``a``'s out-edges in insertion order."""
        return iter(self[a].edges)

    def has_vertex(self, i: int) -> bool:
        return 0 <= i < len(self._slots) and self._slots[i] is not None

    def vertex_ids(self) -> Iterator[int]:
        """Iterate over the ids of existing slots in ascending order."""
        return (i for i, slot in enumerate(self._slots) if slot is not None)

    def slots(self) -> Iterator[VertexSlot]:
        return (slot for slot in self._slots if slot is not None)

    @property
    def vertex_count(self) -> int:
        """Number of vertex slots that exist."""
        return self._vertex_count

    @property
    def capacity(self) -> int:
        """Length of the backing sequence (largest addressable id + 1)."""
        return len(self._slots)

    @property
    def edge_count(self) -> int:
        return sum(len(slot.edges) for slot in self.slots())

    def __getitem__(self, i: int) -> VertexSlot:
        if not self.has_vertex(i):
            raise KeyError(f"No vertex slot at {i}")
        return self._slots[i]

    def __contains__(self, i: object) -> bool:
        return isinstance(i, int) and self.has_vertex(i)

    def __len__(self) -> int:
        return self._vertex_count
