"""Immutable domain models for graphpath.

All models are frozen dataclasses with slots. They describe what the
host graph exposes to a query and what a query hands back.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from .tuples import HostTuple

# Distance sentinel for vertices not reached from the source.
INFINITY = math.inf

Distance = Union[int, float]


@dataclass(frozen=True, slots=True)
class HostVertex:
    """A vertex stored in the host graph.

    Attributes:
        id: Non-negative integer identifier assigned by the host
    """

    id: int

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"Vertex id must be non-negative, got {self.id}")


@dataclass(frozen=True, slots=True)
class HostEdge:
    """A directed edge record as enumerated by the host graph.

    Attributes:
        id1: Source vertex id
        id2: Destination vertex id
        tuple: Typed attribute tuple carried by the edge, if any
    """

    id1: int
    id2: int
    tuple: Optional[HostTuple] = None


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        source: Source vertex id (host id space)
        target: Target vertex id (host id space)
        distance: Total path weight, INFINITY when unreachable
        path: Host vertex ids from source to target inclusive
    """

    source: int
    target: int
    distance: Distance
    path: tuple[int, ...] = ()

    @property
    def is_reachable(self) -> bool:
        """Check if the target was reached."""
        return self.distance != INFINITY

    @property
    def num_hops(self) -> int:
        """Return the number of edges along the path."""
        return max(len(self.path) - 1, 0)
