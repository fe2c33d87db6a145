"""Host graph ports - Abstractions over the graph store being queried.

These protocols define the narrow contract the shortest-path query needs
from the host: vertex lookup by id and enumeration of vertices and edges.
The query never mutates the host.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import HostEdge, HostVertex


class HostGraphPort(Protocol):
    """Port for reading a host graph.

    Implementation: adapters/host/memory_graph.py

    Edge enumeration order is the host's responsibility; the query relaxes
    out-edges in the order they are enumerated here.
    """

    def find_vertex_by_id(self, vertex_id: int) -> Optional[HostVertex]:
        """Look up a vertex by id.

        Args:
            vertex_id: The host vertex identifier.

        Returns:
            The vertex, or None if it is not in the graph.
        """
        ...

    def vertices(self) -> Iterator[HostVertex]:
        """Iterate over all vertices in host order."""
        ...

    def edges(self) -> Iterator[HostEdge]:
        """Iterate over all edges in host order, each exactly once."""
        ...


class HostGraphRepositoryPort(Protocol):
    """Port for loading a host graph from persistent storage.

    Implementation: adapters/host/csv_repository.py
    """

    def load(self) -> HostGraphPort:
        """Load the host graph.

        Returns:
            A readable host graph.
        """
        ...
