"""In-memory host graph adapter.

Holds vertices keyed by id and a flat, insertion-ordered edge list, each
edge carrying an optional typed tuple. It implements HostGraphPort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ...domain.errors import HostGraphError
from ...domain.models import HostEdge, HostVertex
from ...domain.tuples import HostTuple, Schema, encode_tuple


@dataclass
class InMemoryHostGraph:
    """Host graph stored in plain Python containers.

    Attributes:
        edge_schema: Schema used when edge attributes are given as a mapping
    """

    edge_schema: Schema = field(default_factory=Schema)

    _vertices: Dict[int, HostVertex] = field(default_factory=dict, repr=False)
    _edges: List[HostEdge] = field(default_factory=list, repr=False)

    def add_vertex(self, vertex_id: int) -> HostVertex:
        """Add a vertex, returning the existing one if the id is taken."""
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            vertex = HostVertex(vertex_id)
            self._vertices[vertex_id] = vertex
        return vertex

    def add_edge(
        self,
        id1: int,
        id2: int,
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        tuple: Optional[HostTuple] = None,
    ) -> HostEdge:
        """Append a directed edge ``id1 -> id2``.

        Args:
            id1: Source vertex id, must already exist.
            id2: Destination vertex id, must already exist.
            attributes: Attribute values packed with ``edge_schema``.
            tuple: A prebuilt tuple, used instead of ``attributes``.

        Raises:
            HostGraphError: If either endpoint is missing.
            SchemaError: If ``attributes`` do not fit ``edge_schema``.
        """
        for vertex_id in (id1, id2):
            if vertex_id not in self._vertices:
                raise HostGraphError(
                    f"Edge {id1} -> {id2} references unknown vertex {vertex_id}"
                )
        if tuple is None and attributes is not None:
            tuple = encode_tuple(self.edge_schema, attributes)
        edge = HostEdge(id1=id1, id2=id2, tuple=tuple)
        self._edges.append(edge)
        return edge

    def find_vertex_by_id(self, vertex_id: int) -> Optional[HostVertex]:
        return self._vertices.get(vertex_id)

    def vertices(self) -> Iterator[HostVertex]:
        return iter(list(self._vertices.values()))

    def edges(self) -> Iterator[HostEdge]:
        return iter(list(self._edges))

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)
