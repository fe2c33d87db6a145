"""Shortest-path query driver.

The driver is the thin shell between the command surface and the engine:

1. Take two vertex ids from a pre-tokenised argument stream.
2. Resolve both against the host graph.
3. Copy every host edge into a fresh TransientGraph, reading each edge's
   weight from its tuple.
4. Run Dijkstra and print the distance and path.

Host vertex ids may be sparse or start at 0, so they are mapped onto
dense indices ``1..N`` (in host enumeration order) before the search;
index 0 stays free as the "no predecessor" sentinel. Everything the
user sees is printed in host ids.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from ..config import QueryConfig, get_config
from ..domain.errors import (
    HostGraphError,
    MissingVertexIdError,
    NoPathError,
    VertexNotFoundError,
)
from ..domain.models import INFINITY, HostVertex, PathResult
from ..domain.tuples import read_weight
from ..graph.dijkstra import reconstruct_path, shortest_path
from ..graph.transient import TransientGraph
from ..ports.host_graph import HostGraphPort

ArgStream = Union[str, Iterable[str]]


def next_arg(stream: Iterator[str]) -> Optional[str]:
    """Return the next non-empty token from ``stream``, or None when exhausted."""
    for token in stream:
        token = token.strip()
        if token:
            return token
    return None


def _tokens(args: ArgStream) -> Iterator[str]:
    if isinstance(args, str):
        return iter(args.split())
    return iter(args)


def format_path(path: Iterable[int]) -> str:
    """Render vertex ids separated by two spaces, with trailing separator."""
    return "".join(f"{vertex_id}  " for vertex_id in path)


@dataclass
class ShortestPathQuery:
    """Answers ``<source-id> <dest-id>`` queries against a host graph.

    The host graph is passed in explicitly and never mutated. All state
    built for a query (transient graph, heap, path) is local to run().

    Attributes:
        host: Host graph to read vertices and edges from
        config: Query configuration
        out: Stream receiving the query output (stdout when None)
    """

    host: HostGraphPort
    config: QueryConfig = field(default_factory=lambda: get_config().query)
    out: Optional[TextIO] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _print(self, line: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(line + "\n")

    def execute(self, args: ArgStream) -> Optional[PathResult]:
        """Run a query, printing user-facing errors instead of raising.

        Missing ids, unknown vertices and unreachable targets print their
        message and return None. Anything else propagates.
        """
        try:
            return self.run(args)
        except (MissingVertexIdError, VertexNotFoundError, NoPathError) as e:
            self._print(e.message)
            return None

    def run(self, args: ArgStream) -> PathResult:
        """Run a query over the argument stream ``args``.

        Args:
            args: Tokens (or a whitespace-separated string) whose first
                two tokens are the source and destination vertex ids.

        Returns:
            PathResult with the distance and the host ids along the path.

        Raises:
            MissingVertexIdError: If fewer than two ids are supplied.
            VertexNotFoundError: If either id is not in the host graph.
            NoPathError: If the destination is unreachable.
        """
        stream = _tokens(args)
        source_token = next_arg(stream)
        if source_token is None:
            raise MissingVertexIdError()
        target_token = next_arg(stream)
        if target_token is None:
            raise MissingVertexIdError()

        source_vertex = self._resolve(source_token)
        target_vertex = self._resolve(target_token)
        if source_vertex is None or target_vertex is None:
            missing = source_token if source_vertex is None else target_token
            self._logger.warning("Vertex not found", extra={"vertex_id": missing})
            raise VertexNotFoundError(vertex_id=missing)

        return self.query(source_vertex.id, target_vertex.id)

    def query(self, source: int, target: int) -> PathResult:
        """Compute the shortest path between two host vertex ids.

        Raises:
            VertexNotFoundError: If either id is not in the host graph.
            NoPathError: If the destination is unreachable.
        """
        for vertex_id in (source, target):
            if self.host.find_vertex_by_id(vertex_id) is None:
                self._logger.warning(
                    "Vertex not found", extra={"vertex_id": vertex_id}
                )
                raise VertexNotFoundError(vertex_id=str(vertex_id))

        self._print(f"Source vertex: {source}, Destination vertex: {target}")

        graph, index_of, id_of = self._materialise()
        distance = shortest_path(graph, index_of[source], index_of[target])

        if distance == INFINITY:
            self._logger.warning(
                "No path found", extra={"source": source, "target": target}
            )
            raise NoPathError(source=source, target=target)

        indices = reconstruct_path(graph, index_of[source], index_of[target])
        path = tuple(id_of[i] for i in indices)
        self._print(f"Shortest dist to destination: {distance}")
        self._print(f"Shortest Path: {format_path(path)}")

        self._logger.info(
            "Shortest path found",
            extra={
                "source": source,
                "target": target,
                "distance": distance,
                "hops": len(path) - 1,
            },
        )
        return PathResult(source=source, target=target, distance=distance, path=path)

    def _resolve(self, token: str) -> Optional[HostVertex]:
        try:
            vertex_id = int(token)
        except ValueError:
            return None
        if vertex_id < 0:
            return None
        return self.host.find_vertex_by_id(vertex_id)

    def _materialise(self) -> Tuple[TransientGraph, Dict[int, int], List[int]]:
        """Build the transient graph from every host vertex and edge.

        Returns the graph, the host id -> dense index map, and the dense
        index -> host id list (position 0 unused).
        """
        graph = TransientGraph()
        index_of: Dict[int, int] = {}
        id_of: List[int] = [0]
        for vertex in self.host.vertices():
            index_of[vertex.id] = len(id_of)
            id_of.append(vertex.id)
            graph.add_vertex(index_of[vertex.id])

        for edge in self.host.edges():
            weight = read_weight(edge.tuple)
            if self.config.echo_edges:
                self._print(f"Edge found between: {edge.id1} and {edge.id2}")
                self._print(f"Edge weight = {weight}")
            if edge.id1 not in index_of or edge.id2 not in index_of:
                raise HostGraphError(
                    f"Edge {edge.id1} -> {edge.id2} references an unknown vertex"
                )
            if weight < 0:
                self._logger.warning(
                    "Negative edge weight", extra={"id1": edge.id1, "id2": edge.id2}
                )
            graph.add_edge(index_of[edge.id1], index_of[edge.id2], weight)

        self._logger.debug(
            "Transient graph built",
            extra={"vertices": graph.vertex_count, "edges": graph.edge_count},
        )
        return graph, index_of, id_of
