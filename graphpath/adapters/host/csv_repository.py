"""CSV host graph repository adapter.

Loads a host graph from two CSV files:

- ``vertices.csv`` with a ``vertex_id`` column.
- ``edges.csv`` with ``id1`` and ``id2`` columns followed by typed
  attribute columns declared in the header as ``name:type``
  (e.g. ``weight:int``). The edge schema is taken from the header in
  column order, so it decides which attribute ``read_weight`` picks.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ...config import HostGraphConfig, get_config
from ...domain.errors import HostGraphError, SchemaError
from ...domain.tuples import Schema
from .memory_graph import InMemoryHostGraph

VERTEX_ID_COLUMN = "vertex_id"
EDGE_ENDPOINT_COLUMNS = ("id1", "id2")


def parse_edge_header(header: Sequence[str]) -> Schema:
    """Derive the edge attribute schema from an ``edges.csv`` header.

    Raises:
        SchemaError: If the endpoint columns are missing or an attribute
            column is not written as ``name:type``.
    """
    columns = [column.strip() for column in header]
    if tuple(columns[:2]) != EDGE_ENDPOINT_COLUMNS:
        raise SchemaError(
            f"Edge header must start with id1,id2, got {','.join(columns[:2])}"
        )

    pairs: List[Tuple[str, str]] = []
    for column in columns[2:]:
        name, sep, type_name = column.partition(":")
        if not sep or not name or not type_name:
            raise SchemaError(
                f"Attribute column must be written as name:type, got {column!r}",
                attribute=column,
            )
        pairs.append((name.strip(), type_name.strip()))
    return Schema.from_pairs(pairs)


@dataclass
class CSVHostGraphRepository:
    """Host graph repository that loads from CSV files.

    Implements HostGraphRepositoryPort. The loaded graph is cached until
    clear_cache() is called.

    Attributes:
        config: Host graph configuration (paths, file names)
    """

    config: HostGraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[InMemoryHostGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> InMemoryHostGraph:
        """Load the host graph from CSV files.

        Returns:
            The host graph.

        Raises:
            HostGraphError: If the graph cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading host graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph = self._load_graph_from_csv()
        self._graph = graph
        self._logger.info(
            "Host graph loaded",
            extra={"vertices": graph.vertex_count, "edges": graph.edge_count},
        )
        return graph

    def _load_graph_from_csv(self) -> InMemoryHostGraph:
        vertices_path = self.config.vertices_path
        edges_path = self.config.edges_path

        try:
            with vertices_path.open(newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                columns = [name.strip() for name in reader.fieldnames or ()]
                if VERTEX_ID_COLUMN not in columns:
                    raise KeyError(f"missing {VERTEX_ID_COLUMN} column")
                reader.fieldnames = columns
                vertex_ids = [
                    int(row[VERTEX_ID_COLUMN])
                    for row in reader
                    if (row.get(VERTEX_ID_COLUMN) or "").strip()
                ]
        except (OSError, KeyError, ValueError) as e:
            raise HostGraphError(
                f"Failed to load vertices: {e}",
                file_path=str(vertices_path),
                cause=e,
            )

        try:
            return self._load_edges(edges_path, vertex_ids)
        except (OSError, KeyError, ValueError, HostGraphError, SchemaError) as e:
            raise HostGraphError(
                f"Failed to load edges: {e}",
                file_path=str(edges_path),
                cause=e,
            )

    def _load_edges(self, path: Path, vertex_ids: List[int]) -> InMemoryHostGraph:
        with path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                raise SchemaError("Edges file has no header row")
            schema = parse_edge_header(header)

            graph = InMemoryHostGraph(edge_schema=schema)
            for vertex_id in vertex_ids:
                graph.add_vertex(vertex_id)

            names = [attr.name for attr in schema.attributes]
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                if len(row) != len(names) + 2:
                    raise ValueError(
                        f"Line {reader.line_num}: expected {len(names) + 2} "
                        f"fields, got {len(row)}"
                    )
                id1, id2 = int(row[0]), int(row[1])
                values = {name: cell.strip() for name, cell in zip(names, row[2:])}
                graph.add_edge(id1, id2, values)
        return graph

    def clear_cache(self) -> None:
        """Clear the cached host graph."""
        self._graph = None
        self._logger.debug("Host graph cache cleared")
