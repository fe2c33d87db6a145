"""Shortest-path engine over a query-local transient graph.

This subpackage contains the adjacency structure built for each query,
the indexed heap used as the priority queue, and the Dijkstra search.
"""

from .dijkstra import reconstruct_path, shortest_path
from .heap import IndexedMinHeap
from .transient import NO_VERTEX, OutEdge, TransientGraph, VertexSlot

__all__ = [
    "TransientGraph",
    "VertexSlot",
    "OutEdge",
    "NO_VERTEX",
    "IndexedMinHeap",
    "shortest_path",
    "reconstruct_path",
]
