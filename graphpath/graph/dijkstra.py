"""Shortest-path computation using Dijkstra's algorithm.

The engine works on a TransientGraph in place: every vertex slot carries
its tentative distance, predecessor and visited flag for the duration of
one query. Priorities live in an IndexedMinHeap, so a vertex is in the
heap at most once and relaxations lower its key in place.

Edge weights must be non-negative. Negative weights break the visited
invariant and give undefined results.
"""

from __future__ import annotations

import logging
from typing import List

from ..domain.models import INFINITY, Distance
from .heap import IndexedMinHeap
from .transient import NO_VERTEX, TransientGraph

logger = logging.getLogger(__name__)


def shortest_path(graph: TransientGraph, source: int, target: int) -> Distance:
    """Run Dijkstra from ``source`` and stop once ``target`` is extracted.

    Parameters
    ----------
    graph:
        Transient graph holding both endpoints. Its per-vertex state is
        reset and then filled in by the search.
    source:
        Index of the start vertex.
    target:
        Index of the destination vertex.

    Returns
    -------
    int or float
        ``graph[target].dist``: the shortest distance, or ``INFINITY``
        when the target is unreachable. Predecessor links in ``graph``
        describe the path.
    """
    for endpoint in (source, target):
        if endpoint not in graph:
            raise KeyError(f"No vertex slot at {endpoint}")
    for slot in graph.slots():
        slot.reset()

    graph[source].dist = 0
    heap = IndexedMinHeap(graph.vertex_count, index_size=graph.capacity)
    heap.push_or_decrease(source, 0)

    popped = 0
    while not heap.is_empty():
        i = heap.pop_min()
        popped += 1
        if i == target:
            break
        v = graph[i]
        v.visited = True
        for e in v.edges:
            u = graph[e.vertex]
            if not u.visited and v.dist + e.weight <= u.dist:
                u.prev = i
                u.dist = v.dist + e.weight
                heap.push_or_decrease(e.vertex, u.dist)

    logger.debug(
        "Dijkstra finished",
        extra={"source": source, "target": target, "popped": popped},
    )
    return graph[target].dist


def reconstruct_path(graph: TransientGraph, source: int, target: int) -> List[int]:
    """Follow predecessor links from ``target`` back to ``source``.

    Returns the vertex indices from ``source`` to ``target`` inclusive, or
    an empty list when the target was not reached.
    """
    if graph[target].dist == INFINITY:
        return []

    path = [target]
    current = target
    # The predecessor chain of a finalised vertex is at most N - 1 hops.
    for _ in range(graph.vertex_count):
        if current == source:
            break
        current = graph[current].prev
        if current == NO_VERTEX and source != NO_VERTEX:
            raise RuntimeError(f"Broken predecessor chain at vertex {path[-1]}")
        path.append(current)
    else:
        raise RuntimeError("Predecessor chain does not reach the source")

    path.reverse()
    return path
