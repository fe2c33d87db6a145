"""Top-level package for the graphpath project.

This package answers single-source shortest-path queries over a weighted
directed graph held in a host graph store. The host graph is read through
a narrow port, copied into a query-local transient graph, and searched
with Dijkstra's algorithm on an indexed binary heap.
"""

__version__ = "0.1.0"
