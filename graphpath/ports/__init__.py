"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the query core and the host graph
store, so the store can be swapped or faked in tests.
"""

from .host_graph import HostGraphPort, HostGraphRepositoryPort

__all__ = [
    "HostGraphPort",
    "HostGraphRepositoryPort",
]
