"""Host graph adapters - Implementations of host graph ports.

Available implementations:
- InMemoryHostGraph: Host graph held in Python containers
- CSVHostGraphRepository: Loads a host graph from CSV files
"""

from .csv_repository import CSVHostGraphRepository
from .memory_graph import InMemoryHostGraph

__all__ = ["CSVHostGraphRepository", "InMemoryHostGraph"]
