"""Services layer - Application orchestration.

Available services:
- ShortestPathQuery: Resolves endpoints, builds the transient graph and
  runs the shortest-path search
"""

from .query_driver import ShortestPathQuery, format_path, next_arg

__all__ = ["ShortestPathQuery", "format_path", "next_arg"]
