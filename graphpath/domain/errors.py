"""Typed domain errors for graphpath.

All errors inherit from GraphPathError and can optionally wrap a root
cause exception for debugging. The query errors carry the exact text
that the command surface prints to the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

MISSING_VERTEX_ID = "Missing vertex id"
VERTICES_NOT_FOUND = "Vertices do not exist in the current graph"
NO_PATH = "no path"


@dataclass
class GraphPathError(Exception):
    """Base error for the graphpath domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class MissingVertexIdError(GraphPathError):
    """One or both vertex ids were not supplied to the query."""

    message: str = MISSING_VERTEX_ID


@dataclass
class VertexNotFoundError(GraphPathError):
    """A requested vertex id is not present in the host graph.

    Attributes:
        vertex_id: The raw token or id that failed to resolve
    """

    message: str = VERTICES_NOT_FOUND
    vertex_id: str = ""


@dataclass
class NoPathError(GraphPathError):
    """The target is unreachable from the source.

    Attributes:
        source: Source vertex id
        target: Target vertex id
    """

    message: str = NO_PATH
    source: int = 0
    target: int = 0


@dataclass
class HostGraphError(GraphPathError):
    """Host graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class SchemaError(GraphPathError):
    """Malformed tuple schema or attribute value.

    Attributes:
        attribute: Name of the offending attribute
    """

    attribute: str = ""


@dataclass
class ConfigurationError(GraphPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
