"""Domain layer - Core value types, tuple codec and errors.

This module contains immutable domain models and typed errors used
throughout the application.
"""

from .errors import (
    ConfigurationError,
    GraphPathError,
    HostGraphError,
    MissingVertexIdError,
    NoPathError,
    SchemaError,
    VertexNotFoundError,
)
from .models import INFINITY, HostEdge, HostVertex, PathResult
from .tuples import (
    Attribute,
    AttributeType,
    HostTuple,
    Schema,
    decode_tuple,
    encode_tuple,
    read_weight,
)

__all__ = [
    # Models
    "INFINITY",
    "HostVertex",
    "HostEdge",
    "PathResult",
    # Tuples
    "Attribute",
    "AttributeType",
    "Schema",
    "HostTuple",
    "encode_tuple",
    "decode_tuple",
    "read_weight",
    # Errors
    "GraphPathError",
    "MissingVertexIdError",
    "VertexNotFoundError",
    "NoPathError",
    "HostGraphError",
    "SchemaError",
    "ConfigurationError",
]
