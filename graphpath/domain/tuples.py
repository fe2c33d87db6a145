"""Typed attribute tuples attached to host graph edges.

A host edge carries an opaque tuple: a schema (ordered, typed attribute
list) plus a fixed-size byte buffer. Attribute values are packed back to
back in declaration order, little-endian, so the byte offset of an
attribute is the sum of the sizes of the attributes declared before it.
"""

from __future__ import annotations

import datetime
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .errors import SchemaError

STRING_SIZE = 256


class AttributeType(Enum):
    """Storage type of a tuple attribute, with its packed size in bytes."""

    CHAR = ("char", 1)
    INT = ("int", 4)
    FLOAT = ("float", 4)
    DOUBLE = ("double", 8)
    STRING = ("string", STRING_SIZE)
    DATE = ("date", 10)

    def __init__(self, type_name: str, size: int) -> None:
        self.type_name = type_name
        self.size = size

    @classmethod
    def from_name(cls, name: str) -> AttributeType:
        """Look up an attribute type by its lowercase name (e.g. 'int')."""
        wanted = name.strip().lower()
        for member in cls:
            if member.type_name == wanted:
                return member
        raise SchemaError(f"Unknown attribute type: {name!r}", attribute=name)


_STRUCT_FORMATS = {
    AttributeType.INT: "<i",
    AttributeType.FLOAT: "<f",
    AttributeType.DOUBLE: "<d",
}


@dataclass(frozen=True, slots=True)
class Attribute:
    """A named, typed attribute of a schema."""

    name: str
    type: AttributeType


@dataclass(frozen=True)
class Schema:
    """Ordered attribute list describing the layout of a tuple buffer.

    Attributes:
        attributes: Attributes in declaration order
    """

    attributes: Tuple[Attribute, ...] = ()
    _offsets: Dict[str, int] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        offset = 0
        for attr in self.attributes:
            if attr.name in self._offsets:
                raise SchemaError(
                    f"Duplicate attribute name: {attr.name}", attribute=attr.name
                )
            self._offsets[attr.name] = offset
            offset += attr.type.size

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> Schema:
        """Build a schema from ``(name, type_name)`` pairs."""
        return cls(
            tuple(Attribute(name, AttributeType.from_name(t)) for name, t in pairs)
        )

    @property
    def size(self) -> int:
        """Total size in bytes of a tuple buffer for this schema."""
        return sum(attr.type.size for attr in self.attributes)

    def offset(self, name: str) -> int:
        """Byte offset of ``name`` in the buffer, or -1 if it is not declared."""
        return self._offsets.get(name, -1)

    def __len__(self) -> int:
        return len(self.attributes)


@dataclass(frozen=True, slots=True)
class HostTuple:
    """A schema plus its packed attribute buffer."""

    schema: Schema
    buf: bytes

    def __post_init__(self) -> None:
        if len(self.buf) != self.schema.size:
            raise SchemaError(
                f"Tuple buffer is {len(self.buf)} bytes, schema expects "
                f"{self.schema.size}"
            )

    def get_value(self, name: str) -> Any:
        """Decode a single attribute by name."""
        offset = self.schema.offset(name)
        if offset < 0:
            raise SchemaError(f"No such attribute: {name}", attribute=name)
        attr = next(a for a in self.schema.attributes if a.name == name)
        return _decode_value(attr.type, self.buf, offset)


def _encode_value(attr: Attribute, value: Any) -> bytes:
    kind = attr.type
    try:
        if kind in _STRUCT_FORMATS:
            number = int(value) if kind is AttributeType.INT else float(value)
            return struct.pack(_STRUCT_FORMATS[kind], number)
        if kind is AttributeType.CHAR:
            raw = str(value).encode("utf-8")
            if len(raw) > 1:
                raise SchemaError(
                    f"Char value must be a single byte for {attr.name}: {value!r}",
                    attribute=attr.name,
                )
            return raw.ljust(1, b"\0")
        if kind is AttributeType.DATE:
            if isinstance(value, datetime.date):
                value = value.isoformat()
            return datetime.date.fromisoformat(str(value)).isoformat().encode("ascii")
        raw = str(value).encode("utf-8")
        if len(raw) >= STRING_SIZE:
            raise SchemaError(
                f"String value too long for {attr.name}", attribute=attr.name
            )
        return raw.ljust(STRING_SIZE, b"\0")
    except (ValueError, TypeError, struct.error) as e:
        raise SchemaError(
            f"Invalid {kind.type_name} value for {attr.name}: {value!r}",
            attribute=attr.name,
            cause=e,
        )


def _decode_value(kind: AttributeType, buf: bytes, offset: int) -> Any:
    if kind in _STRUCT_FORMATS:
        return struct.unpack_from(_STRUCT_FORMATS[kind], buf, offset)[0]
    raw = buf[offset : offset + kind.size]
    if kind is AttributeType.DATE:
        return datetime.date.fromisoformat(raw.decode("ascii"))
    return raw.rstrip(b"\0").decode("utf-8")


def encode_tuple(schema: Schema, values: Mapping[str, Any]) -> HostTuple:
    """Pack ``values`` into a tuple buffer laid out by ``schema``.

    Every declared attribute must have a value; extra keys are rejected.
    """
    unknown = set(values) - {attr.name for attr in schema.attributes}
    if unknown:
        name = sorted(unknown)[0]
        raise SchemaError(f"No such attribute: {name}", attribute=name)

    chunks = []
    for attr in schema.attributes:
        if attr.name not in values:
            raise SchemaError(
                f"Missing value for attribute: {attr.name}", attribute=attr.name
            )
        chunks.append(_encode_value(attr, values[attr.name]))
    return HostTuple(schema=schema, buf=b"".join(chunks))


def decode_tuple(t: HostTuple) -> Dict[str, Any]:
    """Unpack every attribute of ``t`` into a name -> value mapping."""
    return {
        attr.name: _decode_value(attr.type, t.buf, t.schema.offset(attr.name))
        for attr in t.schema.attributes
    }


def read_weight(t: Optional[HostTuple]) -> int:
    """Return the first INT attribute of ``t`` in schema declaration order.

    The integer is decoded from the tuple buffer at the attribute's byte
    offset. Returns 0 when the tuple is absent or has no INT attribute.
    """
    if t is None:
        return 0
    for attr in t.schema.attributes:
        if attr.type is not AttributeType.INT:
            continue
        offset = t.schema.offset(attr.name)
        if offset >= 0:
            return _decode_value(AttributeType.INT, t.buf, offset)
    return 0
