"""Field shapes and value kinds driving code generation.

Every field is classified once into a `Shape` and the `ValueKind` of the values
it holds. Generators dispatch on these tags rather than on the schema types.
"""

from dataclasses import dataclass
from enum import StrEnum, auto

from .types import ProtoField, ProtoType

# JSON encodes 64-bit integers as strings.
LONG_TYPES = frozenset(["int64", "uint64", "sint64", "fixed64", "sfixed64"])
INT_TYPES = frozenset(["int32", "uint32", "sint32", "fixed32", "sfixed32"])
FLOAT_TYPES = frozenset(["double", "float"])
OTHER_SCALAR_TYPES = frozenset(["bool", "string", "bytes"])

SCALAR_TYPES = LONG_TYPES | INT_TYPES | FLOAT_TYPES | OTHER_SCALAR_TYPES

ENUM = "enum"
MESSAGE = "message"

# Represents JSON `null` as a value of its own.
DYNAMIC_VALUE_TYPE = "google.protobuf.Value"


class SchemaInconsistency(RuntimeError):
    """Raised when the schema cannot be turned into parsing code."""


class Shape(StrEnum):
    """How many values a field holds."""

    SINGULAR = auto()
    REPEATED = auto()
    MAP = auto()


class Kind(StrEnum):
    """Category of a single value."""

    PRIMITIVE = auto()
    ENUM = auto()
    MESSAGE = auto()
    MESSAGE_NO_NULL_GUARD = auto()  # null must reach the parser


@dataclass(frozen=True)
class ValueKind:
    """A value kind with its subject.

    `name` is the scalar type for primitives and the fully-qualified type
    name for enums and messages.
    """

    kind: Kind
    name: str

    @property
    def is_message(self) -> bool:
        return self.kind in (Kind.MESSAGE, Kind.MESSAGE_NO_NULL_GUARD)

    def __str__(self) -> str:
        return f"{self.kind}({self.name})"


def value_kind(t: ProtoType) -> ValueKind:
    """Classify the type of a value."""
    if t.name in SCALAR_TYPES:
        return ValueKind(Kind.PRIMITIVE, t.name)
    if t.name in (ENUM, MESSAGE):
        if not t.type_name:
            raise SchemaInconsistency(f"{t.name} type has no type name")
        type_name = t.type_name.lstrip(".")
        if t.name == ENUM:
            return ValueKind(Kind.ENUM, type_name)
        if type_name == DYNAMIC_VALUE_TYPE:
            return ValueKind(Kind.MESSAGE_NO_NULL_GUARD, type_name)
        return ValueKind(Kind.MESSAGE, type_name)
    raise SchemaInconsistency(f"Unknown value type: {t.name}")


def shape(f: ProtoField) -> Shape:
    """Classify the shape of a field."""
    if f.map is not None:
        return Shape.MAP
    if f.type is None:
        raise SchemaInconsistency(f"Field {f.name} declares neither a type nor a map")
    if f.repeated:
        return Shape.REPEATED
    return Shape.SINGULAR


def key_kind(f: ProtoField) -> ValueKind:
    """Kind of the keys of a map field."""
    if f.map is None:
        raise SchemaInconsistency(f"Field {f.name} is not a map")
    kind = value_kind(f.map.key)
    if kind.kind is not Kind.PRIMITIVE or kind.name in FLOAT_TYPES | {"bytes"}:
        raise SchemaInconsistency(f"Map field {f.name} has an invalid key type {kind.name}")
    return kind


def element_kind(f: ProtoField) -> ValueKind:
    """Kind of the values a field holds; for maps, the kind of map values."""
    if f.map is not None:
        return value_kind(f.map.value)
    if f.type is None:
        raise SchemaInconsistency(f"Field {f.name} declares neither a type nor a map")
    return value_kind(f.type)
