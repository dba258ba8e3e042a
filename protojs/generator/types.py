"""Schema definitions consumed by the code generator.

The schema is a compiled set of Protobuf files. It is read from a JSON document
whose layout mirrors these dataclasses (snake_case keys), e.g.::

    {"files": [{"name": "acme/task.proto", "package": "acme",
                "messages": [{"name": "Task", "fields": [
                    {"name": "id", "type": {"name": "string"}},
                    {"name": "labels", "type": {"name": "string"}, "repeated": true},
                    {"name": "owner", "type": {"name": "message", "type_name": "acme.User"}},
                    {"name": "scores", "map": {"key": {"name": "int64"},
                                               "value": {"name": "double"}}}]}]}]}
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from dataclasses_json import DataClassJsonMixin

from .naming import to_camel_case

DEFAULT_TYPE_URL_PREFIX = "type.googleapis.com"

GOOGLE_PROTOBUF_PACKAGE = "google.protobuf"


@dataclass
class ProtoType(DataClassJsonMixin):
    """The type of a field value.

    For scalars `name` is the scalar type (`int64`, `string`, ...).
    For user-defined types `name` is `enum` or `message` and `type_name`
    holds the fully-qualified name of the referenced type.
    """

    name: str
    type_name: str | None = None


@dataclass
class ProtoMapEntry(DataClassJsonMixin):
    """Key and value types of a map field."""

    key: ProtoType
    value: ProtoType


@dataclass
class ProtoField(DataClassJsonMixin):
    """Represents a field of a message.

    Map fields carry `map` instead of `type`.
    """

    name: str
    type: ProtoType | None = None
    number: int = 0
    json_name: str | None = None
    repeated: bool = False
    map: ProtoMapEntry | None = None

    @property
    def json_key(self) -> str:
        """The name of the field in the JSON mapping."""
        return self.json_name or to_camel_case(self.name)


@dataclass
class ProtoEnumValue(DataClassJsonMixin):
    name: str
    number: int


@dataclass
class ProtoEnum(DataClassJsonMixin):
    """Represents an enum type definition."""

    name: str
    values: list[ProtoEnumValue] = field(default_factory=list)


@dataclass
class ProtoMessage(DataClassJsonMixin):
    """Represents a message type definition with its nested types."""

    name: str
    fields: list[ProtoField] = field(default_factory=list)
    messages: list["ProtoMessage"] = field(default_factory=list)
    enums: list[ProtoEnum] = field(default_factory=list)


@dataclass(frozen=True)
class MessageType:
    """A message type together with its place in the schema."""

    full_name: str
    file: "ProtoFile"
    descriptor: ProtoMessage

    @property
    def url(self) -> str:
        return f"{self.file.type_url_prefix}/{self.full_name}"

    @property
    def fields(self) -> list[ProtoField]:
        return self.descriptor.fields


@dataclass(frozen=True)
class EnumType:
    """An enum type together with its place in the schema."""

    full_name: str
    file: "ProtoFile"
    descriptor: ProtoEnum

    @property
    def url(self) -> str:
        return f"{self.file.type_url_prefix}/{self.full_name}"


@dataclass
class ProtoFile(DataClassJsonMixin):
    """Represents a compiled `.proto` file."""

    name: str
    package: str = ""
    messages: list[ProtoMessage] = field(default_factory=list)
    enums: list[ProtoEnum] = field(default_factory=list)
    type_url_prefix: str = DEFAULT_TYPE_URL_PREFIX

    def _qualify(self, name: str, scope: str | None = None) -> str:
        if scope:
            return f"{scope}.{name}"
        return f"{self.package}.{name}" if self.package else name

    def _walk(
        self, messages: list[ProtoMessage], scope: str | None
    ) -> Iterator[tuple[MessageType | None, EnumType | None]]:
        for message in messages:
            full_name = self._qualify(message.name, scope)
            yield MessageType(full_name, self, message), None
            for enum in message.enums:
                yield None, EnumType(self._qualify(enum.name, full_name), self, enum)
            yield from self._walk(message.messages, full_name)

    def message_types(self) -> list[MessageType]:
        """Message types of the file, each nested type following its parent."""
        return [m for m, _ in self._walk(self.messages, None) if m is not None]

    def enum_types(self) -> list[EnumType]:
        """Enum types of the file, top-level ones first."""
        top_level = [EnumType(self._qualify(e.name), self, e) for e in self.enums]
        nested = [e for _, e in self._walk(self.messages, None) if e is not None]
        return top_level + nested

    @property
    def is_google(self) -> bool:
        """Whether the file declares standard Protobuf types."""
        return self.package == GOOGLE_PROTOBUF_PACKAGE


@dataclass
class FileSet(DataClassJsonMixin):
    """Represents all files of one generation run."""

    files: list[ProtoFile] = field(default_factory=list)

    def message_types(self) -> list[MessageType]:
        return [t for f in self.files for t in f.message_types()]

    def enum_types(self) -> list[EnumType]:
        return [t for f in self.files for t in f.enum_types()]


def load_file_set(path: str | Path) -> FileSet:
    """Load a file set from its JSON representation."""
    return FileSet.from_json(Path(path).read_text(encoding="utf-8"))
