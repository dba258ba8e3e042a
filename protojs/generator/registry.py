"""Registry of the types known to a generation run."""

from dataclasses import dataclass

from .kinds import SchemaInconsistency
from .naming import parser_name, type_name
from .types import DEFAULT_TYPE_URL_PREFIX, FileSet, MessageType

# Standard types whose JSON parsers are provided by the runtime library.
WELL_KNOWN_TYPES = (
    "google.protobuf.Any",
    "google.protobuf.BoolValue",
    "google.protobuf.BytesValue",
    "google.protobuf.DoubleValue",
    "google.protobuf.Duration",
    "google.protobuf.Empty",
    "google.protobuf.FieldMask",
    "google.protobuf.FloatValue",
    "google.protobuf.Int32Value",
    "google.protobuf.Int64Value",
    "google.protobuf.ListValue",
    "google.protobuf.NullValue",
    "google.protobuf.StringValue",
    "google.protobuf.Struct",
    "google.protobuf.Timestamp",
    "google.protobuf.UInt32Value",
    "google.protobuf.UInt64Value",
    "google.protobuf.Value",
)


class MissingRegistryEntry(SchemaInconsistency):
    """Raised when a referenced type is not known to the registry."""


@dataclass(frozen=True)
class TypeRegistryEntry:
    """Identifiers generated for a type, keyed by its URL."""

    url: str
    full_name: str
    type_name: str
    parser_name: str | None = None


def is_eligible(message: MessageType) -> bool:
    """Whether a parser must be generated for the message type.

    Standard Protobuf types have a special JSON mapping; their parsers are
    provided by the runtime.
    """
    return not message.file.is_google


class TypeRegistry:
    """Lookup of registry entries by type URL and by fully-qualified name.

    Built once per run; never modified afterwards.
    """

    def __init__(self, entries: list[TypeRegistryEntry]) -> None:
        self._by_url: dict[str, TypeRegistryEntry] = {}
        self._by_name: dict[str, TypeRegistryEntry] = {}
        for entry in entries:
            self._by_url[entry.url] = entry
            self._by_name[entry.full_name] = entry

    @classmethod
    def from_file_set(cls, file_set: FileSet) -> "TypeRegistry":
        entries = [
            TypeRegistryEntry(
                url=f"{DEFAULT_TYPE_URL_PREFIX}/{name}",
                full_name=name,
                type_name=type_name(name),
            )
            for name in WELL_KNOWN_TYPES
        ]
        for message in file_set.message_types():
            entries.append(
                TypeRegistryEntry(
                    url=message.url,
                    full_name=message.full_name,
                    type_name=type_name(message.full_name),
                    parser_name=parser_name(message.full_name) if is_eligible(message) else None,
                )
            )
        for enum in file_set.enum_types():
            entries.append(
                TypeRegistryEntry(
                    url=enum.url, full_name=enum.full_name, type_name=type_name(enum.full_name)
                )
            )
        return cls(entries)

    def __contains__(self, full_name: str) -> bool:
        return full_name in self._by_name

    def __len__(self) -> int:
        return len(self._by_url)

    def lookup(self, full_name: str) -> TypeRegistryEntry:
        try:
            return self._by_name[full_name]
        except KeyError:
            raise MissingRegistryEntry(f"Type {full_name} is not known to the registry") from None

    def by_url(self, url: str) -> TypeRegistryEntry:
        try:
            return self._by_url[url]
        except KeyError:
            raise MissingRegistryEntry(f"No type registered under {url}") from None

    def entries(self) -> list[TypeRegistryEntry]:
        return list(self._by_url.values())
