"""Generation of the code parsing a single field of a message."""

from dataclasses import dataclass

from . import naming
from .kinds import Shape, element_kind, key_kind, shape
from .preconditions import null_guard
from .registry import TypeRegistry
from .types import ProtoField
from .values import MAP_KEY_VARIABLE, parse_key, parse_value
from .writer import CodeWriter

FROM_OBJECT_ARG = "obj"
MESSAGE_VARIABLE = "msg"

# Parameters of the `Array.prototype.forEach` callback.
LIST_ITEM = "listItem"
LIST_CALLBACK_ARGS = f"({LIST_ITEM}, index, array)"

# Property name of the JS object while iterating map entries.
ATTRIBUTE = "attribute"


@dataclass(frozen=True)
class FieldToParse:
    """A field to parse from the JS object into the message variable."""

    field: ProtoField
    js_object: str = FROM_OBJECT_ARG
    target: str = MESSAGE_VARIABLE

    @property
    def raw_value(self) -> str:
        return f"{self.js_object}.{self.field.json_key}"

    def merge_format(self) -> str:
        """Statement merging a value into the message, with `{}` for the value."""
        name = self.field.name
        field_shape = shape(self.field)
        if field_shape is Shape.REPEATED:
            return f"{self.target}.{naming.adder(name)}({{}});"
        if field_shape is Shape.MAP:
            return f"{self.target}.{naming.map_getter(name)}().set({MAP_KEY_VARIABLE}, {{}});"
        return f"{self.target}.{naming.setter(name)}({{}});"


def _merge_parsed(
    writer: CodeWriter, field: FieldToParse, raw: str, registry: TypeRegistry
) -> None:
    """Check the raw value for `null`, parse it and merge it into the message."""
    kind = element_kind(field.field)
    merge = field.merge_format()
    with null_guard(writer, kind, raw, merge):
        parsed = parse_value(kind, raw, registry)
        for line in parsed.code:
            writer.line(line)
        writer.line(merge.format(parsed.value))


def _defined(value: str) -> str:
    return f"{value} !== undefined"


def _present(value: str) -> str:
    return f"{value} !== undefined && {value} !== null"


def generate_singular(writer: CodeWriter, field: FieldToParse, registry: TypeRegistry) -> None:
    raw = field.raw_value
    with writer.if_block(_defined(raw)):
        _merge_parsed(writer, field, raw, registry)


def generate_repeated(writer: CodeWriter, field: FieldToParse, registry: TypeRegistry) -> None:
    raw = field.raw_value
    with writer.if_block(_present(raw)):
        with writer.block(f"{raw}.forEach({LIST_CALLBACK_ARGS} =>", suffix=");"):
            _merge_parsed(writer, field, LIST_ITEM, registry)


def generate_map(writer: CodeWriter, field: FieldToParse, registry: TypeRegistry) -> None:
    raw = field.raw_value
    kind = element_kind(field.field)
    key = parse_key(key_kind(field.field), ATTRIBUTE)
    with writer.if_block(_present(raw)):
        with writer.block(f"for (let {ATTRIBUTE} in {raw})"):
            with writer.if_block(f"Object.prototype.hasOwnProperty.call({raw}, {ATTRIBUTE})"):
                for line in key.code:
                    writer.line(line)
                parsed = parse_value(kind, f"{raw}[{ATTRIBUTE}]", registry)
                for line in parsed.code:
                    writer.line(line)
                writer.line(field.merge_format().format(parsed.value))


def generate_field(writer: CodeWriter, field: FieldToParse, registry: TypeRegistry) -> None:
    """Emit the code parsing the field according to its shape."""
    field_shape = shape(field.field)
    if field_shape is Shape.MAP:
        generate_map(writer, field, registry)
    elif field_shape is Shape.REPEATED:
        generate_repeated(writer, field, registry)
    else:
        generate_singular(writer, field, registry)
