"""Parsing of raw JSON values into typed values.

Each function returns the code to emit and the expression holding the parsed
value; callers decide where the code goes.
"""

from dataclasses import dataclass

from .kinds import FLOAT_TYPES, INT_TYPES, LONG_TYPES, Kind, SchemaInconsistency, ValueKind
from .registry import TypeRegistry

TYPE_PARSERS_IMPORT_NAME = "TypeParsers"
OBJECT_PARSER_IMPORT_NAME = "ObjectParser"
PARSE_METHOD = "fromObject"

VALUE_VARIABLE = "value"
MAP_KEY_VARIABLE = "mapKey"


@dataclass(frozen=True)
class Parsed:
    code: list[str]
    value: str


def parse_method_call(parser: str, value: str) -> str:
    """Call of the parsing method of a generated or hand-written parser."""
    return f"{parser}.{PARSE_METHOD}({value})"


def parser_lookup(url: str) -> str:
    """Runtime lookup of the parser registered for the type URL."""
    return f"{TYPE_PARSERS_IMPORT_NAME}.parserFor('{url}')"


def _primitive_expression(scalar: str, raw: str) -> str:
    if scalar in LONG_TYPES:
        return f"parseInt({raw})"
    if scalar in FLOAT_TYPES:
        return f"parseFloat({raw})"
    return raw


def value_expression(kind: ValueKind, raw: str, registry: TypeRegistry) -> str:
    """Expression converting the raw value into a value of the given kind."""
    if kind.kind is Kind.PRIMITIVE:
        return _primitive_expression(kind.name, raw)
    if kind.kind is Kind.ENUM:
        return f"{registry.lookup(kind.name).type_name}[{raw}]"
    if kind.is_message:
        entry = registry.lookup(kind.name)
        return parse_method_call(parser_lookup(entry.url), raw)
    raise SchemaInconsistency(f"No parser for {kind}")


def parse_value(
    kind: ValueKind, raw: str, registry: TypeRegistry, variable: str = VALUE_VARIABLE
) -> Parsed:
    """Parse a raw JSON value into the variable."""
    expression = value_expression(kind, raw, registry)
    return Parsed([f"let {variable} = {expression};"], variable)


def parse_key(kind: ValueKind, raw: str, variable: str = MAP_KEY_VARIABLE) -> Parsed:
    """Parse a map key, which JSON always represents as a string."""
    if kind.kind is not Kind.PRIMITIVE:
        raise SchemaInconsistency(f"Map keys cannot be of kind {kind}")
    if kind.name in LONG_TYPES or kind.name in INT_TYPES:
        expression = f"parseInt({raw})"
    elif kind.name == "bool":
        expression = f"({raw} === 'true')"
    elif kind.name == "string":
        expression = raw
    else:
        raise SchemaInconsistency(f"Map keys cannot be of type {kind.name}")
    return Parsed([f"let {variable} = {expression};"], variable)
