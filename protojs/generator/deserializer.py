"""Generation of the parser of one message type."""

from .fields import FROM_OBJECT_ARG, MESSAGE_VARIABLE, FieldToParse, generate_field
from .naming import parser_name, type_name
from .registry import TypeRegistry
from .types import MessageType
from .values import OBJECT_PARSER_IMPORT_NAME, PARSE_METHOD
from .writer import CodeWriter


def _declare_parser(writer: CodeWriter, parser: str) -> None:
    """Declare the parser type as a subtype of the abstract object parser."""
    with writer.method(parser, ""):
        writer.line(f"{OBJECT_PARSER_IMPORT_NAME}.call(this);")
    writer.line(f"{parser}.prototype = Object.create({OBJECT_PARSER_IMPORT_NAME}.prototype);")
    writer.line(f"{parser}.prototype.constructor = {parser};")


def from_object_method(message: MessageType, registry: TypeRegistry) -> CodeWriter:
    """Generate the method parsing a plain JS object into the message.

    The method returns `null` for a `null` argument. Fields are parsed in
    declaration order. The generated method keeps no state between calls.
    """
    parser = parser_name(message.full_name)
    writer = CodeWriter()
    with writer.method(f"{parser}.prototype.{PARSE_METHOD}", FROM_OBJECT_ARG):
        with writer.if_block(f"{FROM_OBJECT_ARG} === null"):
            writer.line("return null;")
        writer.blank()
        writer.line(f"let {MESSAGE_VARIABLE} = new {type_name(message.full_name)}();")
        for field in message.fields:
            writer.blank()
            generate_field(writer, FieldToParse(field), registry)
        writer.blank()
        writer.line(f"return {MESSAGE_VARIABLE};")
    return writer


def render_parser(message: MessageType, registry: TypeRegistry) -> str:
    """Render the complete parser of the message type."""
    writer = CodeWriter()
    _declare_parser(writer, parser_name(message.full_name))
    writer.blank()
    writer.append(from_object_method(message, registry))
    return writer.text()
