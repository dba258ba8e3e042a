"""Generation of the parsers of all message types declared in a file."""

from collections.abc import Callable

from jinja2 import Environment, PackageLoader

from .deserializer import render_parser
from .naming import js_file_name, path_to_root
from .registry import TypeRegistry, is_eligible
from .types import MessageType, ProtoFile
from .values import OBJECT_PARSER_IMPORT_NAME, TYPE_PARSERS_IMPORT_NAME

GENERATED_MARKER = "Generated by protojs. DO NOT EDIT!"

# Location of the runtime parsing sources relative to the output root.
DEFAULT_RUNTIME_IMPORT = "../client/parser/"
OBJECT_PARSER_FILE = "object-parser.js"
TYPE_PARSERS_FILE = "type-parsers.js"

env = Environment(
    loader=PackageLoader("protojs.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("parsers.js.j2")


def target_types(
    file: ProtoFile, eligible: Callable[[MessageType], bool] = is_eligible
) -> list[MessageType]:
    """Message types of the file which need generated parsers."""
    return [message for message in file.message_types() if eligible(message)]


def render(
    file: ProtoFile,
    registry: TypeRegistry,
    runtime_import: str = DEFAULT_RUNTIME_IMPORT,
    eligible: Callable[[MessageType], bool] = is_eligible,
) -> str | None:
    """Render the parsers of a file, or `None` if it has no types to parse.

    All parsers are built before anything is returned, so an inconsistent type
    fails the whole file.
    """
    types = target_types(file, eligible)
    if not types:
        return None
    parsers = [render_parser(message, registry) for message in types]
    runtime_path = path_to_root(js_file_name(file.name)) + runtime_import
    return template.render(
        marker=GENERATED_MARKER,
        object_parser_name=OBJECT_PARSER_IMPORT_NAME,
        object_parser_path=runtime_path + OBJECT_PARSER_FILE,
        type_parsers_name=TYPE_PARSERS_IMPORT_NAME,
        type_parsers_path=runtime_path + TYPE_PARSERS_FILE,
        parsers=parsers,
    )
