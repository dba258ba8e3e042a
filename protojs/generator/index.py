"""Generation of the index file listing all known types and their parsers."""

from .files import GENERATED_MARKER, env, target_types
from .naming import CURRENT_DIRECTORY, js_file_name, parser_name, type_name
from .types import FileSet

INDEX_FILE = "index.js"
TYPES_MAP_NAME = "types"
PARSERS_MAP_NAME = "parsers"

template = env.get_template("index.js.j2")


def known_types(file_set: FileSet) -> list[tuple[str, str]]:
    """Pairs of type URL and JS type for every message and enum of the set."""
    types = [*file_set.message_types(), *file_set.enum_types()]
    return [(t.url, type_name(t.full_name)) for t in types]


def type_parsers(file_set: FileSet) -> list[tuple[str, str]]:
    """Pairs of type URL and generated parser for every message that has one."""
    return [
        (message.url, parser_name(message.full_name))
        for file in file_set.files
        for message in target_types(file)
    ]


def _imports(file_set: FileSet) -> list[str]:
    return [
        CURRENT_DIRECTORY + js_file_name(file.name)
        for file in file_set.files
        if file.message_types() or file.enum_types()
    ]


def render(file_set: FileSet) -> str:
    return template.render(
        marker=GENERATED_MARKER,
        imports=_imports(file_set),
        types_name=TYPES_MAP_NAME,
        types=known_types(file_set),
        parsers_name=PARSERS_MAP_NAME,
        parsers=type_parsers(file_set),
    )
