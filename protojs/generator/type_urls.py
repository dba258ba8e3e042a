"""Generation of the `typeUrl` functions of messages and enums."""

from .files import GENERATED_MARKER
from .naming import type_name
from .types import ProtoFile
from .writer import CodeWriter

METHOD_NAME = "typeUrl"


def render(file: ProtoFile) -> str | None:
    """Render a `typeUrl` function for every type of the file."""
    types = [*file.message_types(), *file.enum_types()]
    if not types:
        return None
    writer = CodeWriter()
    for t in types:
        writer.blank()
        writer.line(f"// {GENERATED_MARKER}")
        with writer.method(f"{type_name(t.full_name)}.{METHOD_NAME}", ""):
            writer.line(f"return '{t.url}';")
    return writer.text() + "\n"
