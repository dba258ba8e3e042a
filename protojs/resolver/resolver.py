"""Resolution of the imports of generated and hand-written JavaScript files.

A relative import of a missing file is rewritten by the first strategy that
works:

1. an import of a standard Protobuf type from `google-protobuf` is made
   relative to the generation root, where the processed types are generated;
2. an import missing next to the importing file is looked up among the main
   sources;
3. an import of a directory provided by an external module is made an import
   from that module.

Imports no strategy can resolve are left as they are.
"""

import logging
import os
from pathlib import Path

from .modules import ExternalModules
from .statement import CURRENT_DIRECTORY, PARENT_DIRECTORY, ImportStatement

logger = logging.getLogger(__name__)

GOOGLE_PROTOBUF_MODULE = "google-protobuf/"
WELL_KNOWN_TYPES_PREFIX = GOOGLE_PROTOBUF_MODULE + "google/protobuf/"

# Relative path from a test sources directory to the main sources one.
MAIN_SOURCES = "../main/"


def references_well_known_type(statement: ImportStatement) -> bool:
    return statement.path.startswith(WELL_KNOWN_TYPES_PREFIX)


def relativize_well_known(statement: ImportStatement, generated_root: Path) -> ImportStatement:
    """Replace the `google-protobuf` module with the path to the generation root."""
    relative = os.path.relpath(generated_root, statement.source_directory)
    if relative == os.curdir:
        replacement = CURRENT_DIRECTORY
    else:
        replacement = relative.replace("\\", "/") + "/"
    return statement.replace_path(statement.path.replace(GOOGLE_PROTOBUF_MODULE, replacement, 1))


def is_unresolved_relative(statement: ImportStatement) -> bool:
    return statement.is_relative and not statement.imported_file_exists()


def _relative_prefix_length(path: str) -> int:
    index = 0
    while True:
        if path.startswith(PARENT_DIRECTORY, index):
            index += len(PARENT_DIRECTORY)
        elif path.startswith(CURRENT_DIRECTORY, index):
            index += len(CURRENT_DIRECTORY)
        else:
            return index


def resolve_in_main_sources(statement: ImportStatement) -> ImportStatement | None:
    """Look the imported file up among the main sources.

    The main sources directory is inserted right after the relative prefix:
    `./a/b.js` becomes `./../main/a/b.js`.
    """
    path = statement.path
    index = _relative_prefix_length(path)
    candidate = statement.replace_path(path[:index] + MAIN_SOURCES + path[index:])
    return candidate if candidate.imported_file_exists() else None


def resolve_in_modules(statement: ImportStatement, modules: ExternalModules) -> ImportStatement:
    module = modules.first_providing(statement.path)
    if module is None:
        return statement
    return statement.replace_path(module.file_in_module(statement.path))


def resolve(
    statement: ImportStatement, generated_root: str | Path, modules: ExternalModules
) -> ImportStatement:
    """Resolve a single import statement; unresolvable imports are returned as is."""
    resolved = statement
    if references_well_known_type(resolved):
        resolved = relativize_well_known(resolved, Path(generated_root))
    if is_unresolved_relative(resolved):
        in_main = resolve_in_main_sources(resolved)
        resolved = in_main if in_main is not None else resolve_in_modules(resolved, modules)
    if resolved.path != statement.path:
        logger.debug("Resolved `%s` as `%s`.", statement.path, resolved.path)
    return resolved


def resolve_text(
    text: str, source_directory: str | Path, generated_root: str | Path, modules: ExternalModules
) -> str:
    """Resolve every import of the text of a file located in `source_directory`."""
    lines = []
    for line in text.splitlines(keepends=True):
        content = line.rstrip("\r\n")
        if ImportStatement.is_declared_in(content):
            statement = ImportStatement.parse(source_directory, content)
            content = resolve(statement, generated_root, modules).text
        lines.append(content + line[len(line.rstrip("\r\n")) :])
    return "".join(lines)


def resolve_file(path: str | Path, generated_root: str | Path, modules: ExternalModules) -> bool:
    """Resolve the imports of a file in place.

    The file is rewritten only if an import changed. Returns whether it was.
    """
    path = Path(path)
    logger.debug("Resolving imports in the file `%s`.", path)
    original = path.read_text(encoding="utf-8")
    resolved = resolve_text(original, path.parent, generated_root, modules)
    if resolved == original:
        return False
    path.write_text(resolved, encoding="utf-8")
    return True
