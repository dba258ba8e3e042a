"""The sequence of generation steps run for a set of compiled files.

Parsers and `typeUrl` functions are appended to the files compiled by
`protoc`, an index file is written and, last, imports of every processed file
are resolved so no later step can introduce an unresolved import.
The code of all files is rendered before the first one is written, so a
schema inconsistency leaves every file as it was.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from protojs.resolver import ExternalModules, resolve_file

from . import files, index, type_urls
from .naming import js_file_name
from .registry import TypeRegistry
from .types import FileSet, ProtoFile

logger = logging.getLogger(__name__)


@dataclass
class Pipeline:
    """Generation steps over the JS output root of one source set.

    `generated_root` is the root where the standard Protobuf types are
    generated; it defaults to `js_root`.
    """

    js_root: Path
    modules: ExternalModules = field(default_factory=ExternalModules)
    generated_root: Path | None = None
    runtime_import: str = files.DEFAULT_RUNTIME_IMPORT

    def _js_file(self, file: ProtoFile) -> Path:
        return self.js_root / js_file_name(file.name)

    def _append(self, path: Path, code: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(code)
        logger.info("Appended generated code to `%s`.", path)

    def _render_each(
        self, file_set: FileSet, render: Callable[[ProtoFile], str | None]
    ) -> dict[Path, str]:
        """Render the code of every file before anything is written."""
        rendered = {}
        for file in file_set.files:
            code = render(file)
            if code is not None:
                rendered[self._js_file(file)] = code
        return rendered

    def render_parsers(self, file_set: FileSet, registry: TypeRegistry) -> dict[Path, str]:
        return self._render_each(
            file_set, lambda f: files.render(f, registry, runtime_import=self.runtime_import)
        )

    def render_type_urls(self, file_set: FileSet) -> dict[Path, str]:
        return self._render_each(file_set, type_urls.render)

    def _append_all(self, *rendered: dict[Path, str]) -> None:
        code: dict[Path, str] = {}
        for step in rendered:
            for path, text in step.items():
                code[path] = code.get(path, "") + text
        for path, text in code.items():
            self._append(path, text)

    def create_parsers(self, file_set: FileSet, registry: TypeRegistry) -> None:
        self._append_all(self.render_parsers(file_set, registry))

    def append_type_urls(self, file_set: FileSet) -> None:
        self._append_all(self.render_type_urls(file_set))

    def write_index(self, file_set: FileSet) -> Path:
        path = self.js_root / index.INDEX_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(index.render(file_set), encoding="utf-8")
        logger.info("Wrote the index file `%s`.", path)
        return path

    def resolve_imports(self, file_set: FileSet) -> list[Path]:
        root = self.generated_root if self.generated_root is not None else self.js_root
        changed = []
        for file in file_set.files:
            path = self._js_file(file)
            if path.exists() and resolve_file(path, root, self.modules):
                changed.append(path)
        return changed

    def run(self, file_set: FileSet) -> None:
        registry = TypeRegistry.from_file_set(file_set)
        self._append_all(self.render_parsers(file_set, registry), self.render_type_urls(file_set))
        self.write_index(file_set)
        self.resolve_imports(file_set)
