"""External JavaScript modules providing directories of sources."""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

SEPARATOR = "/"
INCLUDE_NESTED = "/*"

_RELATIVE_ELEMENTS = frozenset([".", "..", ""])


def split_reference(reference: str) -> tuple[list[str], str]:
    """Split a file reference into its directory elements and file name.

    Current and parent directory markers are dropped from the directory.
    """
    directory, _, file_name = reference.rpartition(SEPARATOR)
    elements = [e for e in directory.split(SEPARATOR) if e not in _RELATIVE_ELEMENTS]
    return elements, file_name


@dataclass(frozen=True)
class DirectoryPattern:
    """A directory provided by a module, optionally with its subdirectories.

    A referenced directory matches when it ends up inside the pattern
    directory: `../company/file.js` matches `proto/company`, and
    `../company/server/nested/file.js` matches `company/server/*`.
    """

    elements: tuple[str, ...]
    include_nested: bool = False

    @classmethod
    def of(cls, value: str) -> "DirectoryPattern":
        value = value.strip()
        include_nested = value.endswith(INCLUDE_NESTED)
        if include_nested:
            value = value[: -len(INCLUDE_NESTED)]
        elements = tuple(e for e in value.split(SEPARATOR) if e)
        if not elements:
            raise ValueError("Directory pattern must not be empty")
        return cls(elements, include_nested)

    def _common_length(self, directory: list[str]) -> int:
        """Length of the longest head of `directory` the pattern ends with."""
        candidates = range(len(directory), 0, -1) if self.include_nested else [len(directory)]
        for length in candidates:
            if 0 < length <= len(self.elements) and (
                tuple(directory[:length]) == self.elements[-length:]
            ):
                return length
        return 0

    def matches(self, directory: list[str]) -> bool:
        return self._common_length(directory) > 0

    def transform(self, directory: list[str]) -> list[str]:
        """The directory inside the module corresponding to the referenced one."""
        length = self._common_length(directory)
        if length == 0:
            raise ValueError(f"{self} does not match {SEPARATOR.join(directory)}")
        return [*self.elements, *directory[length:]]

    def __str__(self) -> str:
        return SEPARATOR.join(self.elements) + (INCLUDE_NESTED if self.include_nested else "")


@dataclass(frozen=True)
class ExternalModule:
    """A named module and the directories it provides."""

    name: str
    directories: tuple[DirectoryPattern, ...] = ()

    @classmethod
    def of(cls, name: str, patterns: Iterable[str]) -> "ExternalModule":
        return cls(name, tuple(DirectoryPattern.of(p) for p in patterns))

    def _pattern_for(self, reference: str) -> DirectoryPattern | None:
        directory, _ = split_reference(reference)
        for pattern in self.directories:
            if pattern.matches(directory):
                return pattern
        return None

    def provides(self, reference: str) -> bool:
        return self._pattern_for(reference) is not None

    def file_in_module(self, reference: str) -> str:
        """Reference to the same file as imported from this module."""
        pattern = self._pattern_for(reference)
        if pattern is None:
            raise ValueError(f"Module {self.name} does not provide {reference}")
        directory, file_name = split_reference(reference)
        return SEPARATOR.join([self.name, *pattern.transform(directory), file_name])


def spine_web() -> ExternalModule:
    """The module with the runtime parsers and the standard Protobuf types."""
    return ExternalModule.of(
        "spine-web",
        [
            "client/parser",
            "proto/google/protobuf/*",
            "proto/spine/base/*",
            "proto/spine/change/*",
            "proto/spine/client/*",
            "proto/spine/core/*",
            "proto/spine/net/*",
            "proto/spine/people/*",
            "proto/spine/time/*",
            "proto/spine/ui/*",
            "proto/spine/validate/*",
            "proto/spine/web/*",
        ],
    )


def spine_users() -> ExternalModule:
    return ExternalModule.of("spine-users", ["spine/users/*"])


def predefined_modules() -> list[ExternalModule]:
    return [spine_web(), spine_users()]


class ExternalModules:
    """Modules in the order they are tried while resolving imports."""

    def __init__(self, modules: Iterable[ExternalModule] = ()) -> None:
        self._modules = tuple(modules)

    def with_modules(self, modules: Iterable[ExternalModule]) -> "ExternalModules":
        return ExternalModules([*self._modules, *modules])

    def first_providing(self, reference: str) -> ExternalModule | None:
        for module in self._modules:
            if module.provides(reference):
                return module
        return None

    def as_list(self) -> list[ExternalModule]:
        return list(self._modules)

    def __iter__(self):
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)


def combined_modules(config: Mapping[str, Iterable[str]]) -> ExternalModules:
    """User-configured modules followed by the predefined ones."""
    user = [ExternalModule.of(name, patterns) for name, patterns in config.items()]
    return ExternalModules(user).with_modules(predefined_modules())


def load_modules_config(path: str | Path) -> dict[str, list[str]]:
    """Read a JSON object mapping module names to directory patterns."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not all(isinstance(v, list) for v in data.values()):
        raise ValueError(f"{path}: expected an object of module names to pattern lists")
    return {str(name): [str(p) for p in patterns] for name, patterns in data.items()}
