"""Import statements found in JavaScript sources."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

IMPORT_START = "require('"
IMPORT_END = "')"

CURRENT_DIRECTORY = "./"
PARENT_DIRECTORY = "../"


class MalformedImportStatement(ValueError):
    """Raised when a line starts an import but does not complete it."""


@dataclass(frozen=True)
class ImportStatement:
    """An import line of a file, e.g. `let x = require('./a/b_pb.js');`.

    Instances are immutable; rewriting the path produces a new statement.
    """

    source_directory: Path
    text: str
    path: str
    start: int
    end: int

    @staticmethod
    def is_declared_in(line: str) -> bool:
        return IMPORT_START in line

    @classmethod
    def parse(cls, source_directory: str | Path, line: str) -> "ImportStatement":
        begin = line.find(IMPORT_START)
        if begin < 0:
            raise MalformedImportStatement(
                f"An import statement should look like `{IMPORT_START}...{IMPORT_END}`: {line}"
            )
        start = begin + len(IMPORT_START)
        end = line.find(IMPORT_END, start)
        if end < 0:
            raise MalformedImportStatement(f"Unterminated import statement: {line}")
        return cls(Path(source_directory), line, line[start:end], start, end)

    def replace_path(self, path: str) -> "ImportStatement":
        text = self.text[: self.start] + path + self.text[self.end :]
        return ImportStatement(self.source_directory, text, path, self.start, self.start + len(path))

    @property
    def is_relative(self) -> bool:
        return self.path.startswith((CURRENT_DIRECTORY, PARENT_DIRECTORY))

    @property
    def imported_file(self) -> Path:
        """Normalized path of the imported file."""
        return Path(os.path.normpath(self.source_directory / self.path))

    def imported_file_exists(self) -> bool:
        path = self.imported_file
        exists = path.exists()
        logger.debug("Checking if the imported file `%s` exists, result: %s.", path, exists)
        return exists

    def __str__(self) -> str:
        return self.text
