"""Indentation-aware accumulation of generated JavaScript code."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Self

INDENT = "  "


class UnbalancedScopeError(RuntimeError):
    """Raised when scopes of a `CodeWriter` are not entered and exited in pairs."""


class CodeWriter:
    """Accumulates lines of code along with their nesting depth.

    Scopes form a stack: every `enter_*` call pushes one and `exit_block`
    pops it. The context managers `block`, `if_block` and `method` restore the
    depth they were entered at, also when the body raises. `text` refuses to
    render a writer with open scopes.
    """

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent
        self._lines: list[tuple[int, str]] = []
        self._scopes: list[str] = []

    @property
    def depth(self) -> int:
        return len(self._scopes)

    @property
    def lines(self) -> list[str]:
        return [f"{self.indent * depth}{text}" if text else "" for depth, text in self._lines]

    def line(self, text: str) -> Self:
        self._lines.append((self.depth, text))
        return self

    def blank(self) -> Self:
        self._lines.append((0, ""))
        return self

    def enter_block(self, header: str, kind: str = "block") -> Self:
        self.line(f"{header} {{")
        self._scopes.append(kind)
        return self

    def enter_if_block(self, condition: str) -> Self:
        return self.enter_block(f"if ({condition})", kind="if")

    def enter_else_block(self) -> Self:
        if not self._scopes or self._scopes[-1] != "if":
            raise UnbalancedScopeError("`else` must directly follow an `if` scope")
        self._scopes.pop()
        self.line("} else {")
        self._scopes.append("else")
        return self

    def enter_method(self, name: str, argument: str) -> Self:
        return self.enter_block(f"{name} = function({argument})", kind="method")

    def exit_block(self, suffix: str = "") -> Self:
        if not self._scopes:
            raise UnbalancedScopeError("No scope to exit")
        self._scopes.pop()
        self.line("}" + suffix)
        return self

    def exit_method(self) -> Self:
        if not self._scopes or self._scopes[-1] != "method":
            raise UnbalancedScopeError("Not inside a method")
        return self.exit_block(";")

    def _close_to(self, depth: int, suffix: str = "") -> None:
        while self.depth > depth:
            self.exit_block(suffix if self.depth == depth + 1 else "")

    @contextmanager
    def block(self, header: str, suffix: str = "") -> Iterator[Self]:
        depth = self.depth
        self.enter_block(header)
        try:
            yield self
        finally:
            self._close_to(depth, suffix)

    @contextmanager
    def if_block(self, condition: str) -> Iterator[Self]:
        depth = self.depth
        self.enter_if_block(condition)
        try:
            yield self
        finally:
            self._close_to(depth)

    @contextmanager
    def method(self, name: str, argument: str) -> Iterator[Self]:
        depth = self.depth
        self.enter_method(name, argument)
        try:
            yield self
        finally:
            self._close_to(depth, ";")

    def append(self, other: "CodeWriter") -> Self:
        """Append the code of another writer, shifted to the current depth."""
        if other.depth != 0:
            raise UnbalancedScopeError("Cannot append a writer with open scopes")
        for depth, text in other._lines:
            self._lines.append((self.depth + depth if text else 0, text))
        return self

    def text(self) -> str:
        if self._scopes:
            raise UnbalancedScopeError(f"{len(self._scopes)} scope(s) left open: {self._scopes}")
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return "\n".join(self.lines)
