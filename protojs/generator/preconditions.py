"""Null checks preceding the parsing of a value."""

from collections.abc import Iterator
from contextlib import contextmanager

from .kinds import Kind, ValueKind
from .writer import CodeWriter

NULL = "null"


def requires_null_guard(kind: ValueKind) -> bool:
    return kind.kind is not Kind.MESSAGE_NO_NULL_GUARD


@contextmanager
def null_guard(writer: CodeWriter, kind: ValueKind, value: str, merge: str) -> Iterator[None]:
    """Guard the code emitted in the body against a `null` value.

    When the value is `null`, `merge` is emitted with `null` substituted for
    `{}` and the body is skipped at runtime. `google.protobuf.Value` fields get
    no guard: their parser converts `null` into a `NullValue`.
    """
    if not requires_null_guard(kind):
        yield
        return
    with writer.if_block(f"{value} === {NULL}"):
        writer.line(merge.format(NULL))
        writer.enter_else_block()
        yield
