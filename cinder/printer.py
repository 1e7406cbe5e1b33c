"""Render runtime values in Cinder's surface syntax."""

from __future__ import annotations

from io import StringIO
from typing import assert_never

from cinder.types.error_value import ErrorValue
from cinder.types.nil import NilType
from cinder.types.pair import Pair
from cinder.types.procedures import Builtin, Closure
from cinder.types.symbol import Symbol
from cinder.types.value import Value


def escape_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def write_value(buffer: StringIO, value: Value, readable: bool = True) -> None:
    """Write `value` to `buffer`.

    With `readable`, strings are quoted and escaped so the output reads back
    as the same datum; otherwise they are written verbatim (for `display`).
    """
    match value:
        case bool():
            buffer.write("#t" if value else "#f")
        case int():
            buffer.write(str(value))
        case str():
            buffer.write(f'"{escape_string(value)}"' if readable else value)
        case Symbol():
            buffer.write(value.name)
        case NilType():
            buffer.write("()")
        case Pair():
            buffer.write("(")
            write_value(buffer, value.car, readable)
            rest = value.cdr
            while isinstance(rest, Pair):
                buffer.write(" ")
                write_value(buffer, rest.car, readable)
                rest = rest.cdr
            if not isinstance(rest, NilType):
                buffer.write(" . ")
                write_value(buffer, rest, readable)
            buffer.write(")")
        case Builtin() | Closure():
            buffer.write(repr(value))
        case ErrorValue():
            buffer.write(str(value))
        case _:
            assert_never(value)


def to_string(value: Value, readable: bool = True) -> str:
    with StringIO() as buffer:
        write_value(buffer, value, readable)
        return buffer.getvalue()
