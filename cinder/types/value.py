"""The closed set of runtime value variants and the predicates over them."""

from __future__ import annotations

from typing import Union, assert_never

from cinder.types.error_value import ErrorValue
from cinder.types.nil import NilType
from cinder.types.pair import Pair
from cinder.types.procedures import Builtin, Closure
from cinder.types.symbol import Symbol

# bool is listed before int: every match over Value must test it first,
# since bool is a subclass of int.
Value = Union[bool, int, str, Symbol, NilType, Pair, Builtin, Closure, ErrorValue]


def to_bool(value: Value) -> bool:
    """Only #f is false. 0, "", () and errors are all true."""
    return value is not False


def is_eq(a: Value, b: Value) -> bool:
    """Identity-style equality used by `eq?`.

    Atoms compare by variant and payload; pairs, closures and builtins by
    node identity.
    """
    match a:
        case bool():
            return isinstance(b, bool) and a == b
        case int():
            return isinstance(b, int) and not isinstance(b, bool) and a == b
        case str():
            return isinstance(b, str) and a == b
        case Symbol():
            return a == b
        case NilType():
            return isinstance(b, NilType)
        case Pair() | Builtin() | Closure():
            return a is b
        case ErrorValue():
            return a == b
        case _:
            assert_never(a)
