"""Built-in procedures for the Cinder runtime environment.

Defines integer arithmetic and comparison, pair and list operations,
predicates, output, and `apply`. Each builtin receives the list of
evaluated arguments and enforces its own arity and type contract by raising
CinderArityError or CinderTypeError; the application engine turns those
into error values.
"""
from __future__ import annotations

import sys
from typing import Callable

from cinder import LispValue
from cinder.evaluation.apply import call_procedure
from cinder.printer import to_string
from cinder.types.environment import Environment
from cinder.types.errors import CinderArityError, CinderTypeError
from cinder.types.nil import Nil
from cinder.types.pair import Pair, from_iterable, split_list
from cinder.types.procedures import Builtin
from cinder.types.symbol import Symbol
from cinder.types.value import is_eq, to_bool

INT64_MODULUS = 2 ** 64


def wrap_int64(n: int) -> int:
    """Reduce `n` to a signed 64-bit integer, wrapping on overflow."""
    n %= INT64_MODULUS
    return n - INT64_MODULUS if n >= 2 ** 63 else n


def _expect_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        plural = "argument" if count == 1 else "arguments"
        raise CinderArityError(f"{name} requires exactly {count} {plural}, got {len(args)}")


def _integers(name: str, args: list[LispValue]) -> list[int]:
    for arg in args:
        if isinstance(arg, bool) or not isinstance(arg, int):
            raise CinderTypeError(f"All arguments to {name} must be integers, got {to_string(arg)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> int:
    """Return the sum of all arguments; 0 with none."""
    return wrap_int64(sum(_integers("+", args)))


def sub(args: list[LispValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    if not args:
        raise CinderArityError("- requires at least 1 argument")
    first, *rest = _integers("-", args)
    if not rest:
        return wrap_int64(-first)
    return wrap_int64(first - sum(rest))


def mul(args: list[LispValue]) -> int:
    """Return the product of all arguments; 1 with none."""
    result = 1
    for x in _integers("*", args):
        result = wrap_int64(result * x)
    return result


def _comparison(name: str, test: Callable[[int, int], bool]) -> Callable[[list[LispValue]], bool]:
    def compare(args: list[LispValue]) -> bool:
        values = _integers(name, args)
        return all(test(a, b) for a, b in zip(values, values[1:]))

    compare.__doc__ = f"Chainable {name}: #t if it holds for every adjacent pair."
    return compare


num_eq = _comparison("=", lambda a, b: a == b)
lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)


# -------------------------------
# Equality and predicates
# -------------------------------
def eq(args: list[LispValue]) -> bool:
    """#t if every argument is eq? to the first (or zero/one arg)."""
    if not args:
        return True
    first = args[0]
    return all(is_eq(first, other) for other in args[1:])


def is_pair(args: list[LispValue]) -> bool:
    _expect_arity("pair?", args, 1)
    return isinstance(args[0], Pair)


def is_null(args: list[LispValue]) -> bool:
    _expect_arity("null?", args, 1)
    return args[0] is Nil


def logical_not(args: list[LispValue]) -> bool:
    """Logical NOT; only #f is false."""
    _expect_arity("not", args, 1)
    return not to_bool(args[0])


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(args: list[LispValue]) -> Pair:
    _expect_arity("cons", args, 2)
    return Pair(args[0], args[1])


def _pair_arg(name: str, args: list[LispValue]) -> Pair:
    _expect_arity(name, args, 1)
    xs = args[0]
    if not isinstance(xs, Pair):
        raise CinderTypeError(f"{name} expects a pair, got {to_string(xs)}")
    return xs


def car(args: list[LispValue]) -> LispValue:
    return _pair_arg("car", args).car


def cdr(args: list[LispValue]) -> LispValue:
    return _pair_arg("cdr", args).cdr


def list_builtin(args: list[LispValue]) -> LispValue:
    return from_iterable(args)


def apply(args: list[LispValue]) -> LispValue:
    """(apply f a1 ... an lst) calls f with a1 ... an followed by the items of lst."""
    if len(args) < 2:
        raise CinderArityError("apply requires a procedure and an argument list")
    proc, *leading, last = args
    items, tail = split_list(last)
    if tail is not Nil:
        raise CinderTypeError(f"apply expects a proper list, got {to_string(last)}")
    return call_procedure(proc, leading + items)


# -------------------------------
# Output
# -------------------------------
def display(args: list[LispValue]) -> LispValue:
    """Write each argument to standard output; strings are written verbatim."""
    for arg in args:
        sys.stdout.write(to_string(arg, readable=False))
    return Nil


def newline(args: list[LispValue]) -> LispValue:
    _expect_arity("newline", args, 0)
    sys.stdout.write("\n")
    return Nil


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "=": num_eq,
    "<": lt,
    ">": gt,
    "eq?": eq,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_builtin,
    "pair?": is_pair,
    "null?": is_null,
    "not": logical_not,
    "display": display,
    "newline": newline,
    "apply": apply,
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
