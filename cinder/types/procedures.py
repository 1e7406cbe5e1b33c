"""Procedure values: native builtins and user closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Sequence

from cinder import Expr, LispValue
from cinder.types.environment import Environment
from cinder.types.errors import CinderArityError
from cinder.types.nil import Nil
from cinder.types.pair import from_iterable
from cinder.types.symbol import Symbol

BuiltinFn = Callable[[list[LispValue]], LispValue]


class Builtin:
    """A native procedure called with the list of evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"


class Closure:
    """A first-class procedure: parameter list, compiled body and captured env."""

    __slots__ = ("params", "rest", "body", "env")

    def __init__(
        self,
        params: Sequence[Symbol],
        rest: Symbol | None,
        body: Expr,
        env: Environment,
    ):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.rest: Symbol | None = rest
        self.body: Expr = body
        self.env: Environment = env

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure ")
            if self.params or self.rest is None:
                buffer.write("(")
                buffer.write(" ".join(str(p) for p in self.params))
                if self.rest is not None:
                    buffer.write(f" . {self.rest}")
                buffer.write(")")
            else:
                buffer.write(str(self.rest))
            buffer.write(">")
            return buffer.getvalue()

    def extend_env(self, args: Sequence[LispValue]) -> Environment:
        """
        Bind argument values in a fresh frame whose parent is the captured
        environment. Missing positional arguments bind to Nil; surplus
        arguments go to the rest parameter, or raise CinderArityError when
        there is none.
        """
        frame = Environment(outer=self.env)
        for i, name in enumerate(self.params):
            frame.define(name, args[i] if i < len(args) else Nil)

        surplus = args[len(self.params):]
        if self.rest is not None:
            frame.define(self.rest, from_iterable(surplus))
        elif surplus:
            raise CinderArityError(
                f"expected at most {len(self.params)} arguments, got {len(args)}"
            )
        return frame

    def apply(self, args: Sequence[LispValue]) -> LispValue:
        return self.body(self.extend_env(args))
