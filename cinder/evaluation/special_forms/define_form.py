from __future__ import annotations

from typing import TYPE_CHECKING

from cinder import Expr, LispValue, SExpression
from cinder.evaluation.special_forms.lambda_form import make_lambda
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.errors import CinderArityError, CinderInvalidSymbol
from cinder.types.nil import Nil
from cinder.types.pair import Pair
from cinder.types.symbol import Symbol

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer


def analyze_definition(
    analyzer: Analyzer, tail: list[SExpression], form_name: str
) -> tuple[Symbol, Expr]:
    """Analyze the operands shared by define and define-macro.

    (name value) gives the name and the value Expr; ((name . params) body...)
    is sugar for (name (lambda params body...)).
    """
    if not tail:
        raise CinderArityError(f"{form_name} requires a name")
    target = tail[0]
    if isinstance(target, Pair):
        name = target.car
        if not isinstance(name, Symbol):
            raise CinderInvalidSymbol(f"Cannot define {name} as a symbol")
        return name, make_lambda(analyzer, target.cdr, tail[1:])

    if not isinstance(target, Symbol):
        raise CinderInvalidSymbol(f"Cannot define {target} as a symbol")
    if len(tail) != 2:
        raise CinderArityError(f"{form_name} requires exactly 2 arguments")
    return target, analyzer.analyze(tail[1])


def define_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """
    (define name value) or (define (name arg...) body...)
    Binds in the frame the form runs in, never in an enclosing one.
    """
    name, value_expr = analyze_definition(analyzer, tail, "define")

    def definition(env: Environment) -> LispValue:
        value = value_expr(env)
        if isinstance(value, ErrorValue):
            return value
        env.define(name, value)
        return Nil

    return definition
