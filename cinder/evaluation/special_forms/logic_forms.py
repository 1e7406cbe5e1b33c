from __future__ import annotations

from typing import TYPE_CHECKING

from cinder import Expr, LispValue, SExpression
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.value import to_bool

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer


def and_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns #f at
    the first false one. If all are true, returns the value of the last
    operand. With zero operands, returns #t.
    """
    exprs = [analyzer.analyze(operand) for operand in tail]

    def conjunction(env: Environment) -> LispValue:
        result: LispValue = True
        for expr in exprs:
            result = expr(env)
            if isinstance(result, ErrorValue):
                return result
            if not to_bool(result):
                return False
        return result

    return conjunction


def or_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the
    first true value. If none are true, returns #f. With zero operands,
    returns #f.
    """
    exprs = [analyzer.analyze(operand) for operand in tail]

    def disjunction(env: Environment) -> LispValue:
        for expr in exprs:
            value = expr(env)
            if isinstance(value, ErrorValue) or to_bool(value):
                return value
        return False

    return disjunction
