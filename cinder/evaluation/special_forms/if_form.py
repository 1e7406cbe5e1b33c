from __future__ import annotations

from typing import TYPE_CHECKING

from cinder import Expr, LispValue, SExpression
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.errors import CinderArityError
from cinder.types.nil import Nil
from cinder.types.value import to_bool

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer


def if_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """(if test then [else]); a missing else branch yields Nil."""
    if len(tail) not in (2, 3):
        raise CinderArityError("if requires a test, a consequent and an optional alternative")

    test = analyzer.analyze(tail[0])
    then = analyzer.analyze(tail[1])
    otherwise = analyzer.analyze(tail[2]) if len(tail) == 3 else (lambda env: Nil)

    def conditional(env: Environment) -> LispValue:
        value = test(env)
        if isinstance(value, ErrorValue):
            return value
        return then(env) if to_bool(value) else otherwise(env)

    return conditional
