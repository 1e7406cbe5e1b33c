from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from cinder import Expr, LispValue, SExpression
from cinder.types.environment import Environment
from cinder.types.errors import CinderArityError, CinderInvalidSymbol
from cinder.types.nil import Nil
from cinder.types.pair import split_list
from cinder.types.procedures import Closure
from cinder.types.symbol import Symbol

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer

logger = logging.getLogger(__name__)


def parse_params(params: SExpression) -> tuple[list[Symbol], Symbol | None]:
    """Split a parameter list into fixed names and an optional rest name.

    (a b) has no rest parameter, (a . rest) has one, and a bare symbol
    takes every argument as the rest list.
    """
    names, tail = split_list(params)
    for name in names:
        if not isinstance(name, Symbol):
            raise CinderInvalidSymbol(f"parameter must be a symbol, got {name}")
    if tail is Nil:
        return names, None
    if not isinstance(tail, Symbol):
        raise CinderInvalidSymbol(f"rest parameter must be a symbol, got {tail}")
    return names, tail


def make_lambda(
    analyzer: Analyzer, params: SExpression, body_forms: Sequence[SExpression]
) -> Expr:
    """Analyze a parameter list and body into an Expr producing closures."""
    names, rest = parse_params(params)
    body = analyzer.analyze_sequence(body_forms)

    def closure(env: Environment) -> LispValue:
        proc = Closure(names, rest, body, env)
        logger.debug("closure created: %r", proc)
        return proc

    return closure


def lambda_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """(lambda (arg1 ... . rest) body...)

    Zero body forms are allowed; calling such a procedure yields Nil.
    Arguments are bound at application time, not here.
    """
    if not tail:
        raise CinderArityError("lambda requires at least a parameter list")
    return make_lambda(analyzer, tail[0], tail[1:])
