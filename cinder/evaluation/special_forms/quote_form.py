from __future__ import annotations

from typing import TYPE_CHECKING

from cinder import Expr, SExpression
from cinder.types.errors import CinderArityError

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer


def quote_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """(quote x) returns x itself, captured at analysis time."""
    if len(tail) != 1:
        raise CinderArityError("quote expects exactly 1 argument")
    datum = tail[0]
    return lambda env: datum
