from __future__ import annotations

from typing import TYPE_CHECKING

from cinder import Expr, SExpression

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer


def begin_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    """(begin e1 ... en) evaluates in order and returns the last value."""
    return analyzer.analyze_sequence(tail)
