"""Analyze-once evaluator for Cinder.

`Analyzer.analyze` inspects the shape of a form a single time and returns
an Expr, a plain Python function from Environment to value. Running a loop
body or a recursive procedure re-invokes the compiled Expr and never looks
at the syntax again.

The analyzer owns the macro table, so each interpreter instance carries its
own macros. Macro expansion runs over the whole form before analysis.
"""

from __future__ import annotations

import logging
from typing import Sequence, assert_never

from cinder import Expr, LispValue, SExpression
from cinder.evaluation.apply import apply_procedure
from cinder.evaluation.special_forms import SPECIAL_FORMS
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.errors import CinderSyntaxError
from cinder.types.macro_table import MacroTable
from cinder.types.nil import Nil, NilType
from cinder.types.pair import Pair, split_list
from cinder.types.procedures import Builtin, Closure
from cinder.types.symbol import Symbol

logger = logging.getLogger(__name__)


def constant(value: LispValue) -> Expr:
    return lambda env: value


def form_operands(form: Pair) -> list[SExpression]:
    """The operands of a compound form, which must be a proper list."""
    items, tail = split_list(form.cdr)
    if tail is not Nil:
        raise CinderSyntaxError(f"improper form: {form}")
    return items


class Analyzer:
    """Compiles s-expressions into Exprs."""

    def __init__(self, macros: MacroTable | None = None):
        self.macros: MacroTable = macros if macros is not None else MacroTable()

    def expand(self, sexp: SExpression) -> SExpression:
        return self.macros.macro_expand_all(sexp)

    def compile(self, sexp: SExpression) -> Expr:
        """Expand macros in `sexp`, then analyze the result."""
        return self.analyze(self.expand(sexp))

    def evaluate(self, sexp: SExpression, env: Environment) -> LispValue:
        return self.compile(sexp)(env)

    def analyze(self, sexp: SExpression) -> Expr:
        match sexp:
            case bool() | int() | str() | NilType():
                return constant(sexp)
            case Symbol():
                return self.analyze_variable(sexp)
            case Pair():
                head = sexp.car
                if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                    return SPECIAL_FORMS[head](self, form_operands(sexp))
                return self.analyze_application(sexp)
            case Builtin() | Closure() | ErrorValue():
                # Procedure and error values can be spliced into code by macros.
                return constant(sexp)
            case _:
                assert_never(sexp)

    def analyze_variable(self, name: Symbol) -> Expr:
        def variable(env: Environment) -> LispValue:
            frame = env.find(name)
            if frame is None:
                logger.warning("undefined variable: %s", name)
                return ErrorValue("unbound", f"undefined variable: {name}")
            return frame.vars[name]

        return variable

    def analyze_sequence(self, forms: Sequence[SExpression]) -> Expr:
        """Evaluate forms in order and return the last value (Nil if none).

        An error value stops the sequence and becomes its result.
        """
        exprs = [self.analyze(form) for form in forms]
        if not exprs:
            return constant(Nil)
        if len(exprs) == 1:
            return exprs[0]

        def sequence(env: Environment) -> LispValue:
            result: LispValue = Nil
            for expr in exprs:
                result = expr(env)
                if isinstance(result, ErrorValue):
                    return result
            return result

        return sequence

    def analyze_application(self, form: Pair) -> Expr:
        fn_expr = self.analyze(form.car)
        arg_exprs = [self.analyze(arg) for arg in form_operands(form)]

        def application(env: Environment) -> LispValue:
            proc = fn_expr(env)
            if isinstance(proc, ErrorValue):
                return proc
            args: list[LispValue] = []
            for arg_expr in arg_exprs:
                value = arg_expr(env)
                if isinstance(value, ErrorValue):
                    return value
                args.append(value)
            return apply_procedure(proc, args)

        return application
