"""Special forms that manage and inspect the analyzer's macro table.

(define-macro name value) binds name like define and registers the value,
which must be a closure, as a macro. (macroify name) registers the closure
already bound to name in the current environment. (macroexpand form)
evaluates form and returns its expansion without evaluating it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cinder import Expr, LispValue, SExpression
from cinder.evaluation.special_forms.define_form import analyze_definition
from cinder.printer import to_string
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.errors import CinderArityError, CinderInvalidSymbol
from cinder.types.procedures import Closure
from cinder.types.symbol import Symbol

if TYPE_CHECKING:
    from cinder.evaluation.analyzer import Analyzer


def _not_a_closure(name: Symbol, value: LispValue) -> ErrorValue:
    return ErrorValue("type", f"macro {name} must be a closure, got {to_string(value)}")


def define_macro_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    name, value_expr = analyze_definition(analyzer, tail, "define-macro")
    macros = analyzer.macros

    def define_macro(env: Environment) -> LispValue:
        value = value_expr(env)
        if isinstance(value, ErrorValue):
            return value
        if not isinstance(value, Closure):
            return _not_a_closure(name, value)
        env.define(name, value)
        macros.define_macro(name, value)
        return True

    return define_macro


def macroify_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    if len(tail) != 1:
        raise CinderArityError("macroify requires exactly 1 argument")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise CinderInvalidSymbol(f"macroify expects a symbol, got {name}")
    macros = analyzer.macros

    def macroify(env: Environment) -> LispValue:
        frame = env.find(name)
        if frame is None:
            return ErrorValue("unbound", f"undefined variable: {name}")
        value = frame.vars[name]
        if not isinstance(value, Closure):
            return _not_a_closure(name, value)
        macros.define_macro(name, value)
        return True

    return macroify


def macroexpand_form(analyzer: Analyzer, tail: list[SExpression]) -> Expr:
    if len(tail) != 1:
        raise CinderArityError("macroexpand requires exactly 1 argument")
    form_expr = analyzer.analyze(tail[0])
    macros = analyzer.macros

    def macroexpand(env: Environment) -> LispValue:
        form = form_expr(env)
        if isinstance(form, ErrorValue):
            return form
        return macros.macro_expand_all(form)

    return macroexpand
