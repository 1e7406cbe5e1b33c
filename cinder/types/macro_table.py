from __future__ import annotations

import logging

from cinder import SExpression
from cinder.evaluation.apply import apply_procedure
from cinder.types.pair import Pair, split_list
from cinder.types.procedures import Closure
from cinder.types.symbol import Symbol

logger = logging.getLogger(__name__)

QUOTE = Symbol("quote")


class MacroTable:
    """
    Macro table mapping macro names (Symbols) to Closure transformers, and
    the non-hygienic expander that consults it.

    A transformer is an ordinary closure applied to the *unevaluated*
    argument forms; whatever it returns replaces the invocation. Expansion
    repeats whole-tree passes until a pass performs no substitution, so a
    macro that expands into a call of itself never terminates.
    """

    def __init__(self):
        self.macros: dict[Symbol, Closure] = {}

    def define_macro(self, name: Symbol, transformer: Closure) -> None:
        self.macros[name] = transformer

    def is_macro(self, sym: SExpression) -> bool:
        return isinstance(sym, Symbol) and sym in self.macros

    def __contains__(self, sym: SExpression) -> bool:
        return self.is_macro(sym)

    def __len__(self) -> int:
        return len(self.macros)

    def _run_transformer(self, transformer: Closure, args: list[SExpression]) -> SExpression:
        return apply_procedure(transformer, args)

    def expand_1(self, form: SExpression) -> tuple[SExpression, bool]:
        """Expand only a head-position macro, if present."""
        if isinstance(form, Pair) and self.is_macro(form.car):
            args, _ = split_list(form.cdr)
            return self._run_transformer(self.macros[form.car], args), True
        return form, False

    def expand_once(self, form: SExpression) -> tuple[SExpression, bool]:
        """One rewrite pass over the whole tree.

        Returns the rewritten form and whether any substitution happened.
        Quoted data is left alone. Any other pair has its car and cdr walked
        separately, so a macro name heading a cdr sub-list also expands.
        Nodes are only rebuilt when something beneath them changed.
        """
        if not isinstance(form, Pair):
            return form, False
        if form.car == QUOTE:
            return form, False

        form, expanded = self.expand_1(form)
        if expanded:
            return form, True

        new_car, car_changed = self.expand_once(form.car)
        new_cdr, cdr_changed = self.expand_once(form.cdr)
        if not (car_changed or cdr_changed):
            return form, False
        return Pair(new_car, new_cdr), True

    def macro_expand_all(self, form: SExpression) -> SExpression:
        """Rewrite `form` until a pass makes no substitution."""
        if not self.macros:
            return form
        while True:
            form, expanded = self.expand_once(form)
            if not expanded:
                return form
            logger.debug("expanded to: %s", form)
