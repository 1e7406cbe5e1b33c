"""Driver that ties the reader, macro expander and analyzer together.

Each top-level form is read, macro-expanded to a fixed point, analyzed into
an Expr and run against the interpreter's global environment. Runtime
failures come back as error values, so a bad form never stops the forms
after it; only a syntax error ends the source being read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO

from cinder import LispValue, SExpression
from cinder.builtins import register
from cinder.config import get_import_path
from cinder.evaluation.analyzer import Analyzer
from cinder.printer import to_string
from cinder.reader.parser import TokenStream, lex
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.errors import CinderError, CinderSyntaxError
from cinder.types.macro_table import MacroTable
from cinder.types.nil import Nil
from cinder.types.pair import Pair, split_list
from cinder.types.symbol import Symbol

logger = logging.getLogger(__name__)

IMPORT = Symbol("import")


def import_target(sexp: SExpression) -> Optional[str]:
    """The file named by a top-level (import "file") form, else None."""
    if not isinstance(sexp, Pair) or sexp.car != IMPORT:
        return None
    args, tail = split_list(sexp.cdr)
    if len(args) == 1 and tail is Nil and isinstance(args[0], str):
        return args[0]
    return None


class Interpreter:
    """
    Orchestrates reading and evaluating Cinder code.
    Maintains an Environment and an Analyzer (with its macro table) across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)
        self.analyzer: Analyzer = Analyzer()
        self._loading: set[Path] = set()

        if prelude:
            self.eval_prelude(prelude)

    @property
    def macros(self) -> MacroTable:
        return self.analyzer.macros

    def eval_form(self, sexp: SExpression) -> LispValue:
        """Expand, analyze and run one top-level form."""
        try:
            expr = self.analyzer.compile(sexp)
            return expr(self.env)
        except CinderError as exc:
            logger.warning("%s error: %s", exc.kind, exc)
            return ErrorValue.from_exception(exc)
        except RecursionError:
            logger.error("maximum recursion depth exceeded in top-level form")
            return ErrorValue("recursion", "maximum recursion depth exceeded")

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(lex(code))
        for expr in stream.parse_all():
            self.eval_form(expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`.

        Returns Nil for no forms, the value of a single form, or the list of
        values for several. Raises CinderSyntaxError on malformed input.
        """
        stream = TokenStream(lex(code))
        results: list[LispValue] = [self.eval_form(expr) for expr in stream.parse_all()]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def resolve_import(self, target: str, source_path: Path | None = None) -> Path:
        path = Path(target)
        if path.is_absolute():
            return path
        base = source_path.parent if source_path is not None else Path.cwd()
        for directory in [base, *get_import_path()]:
            candidate = directory / path
            if candidate.is_file():
                return candidate
        return base / path

    def run_source(
        self,
        source: str | TextIO,
        source_path: Path | None = None,
        echo: TextIO | None = None,
    ) -> bool:
        """Interpret every form of `source`, writing each result to `echo`.

        A top-level (import "file") interprets that file in the same
        environment. Returns False if a syntax error or a failed import
        ended the source early.
        """
        name = str(source_path) if source_path is not None else "<input>"
        stream = TokenStream(lex(source))
        while True:
            try:
                sexp = stream.read()
            except CinderSyntaxError as exc:
                logger.error("%s: syntax error: %s", name, exc)
                return False
            if sexp is None:
                return True

            target = import_target(sexp)
            if target is not None:
                if not self.run_file(self.resolve_import(target, source_path), echo):
                    return False
                continue

            result = self.eval_form(sexp)
            if echo is not None:
                echo.write(to_string(result) + "\n")

    def run_file(self, path: Path | str, echo: TextIO | None = None) -> bool:
        path = Path(path).resolve()
        if path in self._loading:
            logger.warning("skipping recursive import of %s", path)
            return True
        try:
            handle = path.open(encoding="utf-8")
        except OSError as exc:
            logger.error("couldn't open %s: %s", path, exc.strerror)
            return False
        self._loading.add(path)
        try:
            with handle:
                return self.run_source(handle, path, echo)
        finally:
            self._loading.discard(path)
