"""Application engine for Cinder.

Centralizes procedure-call semantics for the analyzer, the macro expander
and the `apply` builtin:
- Builtins are called directly with the argument list.
- Closures bind their arguments in a fresh frame under the captured
  environment and run their compiled body.
- Anything else is a type mismatch.

Failures never unwind past this point: a CinderError raised while calling
becomes an ErrorValue, which is logged and returned.
"""

from __future__ import annotations

import logging
from typing import Sequence

from cinder import LispValue
from cinder.printer import to_string
from cinder.types.error_value import ErrorValue
from cinder.types.errors import CinderError, CinderTypeError
from cinder.types.procedures import Builtin, Closure

logger = logging.getLogger(__name__)


def call_procedure(proc: LispValue, args: Sequence[LispValue]) -> LispValue:
    """Apply `proc` to `args`, raising CinderError on failure."""
    if isinstance(proc, Builtin):
        return proc(list(args))
    if isinstance(proc, Closure):
        return proc.apply(args)
    raise CinderTypeError(f"cannot apply non-procedure {to_string(proc)}")


def apply_procedure(proc: LispValue, args: Sequence[LispValue]) -> LispValue:
    """Apply `proc` to `args`; failures come back as an ErrorValue."""
    try:
        return call_procedure(proc, args)
    except CinderError as exc:
        logger.warning("%s error: %s", exc.kind, exc)
        return ErrorValue.from_exception(exc)
