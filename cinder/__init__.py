# Core type aliases for Cinder's data model.
#
# Runtime data is represented with plain Python values where one fits
# (int, bool, str) and small classes under cinder.types otherwise
# (Symbol, Nil, Pair, Builtin, Closure, ErrorValue). Code and data share
# the same representation.
#
# Naming guidance:
# - SExpression: use in reader/expander code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` here; cinder.types.value.Value spells out the closed
# union for code that dispatches on the variant.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# A compiled expression: takes an Environment, returns a LispValue.
Expr = Callable[[Any], LispValue]

__version__ = "0.1.0"
