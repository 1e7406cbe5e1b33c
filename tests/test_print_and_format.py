import pytest

from cinder.printer import to_string
from cinder.builtins import car
from cinder.types.environment import Environment
from cinder.types.error_value import ErrorValue
from cinder.types.nil import Nil
from cinder.types.pair import Pair, make_list
from cinder.types.procedures import Builtin, Closure
from cinder.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (42, "42"),
        (-7, "-7"),
        (True, "#t"),
        (False, "#f"),
        ("hi", '"hi"'),
        ('a "q"\n', '"a \\"q\\"\\n"'),
        (Symbol("foo"), "foo"),
        (Nil, "()"),
        (Pair(1, 2), "(1 . 2)"),
        (make_list(1, 2, 3), "(1 2 3)"),
        (Pair(1, Pair(2, 3)), "(1 2 . 3)"),
        (make_list(make_list(Symbol("a")), Nil, "s"), '((a) () "s")'),
        (Pair(Nil, Nil), "(())"),
    ],
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_display_mode_writes_strings_verbatim():
    assert to_string(make_list("a b", 1), readable=False) == "(a b 1)"
    assert to_string("line\n", readable=False) == "line\n"


def test_procedure_and_error_rendering():
    body = lambda env: Nil
    env = Environment()
    assert to_string(Builtin("car", car)) == "#<builtin car>"
    assert to_string(Closure([Symbol("a"), Symbol("b")], None, body, env)) == "#<closure (a b)>"
    assert to_string(Closure([Symbol("a")], Symbol("rest"), body, env)) == "#<closure (a . rest)>"
    assert to_string(Closure([], Symbol("args"), body, env)) == "#<closure args>"
    assert to_string(Closure([], None, body, env)) == "#<closure ()>"
    assert to_string(ErrorValue("unbound", "undefined variable: x")) == "#<error unbound: undefined variable: x>"


def test_pair_str_uses_printer():
    assert str(make_list(Symbol("quote"), Symbol("x"))) == "(quote x)"


def test_unknown_value_fails_loudly():
    with pytest.raises(AssertionError):
        to_string(1.5j)
