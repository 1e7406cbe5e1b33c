import pytest

from cinder.printer import to_string
from cinder.types.error_value import ErrorValue
from cinder.types.nil import Nil
from cinder.types.symbol import Symbol


def test_rest_parameter_collects_surplus(interp):
    assert to_string(interp.eval("((lambda (a . rest) rest) 1 2 3)")) == "(2 3)"
    assert interp.eval("((lambda (a . rest) a) 1 2 3)") == 1


def test_rest_parameter_empty_when_no_surplus(interp):
    assert interp.eval("((lambda (a . rest) rest) 1)") is Nil


def test_bare_symbol_parameter_takes_all_arguments(interp):
    assert to_string(interp.eval("((lambda args args) 1 2)")) == "(1 2)"
    assert interp.eval("((lambda args args))") is Nil


def test_define_with_rest_parameter(interp):
    interp.eval("(define (f a b . more) more)")
    assert to_string(interp.eval("(f 1 2 3 4)")) == "(3 4)"
    interp.eval("(define (g . all) all)")
    assert to_string(interp.eval("(g 5 6)")) == "(5 6)"


def test_missing_arguments_bind_to_nil(interp):
    assert interp.eval("((lambda (a b) b) 1)") is Nil
    assert interp.eval("((lambda (a b . rest) rest))") is Nil


def test_surplus_arguments_without_rest_are_an_arity_error(interp, caplog):
    result = interp.eval("((lambda (a) a) 1 2)")
    assert isinstance(result, ErrorValue)
    assert result.kind == "arity"
    assert "arity error" in caplog.text


def test_closure_records_parameter_list(interp):
    value = interp.eval("(lambda (a b . c) a)")
    assert value.params == (Symbol("a"), Symbol("b"))
    assert value.rest == Symbol("c")


@pytest.mark.parametrize(
    "source,kind",
    [
        ("(lambda)", "arity"),
        ("(lambda (1) 1)", "syntax"),
        ("(lambda (a . 2) a)", "syntax"),
    ],
)
def test_malformed_lambda(interp, source, kind):
    result = interp.eval(source)
    assert isinstance(result, ErrorValue)
    assert result.kind == kind
