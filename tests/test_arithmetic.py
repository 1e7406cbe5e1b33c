import pytest

from cinder.builtins import wrap_int64
from cinder.printer import to_string
from cinder.types.error_value import ErrorValue
from cinder.types.nil import Nil

INT64_MAX = 2 ** 63 - 1
INT64_MIN = -(2 ** 63)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+)", 0),
        ("(- 10 3 2)", 5),
        ("(- 5)", -5),
        ("(* 2 3 4)", 24),
        ("(*)", 1),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(= 1 1 1)", True),
        ("(= 1 2)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(> 3 2 1)", True),
        ("(> 3 1 2)", False),
        ("(<)", True),
    ],
)
def test_arithmetic_and_comparison(interp, source, expected):
    assert interp.eval(source) == expected


def test_integer_results_wrap_to_64_bits(interp):
    assert interp.eval(f"(+ {INT64_MAX} 1)") == INT64_MIN
    assert interp.eval(f"(- {INT64_MIN} 1)") == INT64_MAX
    assert interp.eval(f"(* {INT64_MAX} 2)") == -2
    assert interp.eval(f"(- {INT64_MIN})") == INT64_MIN


@pytest.mark.parametrize("n", [0, 1, -1, INT64_MAX, INT64_MIN, INT64_MAX + 1, 2 ** 64 + 5])
def test_wrap_int64(n):
    wrapped = wrap_int64(n)
    assert INT64_MIN <= wrapped <= INT64_MAX
    assert (wrapped - n) % 2 ** 64 == 0


@pytest.mark.parametrize(
    "source,kind",
    [
        ('(+ 1 "a")', "type"),
        ("(+ 1 #t)", "type"),
        ("(< 'a 1)", "type"),
        ("(-)", "arity"),
        ("(car 1)", "type"),
        ("(cdr '())", "type"),
        ("(car)", "arity"),
        ("(cons 1)", "arity"),
        ("(null? 1 2)", "arity"),
        ("(newline 1)", "arity"),
        ("(apply +)", "arity"),
        ("(apply + 1)", "type"),
        ("(apply + '(1 . 2))", "type"),
        ("(apply 5 '())", "type"),
    ],
)
def test_builtin_contract_violations(interp, source, kind):
    result = interp.eval(source)
    assert isinstance(result, ErrorValue)
    assert result.kind == kind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(car '(1 2))", "1"),
        ("(cdr '(1 2))", "(2)"),
        ("(cdr '(1 . 2))", "2"),
        ("(list)", "()"),
        ("(list 1 (list 2) \"s\")", '(1 (2) "s")'),
        ("(pair? '(1))", "#t"),
        ("(pair? '())", "#f"),
        ("(null? '())", "#t"),
        ("(null? 0)", "#f"),
        ("(not #f)", "#t"),
        ("(not 0)", "#f"),
        ("(not '())", "#f"),
        ("(apply + 1 2 '(3 4))", "10"),
        ("(apply + '())", "0"),
        ("(apply list 1 '(2))", "(1 2)"),
        ("(apply (lambda (a . r) r) '(1 2 3))", "(2 3)"),
    ],
)
def test_list_builtins(interp, source, expected):
    assert to_string(interp.eval(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eq? 'a 'a)", True),
        ("(eq? 'a 'b)", False),
        ("(eq? 1 1)", True),
        ("(eq? 1 #t)", False),
        ("(eq? 0 #f)", False),
        ("(eq? #t #t)", True),
        ('(eq? "a" "a")', True),
        ('(eq? "a" \'a)', False),
        ("(eq? '() '())", True),
        ("(eq? '(1) '(1))", False),
        ("(eq? car car)", True),
        ("(eq? car cdr)", False),
        ("(eq?)", True),
        ("(eq? 1)", True),
        ("(eq? 1 1 2)", False),
    ],
)
def test_eq(interp, source, expected):
    assert interp.eval(source) is expected


def test_eq_pairs_by_identity(interp):
    interp.eval("(define p '(1 2))")
    assert interp.eval("(eq? p p)") is True
    assert interp.eval("(eq? (cdr p) (cdr p))") is True
    assert interp.eval("(eq? p (cons 1 (cdr p)))") is False


def test_eq_closures_by_identity(interp):
    interp.eval("(define (f) 1)")
    interp.eval("(define g f)")
    assert interp.eval("(eq? f g)") is True
    assert interp.eval("(eq? f (lambda () 1))") is False


def test_display_and_newline(interp, capsys):
    assert interp.eval('(display "hi " 1 \'(a "b"))') is Nil
    assert interp.eval("(newline)") is Nil
    assert capsys.readouterr().out == 'hi 1(a b)\n'
