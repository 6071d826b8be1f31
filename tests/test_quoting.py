import pytest

from minilisp.errors import MiniLispNameError, MiniLispTypeError
from minilisp.types import Quoted, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'a", Symbol("a")),
        ("'5", 5),
        ("'()", []),
        ("'(1 2 3)", [1, 2, 3]),
        ("'(+ 1 2)", [Symbol("+"), 1, 2]),
        ("'(a (b c))", [Symbol("a"), [Symbol("b"), Symbol("c")]]),
        ("''a", Quoted(Symbol("a"))),
        ("'(a 'b)", [Symbol("a"), Quoted(Symbol("b"))]),
    ]
)
def test_quote_returns_data_unevaluated(run, source, expected):
    assert run(source) == expected


def test_quoted_unbound_symbol_is_not_resolved(run):
    assert run("'undefined-thing") == Symbol("undefined-thing")
    with pytest.raises(MiniLispNameError):
        run("undefined-thing")


def test_quoted_list_is_not_applied(run):
    assert run("'(1 2 3)") == [1, 2, 3]
    with pytest.raises(MiniLispTypeError):
        run("(1 2 3)")


def test_quoted_data_becomes_code_through_eval(run):
    run("(def 'code '(* 6 7))")
    assert run("code") == [Symbol("*"), 6, 7]
    assert run("(eval code)") == 42


def test_double_quote_needs_two_evals(run):
    assert run("(eval ''x)") == Symbol("x")
    run("(def 'x 3)")
    assert run("(eval (eval ''x))") == 3
