import pytest
from hypothesis import given, strategies as st

from minilisp.errors import MiniLispSyntaxError
from minilisp.printer import render
from minilisp.reader.parser import lex, read, TokenStream
from minilisp.types import Quoted, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2"), ("rparen", ")")]),
        ("a;b\nc", [("symbol", "a"), ("symbol", "c")]),
        ("   ", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("1a", Symbol("1a")),
        ("foo", Symbol("foo")),
        ("'a", Quoted(Symbol("a"))),
        ("'(x y)", Quoted([Symbol("x"), Symbol("y")])),
        ("''a", Quoted(Quoted(Symbol("a")))),
        ("()", []),
        ("(+ 1 (* 2 3))", [Symbol("+"), 1, [Symbol("*"), 2, 3]]),
        ("(lambda '(x) '(+ x 1))", [Symbol("lambda"), Quoted([Symbol("x")]), Quoted([Symbol("+"), Symbol("x"), 1])]),
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
    ]
)
def test_parse_expr(source, expected):
    assert TokenStream(lex(source)).parse_expr() == expected


def test_parse_all_reads_every_expression():
    assert read("1 (a) 'b ; trailing comment") == [1, [Symbol("a")], Quoted(Symbol("b"))]


def test_parse_expr_at_end_returns_none():
    stream = TokenStream(lex("x"))
    assert stream.parse_expr() == Symbol("x")
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source,message",
    [
        ("(a b", "Unmatched '('"),
        (")", "Unexpected ')'"),
        ("'", "Expected an expression after '"),
        ("(')", "Expected an expression after '"),
        ("9223372036854775808", "out of range"),
        ("-9223372036854775809", "out of range"),
    ]
)
def test_syntax_errors(source, message):
    with pytest.raises(MiniLispSyntaxError) as exc:
        read(source)
    assert message in str(exc.value)


symbol_strat = st.sampled_from(["a", "b", "foo", "+", "-", "head", "x1"]).map(Symbol)
int_strat = st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)
sexpr_strat = st.recursive(
    st.one_of(symbol_strat, int_strat),
    lambda children: st.lists(children, max_size=4),
    max_leaves=20,
)


@given(sexpr_strat)
def test_rendered_expressions_read_back(sexpr):
    assert read(render(sexpr)) == [sexpr]
