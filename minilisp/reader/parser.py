"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives:

    - integers -> int (signed 64-bit)
    - symbols -> Symbol
    - lists -> Python list
    - 'expr -> Quoted(expr)

  `;` starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from minilisp import INT_MAX, INT_MIN, SExpression
from minilisp.errors import MiniLispSyntaxError
from minilisp.types.quoted import Quoted
from minilisp.types.symbol import Symbol

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s()';]+)"  # integers and symbols
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"-?[0-9]+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            if source[pos:].isspace():
                break
            raise MiniLispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one expression; None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            if INTEGER_RE.fullmatch(tok_val):
                value = int(tok_val)
                if value < INT_MIN or value > INT_MAX:
                    raise MiniLispSyntaxError(f"Integer literal out of range: {tok_val}")
                return value
            return Symbol(tok_val)

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] in (None, "rparen"):
                raise MiniLispSyntaxError("Expected an expression after '")
            return Quoted(self.parse_expr())

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type == "rparen":
                    self.advance()
                    break
                if next_type is None:
                    raise MiniLispSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return items

        if tok_type == "rparen":
            raise MiniLispSyntaxError("Unexpected ')'")

        raise MiniLispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Parse every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
