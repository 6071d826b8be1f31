from __future__ import annotations

from minilisp import SExpression


class Quoted:
    """Literal data: evaluates to the wrapped expression, untouched."""

    __slots__ = ("expr",)

    def __init__(self, expr: SExpression):
        self.expr = expr

    def __eq__(self, other) -> bool:
        return isinstance(other, Quoted) and self.expr == other.expr

    def __hash__(self) -> int:
        return hash(("quote", repr(self.expr)))

    def __repr__(self) -> str:
        return f"Quoted({self.expr!r})"

    def __str__(self) -> str:
        from minilisp.printer import render
        return render(self)
