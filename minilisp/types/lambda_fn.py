"""Lambda function representation for minilisp."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression
from minilisp.types.symbol import Symbol


class Lambda:
    """A user-defined procedure: formal parameter names and a body.

    No environment is captured. The body runs in a scope whose parent is the
    *caller's* environment, so free variables resolve at the call site.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: list[Symbol], body: SExpression):
        self.formals: list[Symbol] = list(formals)
        self.body: SExpression = body

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash((tuple(self.formals), repr(self.body)))

    def __repr__(self) -> str:
        from minilisp.printer import render
        with StringIO() as buffer:
            buffer.write("<lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(render(self.body))
            buffer.write(">")
            return buffer.getvalue()

    def __str__(self) -> str:
        from minilisp.printer import render
        return render(self)
