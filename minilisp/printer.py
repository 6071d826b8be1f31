"""Canonical textual rendering of minilisp expressions."""

from minilisp import SExpression
from minilisp.types.symbol import Symbol
from minilisp.types.quoted import Quoted
from minilisp.types.builtin_fn import Builtin
from minilisp.types.lambda_fn import Lambda

PROCEDURE_PLACEHOLDER = "<procedure>"


def render(expr: SExpression) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(render(item) for item in expr) + ")"
    if isinstance(expr, Quoted):
        return render(expr.expr)
    if isinstance(expr, (Builtin, Lambda)):
        return PROCEDURE_PLACEHOLDER
    if isinstance(expr, Symbol):
        return expr.name
    return str(expr)
