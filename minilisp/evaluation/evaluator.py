"""Core evaluator for the minilisp interpreter.

Plain recursive evaluation: no tail-call elimination. Nesting is bounded by
`config.get_max_depth()`; going past it raises EvaluationDepthExceeded.
Evaluation state is process-global, so one evaluation at a time.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.config import get_max_depth
from minilisp.errors import EvaluationDepthExceeded, MiniLispNameError, MiniLispTypeError
from minilisp.evaluation.apply import apply, is_procedure
from minilisp.printer import render
from minilisp.types.environment import Environment
from minilisp.types.quoted import Quoted
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

_depth = 0


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, guarding the nesting depth."""
    global _depth
    limit = get_max_depth()
    if _depth >= limit:
        raise EvaluationDepthExceeded(limit)
    _depth += 1
    try:
        return evaluate0(expr, env)
    except EvaluationDepthExceeded:
        raise
    except RecursionError as exc:
        raise EvaluationDepthExceeded(limit) from exc
    finally:
        _depth -= 1


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """Single evaluation step, without the depth guard."""
    match expr:
        case Symbol():
            value = env.lookup(expr)
            if value is None:
                raise MiniLispNameError(expr)
            logger.debug("Resolved symbol %s", expr)
            return value

        case Quoted():
            return expr.expr

        case list():
            # Evaluate every item first; the first error aborts the list.
            items = [evaluate(item, env) for item in expr]
            if not items:
                return items
            head, *args = items
            if not is_procedure(head):
                raise MiniLispTypeError(f"`{render(head)}` is not a procedure")
            return apply(head, args, env)

        case bool():
            raise MiniLispTypeError(f"`{expr!r}` is not a minilisp value")

        case int():
            return expr

    # --- Procedures return as-is ---
    if is_procedure(expr):
        return expr
    raise MiniLispTypeError(f"`{expr!r}` is not a minilisp value")
