"""Application engine for minilisp.

Dispatches an evaluated head over the two procedure kinds:
- Builtin: called with the current environment and the evaluated arguments.
- Lambda: arguments bound in a fresh environment whose parent is the caller's
  environment, then the body is evaluated there.
"""

from __future__ import annotations

import logging

from minilisp import LispValue, SExpression
from minilisp.errors import MiniLispTypeError
from minilisp.printer import render
from minilisp.types.bind import bind_arguments
from minilisp.types.builtin_fn import Builtin
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def is_procedure(value: SExpression) -> bool:
    return isinstance(value, (Builtin, Lambda))


def apply(
    head: Builtin | Lambda,
    args: list[LispValue],
    env: Environment,
) -> LispValue:
    """Apply either a Builtin or a Lambda to already-evaluated arguments."""
    from minilisp.evaluation.evaluator import evaluate

    if isinstance(head, Builtin):
        logger.debug("Applying builtin %s to %d argument(s)", head.name, len(args))
        return head(env, args)
    elif isinstance(head, Lambda):
        logger.debug("Applying %r to %d argument(s)", head, len(args))
        call_env = bind_arguments(head.formals, args, env)
        return evaluate(head.body, call_env)
    else:
        raise MiniLispTypeError(f"`{render(head)}` is not a procedure")
