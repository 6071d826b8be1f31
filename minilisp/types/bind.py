from __future__ import annotations

import logging
from typing import List

from minilisp import LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def bind_arguments(
    formals: List[Symbol],
    supplied_args: List[LispValue],
    caller_env: Environment,
) -> Environment:
    """
    Build the call environment for a lambda application.

    Formals are bound to the supplied arguments by position; the counts must
    match exactly. The new environment's outer is the *calling* environment.
    """
    if len(formals) != len(supplied_args):
        raise MiniLispArityError(
            f"expected {len(formals)} argument(s), got {len(supplied_args)}"
        )
    local_env = Environment(outer=caller_env)
    for formal, value in zip(formals, supplied_args):
        local_env.define(formal, value)
    logger.debug("Bound call environment %s", local_env)
    return local_env
