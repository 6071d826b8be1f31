"""Built-in procedures for the minilisp runtime environment.

Every builtin takes the current environment and the list of already-evaluated
arguments. Integers are 64-bit: results outside that range are errors rather
than silently growing into bignums.
"""
from __future__ import annotations

import logging
from typing import Callable

from minilisp import INT_MAX, INT_MIN, LispValue
from minilisp.errors import (
    MiniLispArityError,
    MiniLispRuntimeError,
    MiniLispTypeError,
    MiniLispZeroDivisionError,
)
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import render
from minilisp.types.builtin_fn import Builtin
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_arity(name: str, args: list[LispValue], expected: int, what: str) -> None:
    if len(args) != expected:
        raise MiniLispArityError(
            f"{name} expects {expected} argument(s) ({what}), got {len(args)}"
        )


# -------------------------------
# Arithmetic
# -------------------------------
def _checked(result: int) -> int:
    if result < INT_MIN or result > INT_MAX:
        raise MiniLispRuntimeError("integer overflow")
    return result


def _add(a: int, b: int) -> int:
    return _checked(a + b)


def _sub(a: int, b: int) -> int:
    return _checked(a - b)


def _mul(a: int, b: int) -> int:
    return _checked(a * b)


def _div(a: int, b: int) -> int:
    if b == 0:
        raise MiniLispZeroDivisionError()
    # Truncate toward zero; Python's // floors.
    quotient = abs(a) // abs(b)
    return _checked(quotient if (a < 0) == (b < 0) else -quotient)


def _operand(value: LispValue) -> int:
    if not is_integer(value):
        raise MiniLispTypeError(f"`{render(value)}` is not a number")
    return value


def fold_arith(args: list[LispValue], op: Callable[[int, int], int]) -> int:
    """Zero args give 0, one arg `a` gives `0 op a`, more fold from the left."""
    if not args:
        return 0
    if len(args) == 1:
        return op(0, _operand(args[0]))
    result = _operand(args[0])
    for x in args[1:]:
        result = op(result, _operand(x))
    return result


def add(env: Environment, args: list[LispValue]) -> int:
    """Sum of all arguments."""
    return fold_arith(args, _add)


def sub(env: Environment, args: list[LispValue]) -> int:
    """Subtract subsequent arguments from the first; unary form negates."""
    return fold_arith(args, _sub)


def mul(env: Environment, args: list[LispValue]) -> int:
    """Product of all arguments. Note `(*)` and `(* a)` are both 0."""
    return fold_arith(args, _mul)


def div(env: Environment, args: list[LispValue]) -> int:
    """Integer division from the left; unary `(/ a)` is `0 / a`."""
    return fold_arith(args, _div)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a non-empty list."""
    check_arity("head", args, 1, "a list")
    (lst,) = args
    if not isinstance(lst, list):
        raise MiniLispTypeError(f"`{render(lst)}` not a list")
    if not lst:
        raise MiniLispRuntimeError("can't head empty list")
    return lst[0]


def tail(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """New list holding all but the first element of a non-empty list."""
    check_arity("tail", args, 1, "a list")
    (lst,) = args
    if not isinstance(lst, list):
        raise MiniLispTypeError(f"`{render(lst)}` not a list")
    if not lst:
        raise MiniLispRuntimeError("can't tail empty list")
    return lst[1:]


# -------------------------------
# Evaluation and definition
# -------------------------------
def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate an already-evaluated value again, in the current environment."""
    check_arity("eval", args, 1, "an expression")
    return evaluate(args[0], env)


def lambda_builtin(env: Environment, args: list[LispValue]) -> Lambda:
    check_arity("lambda", args, 2, "a formals list and a body")
    formals, body = args
    if not isinstance(formals, list):
        raise MiniLispTypeError(f"`{render(formals)}` not a list of formals")
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise MiniLispTypeError(f"`{render(formal)}` is not a symbol")
    return Lambda(formals, body)


def def_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Bind a value to a symbol in the environment the call was made from."""
    check_arity("def", args, 2, "a symbol and a value")
    name, value = args
    if not isinstance(name, Symbol):
        raise MiniLispTypeError(f"`{render(name)}` is not a symbol")
    logger.debug("def %s", name)
    return env.define(name, value)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: tuple[Builtin, ...] = (
    Builtin("+", add),
    Builtin("-", sub),
    Builtin("*", mul),
    Builtin("/", div),
    Builtin("list", list_builtin),
    Builtin("head", head),
    Builtin("tail", tail),
    Builtin("eval", eval_builtin),
    Builtin("lambda", lambda_builtin),
    Builtin("def", def_builtin),
)


def register(env: Environment) -> None:
    env.update({Symbol(b.name): b for b in BUILTINS})
