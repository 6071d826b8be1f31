"""Native procedure wrapper."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from minilisp import LispValue

if TYPE_CHECKING:
    from minilisp.types.environment import Environment

NativeFn = Callable[["Environment", list[LispValue]], LispValue]


class Builtin:
    """A fixed, pre-registered primitive bound to a name in the global scope."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"

    def __str__(self) -> str:
        from minilisp.printer import render
        return render(self)
