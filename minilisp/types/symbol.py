"""Symbol atom for minilisp.

Symbols are names: binding sites in `def` and lambda formals, references the
evaluator resolves through the environment chain, or plain data when quoted.
"""

from __future__ import annotations

import sys


class Symbol:
    """An interned name; equal only to another Symbol spelled the same way."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
