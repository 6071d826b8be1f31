"""Runtime environment for minilisp.

The Environment stores bindings of Symbols to evaluated Lisp values and
supports nested scopes via an `outer` link. Only `define` mutates a frame,
and only the frame it is called on; parents are never written through.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import MiniLispTypeError
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Returns the bound value. Raises MiniLispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MiniLispTypeError(f"Cannot define `{name}` as a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Optional[LispValue]:
        """Look up the value bound to `name`, innermost scope first.

        Returns None when no frame in the chain binds `name`.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf: StringIO = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


def global_env() -> Environment:
    """Create a root environment pre-loaded with the builtin procedures."""
    from minilisp.builtin.env_builtin import register

    env = Environment()
    register(env)
    logger.debug("Created global environment with %d builtins", len(env.vars))
    return env
