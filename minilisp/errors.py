from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilisp.types.symbol import Symbol


class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass


class MiniLispZeroDivisionError(MiniLispError):
    """ Raised when a division operand is exactly zero"""

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class MiniLispNameError(MiniLispError):
    """ Raised when a symbol is unbound in the whole scope chain"""

    def __init__(self, symbol: Symbol):
        super().__init__(f"unbound symbol `{symbol.name}`")
        self.name = symbol.name


class MiniLispTypeError(MiniLispError):
    """ Raised when a value does not have the shape an operation requires"""


class MiniLispArityError(MiniLispError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class MiniLispRuntimeError(MiniLispError):
    """ Raised for other operational violations, e.g. taking the head of an empty list"""


class MiniLispSyntaxError(MiniLispError):
    """ Raised by the reader when source text is malformed"""


class EvaluationDepthExceeded(RecursionError):
    """ Raised when evaluation nests deeper than the configured limit.

    Not a MiniLispError: running out of stack is fatal for the session,
    not a language-level error a caller is expected to recover from.
    """

    def __init__(self, limit: int):
        super().__init__(f"maximum evaluation depth exceeded ({limit})")
        self.limit = limit
