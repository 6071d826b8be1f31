# Core type aliases for the minilisp data model.
# Plain Python values represent both code (forms) and runtime values:
# int for integers, list for lists, plus the small wrapper types in
# minilisp.types (Symbol, Quoted, Builtin, Lambda).
#
# Naming guidance:
# - SExpression: reader/parser code, denoting syntactic forms.
# - LispValue:  evaluator/runtime code, denoting evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any

LispValue = Any
SExpression = LispValue

# Integers are signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

__version__ = "0.1.0"
