from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import lex, TokenStream
from minilisp.types.environment import Environment, global_env


class Interpreter:
    """
    Reads and evaluates minilisp code against one persistent global
    Environment, so `def` bindings survive across calls.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else global_env()

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one already-parsed expression tree."""
        return evaluate(expr, self.env)

    def iter_eval(self, code: str):
        """Yield the value of each top-level expression in `code`, in order."""
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            yield self.eval_expr(expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value (None if empty)."""
        result = None
        for result in self.iter_eval(code):
            pass
        return result
