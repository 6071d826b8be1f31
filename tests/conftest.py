import pytest

from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import lex, TokenStream
from minilisp.types.environment import global_env


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return global_env()


@pytest.fixture
def run(env):
    """Evaluate every expression in a source string against `env`; return the last value."""
    def _run(source: str):
        result = None
        for expr in TokenStream(lex(source)).parse_all():
            result = evaluate(expr, env)
        return result
    return _run
