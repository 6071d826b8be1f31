from minilisp.types.symbol import Symbol
from minilisp.types.quoted import Quoted
from minilisp.types.builtin_fn import Builtin
from minilisp.types.lambda_fn import Lambda
from minilisp.types.environment import Environment

__all__ = ["Symbol", "Quoted", "Builtin", "Lambda", "Environment"]
