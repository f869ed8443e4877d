from rsp.types.symbol import Symbol
from rsp.types.nil import Nil, NilType
from rsp.types.environment import Environment
from rsp.types.function import Function
from rsp.types.builtin_fn import Builtin
from rsp.types.module import Module

__all__ = ["Symbol", "Nil", "NilType", "Environment", "Function", "Builtin", "Module"]
