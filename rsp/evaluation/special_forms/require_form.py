from __future__ import annotations

from rsp import SExpression, LispValue, EvaluatorFn
from rsp.errors import RspArityError, RspTypeError
from rsp.modules.module_loader import require_module
from rsp.printer import type_name
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.symbol import Symbol


def require_form(
    tail: list[SExpression], env: Environment, context: RuntimeContext, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    Usage:
        (require "lib/util")
        (require 'lib/util)
        (require 'math)      ; a module already bound in scope, e.g. a builtin
    """
    if len(tail) != 1:
        raise RspArityError("require", 1, len(tail))

    target = evaluate_fn(tail[0], env, context)
    if isinstance(target, Symbol):
        spec = target.id
    elif isinstance(target, str):
        spec = target
    else:
        raise RspTypeError("String or Symbol path", type_name(target), "require")

    frame = env.find(Symbol(spec))
    if frame is not None and isinstance(frame.vars[Symbol(spec)], Module):
        return frame.vars[Symbol(spec)]

    # Module bodies chain to the session's global frame, not to the caller's frame
    parent = context.global_env if context.global_env is not None else env.root()
    return require_module(spec, context, parent, evaluate_fn)
