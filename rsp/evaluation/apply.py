"""Application engine for rsp.

Function application lives here so the evaluator's dispatch stays small:
- Function (closure): exact-arity positional binding into a child frame of
  the captured environment, body forms evaluated in order.
- Builtin (or any native callable): invoked with the evaluated arguments.

There is no tail-call handling; every call nests a Python frame, bounded
by the session's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Callable

from rsp import LispValue, EvaluatorFn
from rsp.errors import RspNotAFunction, RspRecursionError
from rsp.printer import to_lisp_string
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.function import Function
from rsp.types.nil import Nil

logger = logging.getLogger(__name__)


def apply_function(
    fn: Function,
    args: list[LispValue],
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a closure to already-evaluated arguments."""
    call_env = fn.bind_arguments(args)
    if context.depth >= context.max_depth:
        raise RspRecursionError(context.max_depth)
    context.depth += 1
    try:
        result: LispValue = Nil
        for form in fn.body:
            result = evaluate_fn(form, call_env, context)
        return result
    finally:
        context.depth -= 1


def apply(
    head: Function | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Function or a native callable.

    - For Function, bind and evaluate the body (apply_function).
    - For natives (builtins), invoke with the runtime env and list of args.
    - Otherwise, raise RspNotAFunction.
    """
    if isinstance(head, Function):
        logger.debug("apply %s to %d args", head, len(args))
        return apply_function(head, args, context, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise RspNotAFunction(to_lisp_string(head))
