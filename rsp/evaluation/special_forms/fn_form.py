from rsp.errors import RspArityError, RspReservedKeyword, RspTypeError
from rsp.types.function import Function

from rsp import EvaluatorFn
from rsp import SExpression, LispValue
from rsp.printer import type_name
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol
from rsp.evaluation.special_forms.keywords import is_special_form


def fn_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params) body...) allows zero or more body forms, run in order.
    # The body is not evaluated here; `env` is captured as the closure.
    if not tail:
        raise RspArityError("fn", "at least 1", 0)

    params = tail[0]
    if not isinstance(params, list):
        raise RspTypeError("List of parameters", type_name(params), "fn")
    for p in params:
        if not isinstance(p, Symbol):
            raise RspTypeError("Symbol", type_name(p), "fn parameters")
        if is_special_form(p):
            raise RspReservedKeyword(p.id)

    return Function(list(params), list(tail[1:]), env)
