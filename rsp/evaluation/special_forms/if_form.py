from rsp import EvaluatorFn
from rsp import SExpression, LispValue
from rsp.errors import RspArityError
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    # Only false and nil are false; 0, "" and () are true
    return not (value is False or value is Nil)


def if_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise RspArityError("if", "2 or 3", len(tail))

    cond = evaluate_fn(tail[0], env, context)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, context)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, context)
    else:
        return Nil
