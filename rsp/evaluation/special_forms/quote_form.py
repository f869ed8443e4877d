from rsp import SExpression, LispValue, EvaluatorFn
from rsp.errors import RspArityError


def quote_form(tail: list[SExpression], env, context, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise RspArityError("quote", 1, len(tail))
    return tail[0]
