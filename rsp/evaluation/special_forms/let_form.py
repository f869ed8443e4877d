import logging

from rsp import EvaluatorFn
from rsp import SExpression, LispValue
from rsp.errors import RspArityError, RspReservedKeyword, RspTypeError
from rsp.printer import type_name
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.function import Function
from rsp.types.symbol import Symbol
from rsp.evaluation.special_forms.keywords import is_special_form

logger = logging.getLogger(__name__)


def let_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value), also spelled (define name value).
    Binds in the current frame only; the form's value is the bound value.
    """
    if len(tail) != 2:
        raise RspArityError("let", 2, len(tail))

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise RspTypeError("Symbol", type_name(name), "let")
    if is_special_form(name):
        raise RspReservedKeyword(name.id)

    value = evaluate_fn(val_expr, env, context)
    if isinstance(value, Function) and value.name is None:
        # Named for arity errors and printing
        value.name = name.id
    env.define(name, value)
    logger.debug("let %s", name)
    return value
