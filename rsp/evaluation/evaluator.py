"""Core evaluator for the rsp interpreter.

`evaluate(expr, env, context)` dispatches on the shape of `expr`: atoms
evaluate to themselves, symbols are looked up (namespaced ones through the
builtin table or a bound module), special forms run their own rule, and any
other non-empty list is a function application.
"""

from __future__ import annotations

from rsp import SExpression, LispValue
from rsp.evaluation.apply import apply
from rsp.evaluation.namespace_util import resolve_namespaced
from rsp.evaluation.special_forms import SPECIAL_FORMS
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol


def evaluate(
    expr: SExpression, env: Environment, context: RuntimeContext | None = None
) -> LispValue:
    if context is None:
        context = RuntimeContext()

    match expr:
        case Symbol():
            if expr.namespace_split() is not None:
                return resolve_namespaced(env, expr)
            return env.lookup(expr)

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, context, evaluate)

            fn = evaluate(head, env, context)
            args = [evaluate(arg, env, context) for arg in tail_args]
            return apply(fn, args, env, context, evaluate)

    # --- Atoms (and the empty list) return as-is ---
    return expr
