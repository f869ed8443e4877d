"""Resolution of namespaced symbols (`ns/name`).

Order: the builtin table, then a Module bound to `ns` in scope. A module's
members are only its own top-level bindings.
"""
from __future__ import annotations

from rsp import LispValue
from rsp.builtin.registry import is_builtin_namespace, lookup_builtin
from rsp.errors import RspNamespaceNotFound, RspTypeError, RspUnboundSymbol
from rsp.printer import type_name
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.symbol import Symbol


def resolve_namespaced(env: Environment, symbol: Symbol) -> LispValue:
    namespace, name = symbol.namespace_split()

    builtin = lookup_builtin(namespace, name)
    if builtin is not None:
        return builtin

    ns_sym = Symbol(namespace)
    frame = env.find(ns_sym)
    if frame is None:
        if is_builtin_namespace(namespace):
            raise RspUnboundSymbol(symbol.id)
        raise RspNamespaceNotFound(namespace)

    target = frame.vars[ns_sym]
    if not isinstance(target, Module):
        raise RspTypeError("Module", type_name(target), symbol.id)
    try:
        return target.member(Symbol(name))
    except RspUnboundSymbol:
        raise RspUnboundSymbol(symbol.id) from None
