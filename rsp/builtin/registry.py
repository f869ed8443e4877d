"""Table of namespaced native functions and their registration into a session.

Every builtin is keyed by (namespace, name). The same functions are also
reachable as members of builtin Modules bound in the global frame (`math`,
`string`, `log`) and, for arithmetic and comparison, as unqualified globals.
"""
from __future__ import annotations

from typing import Optional

from rsp.builtin import log_builtin, math_builtin, string_builtin
from rsp.types.builtin_fn import Builtin
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.symbol import Symbol

NAMESPACES = {
    'math': math_builtin.FUNCTIONS,
    'string': string_builtin.FUNCTIONS,
    'log': log_builtin.FUNCTIONS,
}

BUILTINS: dict[tuple[str, str], Builtin] = {
    (ns, name): Builtin(f"{ns}/{name}", fn)
    for ns, functions in NAMESPACES.items()
    for name, fn in functions.items()
}

# Unqualified at global scope, aliases of the math/ entries
GLOBAL_ALIASES = ('+', '-', '*', '/', '=', '<', '>', '<=', '>=')


def lookup_builtin(namespace: str, name: str) -> Optional[Builtin]:
    return BUILTINS.get((namespace, name))


def is_builtin_namespace(namespace: str) -> bool:
    return namespace in NAMESPACES


def builtin_module(namespace: str) -> Module:
    """A Module view of one namespace, path `builtin:<namespace>`."""
    env = Environment()
    for name in NAMESPACES[namespace]:
        env.define(Symbol(name), BUILTINS[(namespace, name)])
    return Module(f"builtin:{namespace}", env)


def register(env: Environment) -> None:
    env.update({Symbol(ns): builtin_module(ns) for ns in NAMESPACES})
    env.update({Symbol(op): BUILTINS[('math', op)] for op in GLOBAL_ALIASES})
