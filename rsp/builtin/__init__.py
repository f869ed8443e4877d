from rsp.builtin.registry import (
    BUILTINS,
    GLOBAL_ALIASES,
    NAMESPACES,
    builtin_module,
    is_builtin_namespace,
    lookup_builtin,
    register,
)

__all__ = [
    "BUILTINS",
    "GLOBAL_ALIASES",
    "NAMESPACES",
    "builtin_module",
    "is_builtin_namespace",
    "lookup_builtin",
    "register",
]
