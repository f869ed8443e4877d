from __future__ import annotations

from typing import Callable

from rsp import LispValue


class Builtin:
    """A native function value: `math/+`, `string/len`, ...

    Called like every native in this package, as `fn(env, args)` with the
    already-evaluated argument list.
    """

    __slots__ = ("qualified_name", "fn")

    def __init__(self, qualified_name: str, fn: Callable[..., LispValue]):
        self.qualified_name = qualified_name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __eq__(self, other) -> bool:
        return isinstance(other, Builtin) and self.qualified_name == other.qualified_name

    def __hash__(self) -> int:
        return hash(self.qualified_name)

    def __repr__(self) -> str:
        return f"<builtin {self.qualified_name}>"
