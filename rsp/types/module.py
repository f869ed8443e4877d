from __future__ import annotations

from pathlib import Path

from rsp import LispValue
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol


class Module:
    """A loaded module: its canonical path and the frame its top-level forms defined.

    Builtin namespaces are modules too, with a `builtin:<ns>` path.
    """

    __slots__ = ("path", "env")

    def __init__(self, path: Path | str, env: Environment):
        self.path = path
        self.env = env

    def member(self, name: Symbol) -> LispValue:
        # Only the module's own top-level bindings are public
        return self.env.lookup_local(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Module) and str(self.path) == str(other.path)

    def __hash__(self) -> int:
        return hash(str(self.path))

    def __repr__(self) -> str:
        return f"<module {self.path}>"
