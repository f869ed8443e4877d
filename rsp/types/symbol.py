from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id", "_split")

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)
        self._split = None

    def namespace_split(self) -> tuple[str, str] | None:
        """Return (namespace, name) for `ns/name` symbols, else None.

        `/` alone and malformed `ns/` or `/name` are plain symbols.
        """
        if self._split is None:
            ns, sep, name = self.id.partition("/")
            self._split = (ns, name) if sep and ns and name else ()
        return self._split or None

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
