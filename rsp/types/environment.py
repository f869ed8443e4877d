"""Runtime environment for rsp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared by plain Python references:
every closure created while a frame is active keeps that frame alive.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from rsp import LispValue
from rsp.errors import RspTypeError, RspUnboundSymbol
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Shadows any binding of the same name in an outer frame without touching it.
        Raises RspTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise RspTypeError("Symbol", type(name).__name__, "define")
        logger.debug("define %s in frame %x", name, id(self))
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises RspUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise RspUnboundSymbol(str(name))
        return env.vars[name]

    def lookup_local(self, name: Symbol) -> LispValue:
        """Look up `name` in this frame only (a module's public surface)."""
        try:
            return self.vars[name]
        except KeyError:
            raise RspUnboundSymbol(str(name)) from None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings{' (nested)' if self.outer else ''}>"
