"""User-defined function (closure) representation for rsp."""

from __future__ import annotations

from io import StringIO

from rsp import SExpression, LispValue
from rsp.errors import RspArityError
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol


class Function:
    """A first-class function with formal parameters, body forms, and closure env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self, params: list[Symbol], body: list[SExpression], env: Environment, name: str | None = None
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        # Captured at creation time, not at call time
        self.env: Environment = env
        self.name: str | None = name

    def bind_arguments(self, args: list[LispValue]) -> Environment:
        """
        Bind evaluated arguments to the formal parameters positionally and
        return the new call frame, a child of the captured environment.
        Arity must match exactly.
        """
        if len(args) != len(self.params):
            raise RspArityError(self.name or "fn", len(self.params), len(args))
        call_env = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            call_env.define(param, arg)
        return call_env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fn")
            if self.name:
                buffer.write(f" {self.name}")
            buffer.write(" (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
