"""String builtins: the `string/` namespace."""
from __future__ import annotations

from rsp import LispValue
from rsp.errors import RspArityError, RspTypeError
from rsp.printer import display, type_name
from rsp.types.environment import Environment

PLACEHOLDER = "%s"


def to_string(value: LispValue, op: str) -> str:
    if not isinstance(value, str):
        raise RspTypeError("String", type_name(value), op)
    return value


def _unary(op: str, args: list[LispValue]) -> str:
    if len(args) != 1:
        raise RspArityError(op, 1, len(args))
    return to_string(args[0], op)


def concat(env: Environment, args: list[LispValue]) -> str:
    return "".join(to_string(a, "string/concat") for a in args)


def length(env: Environment, args: list[LispValue]) -> float:
    # Counts characters, not bytes
    return float(len(_unary("string/len", args)))


def trim(env: Environment, args: list[LispValue]) -> str:
    return _unary("string/trim", args).strip()


def to_upper(env: Environment, args: list[LispValue]) -> str:
    return _unary("string/to-upper", args).upper()


def to_lower(env: Environment, args: list[LispValue]) -> str:
    return _unary("string/to-lower", args).lower()


def reverse(env: Environment, args: list[LispValue]) -> str:
    return _unary("string/reverse", args)[::-1]


def format_string(env: Environment, args: list[LispValue]) -> str:
    """(string/format fmt args...): replace each %s, left to right.

    Extra arguments are ignored; a placeholder with no argument left is an
    arity error rather than a blank.
    """
    if not args:
        raise RspArityError("string/format", "at least 1", 0)
    fmt = to_string(args[0], "string/format")
    pieces = fmt.split(PLACEHOLDER)
    needed = len(pieces) - 1
    values = args[1:]
    if needed > len(values):
        raise RspArityError("string/format", needed + 1, len(args))
    out = [pieces[0]]
    for value, piece in zip(values, pieces[1:]):
        out.append(display(value))
        out.append(piece)
    return "".join(out)


FUNCTIONS = {
    'concat': concat,
    'len': length,
    'trim': trim,
    'to-upper': to_upper,
    'to-lower': to_lower,
    'reverse': reverse,
    'format': format_string,
}
