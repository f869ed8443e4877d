"""Textual rendering of rsp values.

`display` is what the `log/` builtins and `string/format` write: strings
unquoted. `to_lisp_string` is the printed representation the REPL and `run`
show: strings quoted with their escapes restored, so it reads back.
"""

from __future__ import annotations

from rsp import LispValue
from rsp.types.nil import NilType
from rsp.types.symbol import Symbol

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def format_number(value: float) -> str:
    """Numbers print without an unnecessary trailing `.0`: 15.0 -> "15"."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _render(value: LispValue, quote_strings: bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, int):
        return format_number(float(value))
    if isinstance(value, str):
        if quote_strings:
            return '"' + "".join(_ESCAPES.get(c, c) for c in value) + '"'
        return value
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, list):
        return "(" + " ".join(_render(v, quote_strings) for v in value) + ")"
    return str(value)


def display(value: LispValue) -> str:
    return _render(value, quote_strings=False)


def to_lisp_string(value: LispValue) -> str:
    return _render(value, quote_strings=True)


def type_name(value: LispValue) -> str:
    """Name of a value's variant, as used in type-mismatch errors."""
    if isinstance(value, bool):
        return "Bool"
    if isinstance(value, (int, float)):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, NilType):
        return "Nil"
    if isinstance(value, Symbol):
        return "Symbol"
    if isinstance(value, list):
        return "List"
    return type(value).__name__
