"""Program output builtins: the `log/` namespace.

These write the program's own output to stdout/stderr; they are not the
package's diagnostic logging.
"""
from __future__ import annotations

import sys

from rsp import LispValue
from rsp.printer import display
from rsp.types.environment import Environment


def _write(args: list[LispValue], stream) -> str:
    line = " ".join(display(a) for a in args)
    stream.write(line + "\n")
    stream.flush()
    return line


def info(env: Environment, args: list[LispValue]) -> str:
    """Write the rendered arguments to stdout; return the joined string."""
    return _write(args, sys.stdout)


def error(env: Environment, args: list[LispValue]) -> str:
    """Write the rendered arguments to stderr; return the joined string."""
    return _write(args, sys.stderr)


FUNCTIONS = {
    'info': info,
    'error': error,
}
