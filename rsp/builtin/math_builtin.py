"""Numeric builtins: the `math/` namespace.

All arithmetic is on floats. Division by zero is an error, never an
infinity.
"""
from __future__ import annotations

from rsp import LispValue
from rsp.errors import RspArityError, RspDivisionByZero, RspTypeError
from rsp.printer import type_name
from rsp.types.environment import Environment


def to_number(value: LispValue, op: str) -> float:
    # bool is an int subclass in Python but never a Number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RspTypeError("Number", type_name(value), op)
    return float(value)


def add(env: Environment, args: list[LispValue]) -> float:
    """Sum of all arguments; (+) is 0."""
    total = 0.0
    for x in args:
        total += to_number(x, "+")
    return total


def sub(env: Environment, args: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise RspArityError("-", "at least 1", 0)
    first = to_number(args[0], "-")
    if len(args) == 1:
        return -first
    for x in args[1:]:
        first -= to_number(x, "-")
    return first


def mul(env: Environment, args: list[LispValue]) -> float:
    """Product of all arguments; (*) is 1."""
    product = 1.0
    for x in args:
        product *= to_number(x, "*")
    return product


def div(env: Environment, args: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise RspArityError("/", "at least 1", 0)
    numbers = [to_number(x, "/") for x in args]
    if len(numbers) == 1:
        numbers.insert(0, 1.0)
    result = numbers[0]
    for divisor in numbers[1:]:
        if divisor == 0.0:
            raise RspDivisionByZero("/")
        result /= divisor
    return result


def _comparison(op: str, compare):
    def native(env: Environment, args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise RspArityError(op, 2, len(args))
        return compare(to_number(args[0], op), to_number(args[1], op))
    native.__name__ = f"compare_{op}"
    native.__doc__ = f"({op} a b) on two numbers."
    return native


equals = _comparison("=", lambda a, b: a == b)
lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
lte = _comparison("<=", lambda a, b: a <= b)
gte = _comparison(">=", lambda a, b: a >= b)


FUNCTIONS = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': equals,
    '<': lt,
    '>': gt,
    '<=': lte,
    '>=': gte,
}
