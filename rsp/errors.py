from __future__ import annotations

import errno
from pathlib import Path


class RspError(Exception):
    """ Base class for all rsp errors"""
    pass


class RspParseError(RspError):
    """ Raised when source text cannot be read into forms"""

    def __init__(self, reason: str, position: int, incomplete: bool = False):
        super().__init__(f"Parse error at {position}: {reason}")
        self.reason = reason
        self.position = position
        # True when more input could still complete the source
        self.incomplete = incomplete


class RspUnboundSymbol(RspError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Undefined symbol: {name}")
        self.name = name


class RspTypeError(RspError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(self, expected: str, actual: str, context: str | None = None):
        where = f" in {context}" if context else ""
        super().__init__(f"Type error{where}: expected {expected}, found {actual}")
        self.expected = expected
        self.actual = actual


class RspArityError(RspError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, callee: str, expected: int | str, actual: int):
        super().__init__(f"Arity mismatch: '{callee}' expects {expected} arguments, got {actual}")
        self.callee = callee
        self.expected = expected
        self.actual = actual


class RspDivisionByZero(RspError):
    """ Raised when a divisor is zero"""

    def __init__(self, operator: str = "/"):
        super().__init__(f"Division by zero in '{operator}'")
        self.operator = operator


class RspNotAFunction(RspError):
    """ Raised when the head of an application is not callable"""

    def __init__(self, value_repr: str):
        super().__init__(f"Not a function: {value_repr}")
        self.value_repr = value_repr


class RspReservedKeyword(RspError):
    """ Raised when a special-form keyword is used as a binding name"""

    def __init__(self, name: str):
        super().__init__(f"Cannot bind reserved keyword: {name}")
        self.name = name


class RspRecursionError(RspError):
    """ Raised when nested function calls exceed the session limit"""

    def __init__(self, limit: int):
        super().__init__(f"Maximum recursion depth exceeded ({limit} nested calls)")
        self.limit = limit


class RspCircularRequire(RspError):
    """ Raised when a module is required while it is still loading"""

    def __init__(self, path: Path):
        super().__init__(f"Circular require of {path}")
        self.path = path


class RspModuleLoadError(RspError):
    """ Raised when reading, parsing or evaluating a module fails"""

    def __init__(self, path: Path, cause: Exception, message: str | None = None):
        super().__init__(message or f"Error loading module '{path}': {cause}")
        self.path = path
        self.cause = cause


class RspModuleNotFound(RspModuleLoadError):
    """ Raised when a required module file does not exist"""

    def __init__(self, path: Path):
        cause = FileNotFoundError(errno.ENOENT, "No such module file", str(path))
        super().__init__(path, cause, f"Module not found: {path}")


class RspNamespaceNotFound(RspError):
    """ Raised when `ns/name` names neither a builtin namespace nor a bound module"""

    def __init__(self, namespace: str):
        super().__init__(f"Unknown namespace: {namespace}")
        self.namespace = namespace
