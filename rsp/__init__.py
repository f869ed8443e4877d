# Core type aliases for rsp's data model.
# Values are plain Python types where one fits (float, str, bool, list) and
# small classes otherwise (Symbol, Nil, Function, Builtin, Module).
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable; forms are values once quoted.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (code-as-data)
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
