from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

from rsp import SExpression, LispValue
from rsp.builtin.registry import register
from rsp.errors import RspModuleNotFound, RspRecursionError
from rsp.evaluation.evaluator import evaluate
from rsp.modules.module_loader import load_module, require_module
from rsp.reader.parser import parse
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.nil import Nil

logger = logging.getLogger(__name__)

# Rough upper bound of Python frames one nested Lisp call uses
FRAMES_PER_CALL = 8


class Interpreter:
    """
    One session: reads and evaluates rsp code against a persistent global
    Environment and RuntimeContext (module cache, base dir, recursion limit).
    Sessions are independent of each other.
    """

    def __init__(
        self,
        *,
        base_dir: Path | str | None = None,
        max_depth: int | None = None,
    ):
        self.context = RuntimeContext()
        if base_dir is not None:
            self.context.base_dir = Path(base_dir)
        if max_depth is not None:
            self.context.max_depth = max_depth
        self.env: Environment = Environment()
        register(self.env)
        self.context.global_env = self.env
        self._ensure_stack_room()

    def _ensure_stack_room(self) -> None:
        needed = self.context.max_depth * FRAMES_PER_CALL + 1000
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

    def evaluate_form(self, expr: SExpression, env: Environment | None = None) -> LispValue:
        try:
            return evaluate(expr, env if env is not None else self.env, self.context)
        except RecursionError:
            # Host stack ran out before the configured limit did
            raise RspRecursionError(self.context.max_depth) from None

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order; return the last value (Nil if none).

        The whole text is parsed first, so a syntax error anywhere runs nothing.
        """
        result: LispValue = Nil
        for result in self.eval_each(code):
            pass
        return result

    def eval_each(self, code: str) -> Iterator[LispValue]:
        """Parse all of `code`, then yield the value of each form as it is evaluated."""
        for expr in parse(code):
            yield self.evaluate_form(expr)

    def eval_all(self, code: str) -> list[LispValue]:
        return list(self.eval_each(code))

    def require(self, spec: str) -> Module:
        return require_module(spec, self.context, self.env, self.evaluate_form_in)

    def run_file(self, path: Path | str) -> LispValue:
        """Run a file as the top-level unit.

        The file is loaded as a module (cached under its canonical path) and
        the value of its last form is returned.
        """
        try:
            canonical = Path(path).expanduser().resolve(strict=True)
        except FileNotFoundError:
            raise RspModuleNotFound(path) from None
        _, last = load_module(canonical, self.context, self.env, self.evaluate_form_in)
        return last

    def evaluate_form_in(self, expr: SExpression, env: Environment, context: RuntimeContext) -> LispValue:
        # Signature of an EvaluatorFn, for the module loader
        return self.evaluate_form(expr, env)
