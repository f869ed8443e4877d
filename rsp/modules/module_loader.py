from __future__ import annotations

import logging
from pathlib import Path

from rsp import LispValue, EvaluatorFn
from rsp.errors import (
    RspCircularRequire,
    RspError,
    RspModuleLoadError,
    RspModuleNotFound,
)
from rsp.reader.parser import parse
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.nil import Nil

logger = logging.getLogger(__name__)

MODULE_SUFFIX = '.lisp'


def resolve_module_path(spec: str, base_dir: Path) -> Path:
    """Map a `require` argument to the canonical path of an existing file.

    `.lisp` is appended unless already present; relative paths are joined to
    `base_dir`; symlinks and `..` are resolved.
    """
    name = spec if spec.endswith(MODULE_SUFFIX) else spec + MODULE_SUFFIX
    candidate = Path(name).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    try:
        return candidate.resolve(strict=True)
    except FileNotFoundError:
        raise RspModuleNotFound(candidate) from None
    except OSError as exc:
        raise RspModuleLoadError(candidate, exc) from exc


def _evaluate_file(
    path: Path, context: RuntimeContext, parent_env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[Module, LispValue]:
    # Whole file is parsed before anything runs; any failure leaves no module behind
    try:
        source = path.read_text(encoding='utf-8')
        forms = parse(source)
        module_env = Environment(outer=parent_env)
        last: LispValue = Nil
        for form in forms:
            last = evaluate_fn(form, module_env, context)
    except (RspError, OSError, UnicodeDecodeError) as exc:
        logger.debug("loading %s failed: %s", path, exc)
        raise RspModuleLoadError(path, exc) from exc
    return Module(path, module_env), last


def load_module(
    path: Path, context: RuntimeContext, parent_env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[Module, LispValue]:
    """Load the file at canonical `path` (or return it from the cache).

    Returns the module and the value of its last top-level form (Nil on a
    cache hit, since nothing ran).
    """
    cached = context.modules.get(path)
    if cached is not None:
        logger.debug("module cache hit: %s", path)
        return cached, Nil
    if path in context.loading:
        raise RspModuleLoadError(path, RspCircularRequire(path))

    logger.info("loading module %s", path)
    context.loading.add(path)
    try:
        module, last = _evaluate_file(path, context, parent_env, evaluate_fn)
    finally:
        context.loading.discard(path)
    context.modules.put(path, module)
    return module, last


def require_module(
    spec: str, context: RuntimeContext, parent_env: Environment, evaluate_fn: EvaluatorFn
) -> Module:
    path = resolve_module_path(spec, context.base_dir)
    module, _ = load_module(path, context, parent_env, evaluate_fn)
    return module
