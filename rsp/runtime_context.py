from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Set, TYPE_CHECKING

from rsp.config import get_base_dir, get_max_depth
from rsp.module_cache import ModuleCache

if TYPE_CHECKING:
    from rsp.types.environment import Environment


@dataclass
class RuntimeContext:
    """Per-session evaluation state passed through the evaluator.

    Holds the module cache and the loads in progress, so independent
    sessions in one process never share modules.
    """
    base_dir: Path = field(default_factory=get_base_dir)
    max_depth: int = field(default_factory=get_max_depth)
    modules: ModuleCache = field(default_factory=ModuleCache)
    global_env: Optional["Environment"] = None
    loading: Set[Path] = field(default_factory=set)
    depth: int = 0
