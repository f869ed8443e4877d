from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional

from rsp.types.module import Module


class ModuleCache:
    """Canonical file path -> loaded Module, for one session."""

    def __init__(self):
        self._modules: Dict[Path, Module] = {}

    def get(self, path: Path) -> Optional[Module]:
        return self._modules.get(path)

    def put(self, path: Path, module: Module) -> Module:
        self._modules[path] = module
        return module

    def __contains__(self, path: Path) -> bool:
        return path in self._modules

    def __len__(self) -> int:
        return len(self._modules)
