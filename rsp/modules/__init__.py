from rsp.modules.module_loader import load_module, require_module, resolve_module_path

__all__ = ["load_module", "require_module", "resolve_module_path"]
