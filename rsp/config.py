from __future__ import annotations
import os
from pathlib import Path


# Defaults
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_HISTORY_FILE = Path.home() / '.rsp_history'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_base_dir() -> Path:
    """Directory that relative `require` paths are resolved against."""
    return path_from_env('RSP_BASE_DIR', Path.cwd())


def get_max_depth() -> int:
    return int_from_env('RSP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    return os.environ.get('RSP_LOG', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def get_history_file() -> Path:
    return path_from_env('RSP_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_color() -> bool | None:
    """REPL coloring: True/False when forced by RSP_COLOR or NO_COLOR, None for auto."""
    if os.environ.get('NO_COLOR'):
        return False
    raw = os.environ.get('RSP_COLOR', '').strip().lower()
    if raw in ('1', 'true', 'always', 'yes'):
        return True
    if raw in ('0', 'false', 'never', 'no'):
        return False
    return None
