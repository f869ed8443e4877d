import pytest

from rsp.builtin.registry import register
from rsp.interpreter import Interpreter
from rsp.runtime_context import RuntimeContext
from rsp.types.environment import Environment

# Most tests go through an Interpreter session; lower-level tests use a bare
# Environment with the builtins registered and their own RuntimeContext.
# Module files are written under tmp_path, which is also the session base dir.


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def context(tmp_path, env):
    return RuntimeContext(base_dir=tmp_path, global_env=env)


@pytest.fixture
def itp(tmp_path):
    return Interpreter(base_dir=tmp_path)


@pytest.fixture
def write_module(tmp_path):
    """Write a .lisp file under the session base dir and return its path."""
    def _write(relpath: str, source: str):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path
    return _write
