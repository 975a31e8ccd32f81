import pytest

from orth.builtin.registry import default_registry
from orth.config import EvalOptions
from orth.interpreter import Interpreter
from orth.types.context import Context


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def ctx(registry):
    """A fresh, lenient context for each test."""
    return Context(registry)


@pytest.fixture
def strict_ctx(registry):
    return Context(registry, options=EvalOptions(strict_words=True, strict_types=True))


@pytest.fixture
def interp():
    return Interpreter(options=EvalOptions())


@pytest.fixture
def strict_interp():
    return Interpreter(options=EvalOptions(strict_words=True, strict_types=True))


@pytest.fixture(autouse=True)
def _clear_orth_env(monkeypatch):
    # Keep the developer's shell from changing default options under test
    for var in ("ORTH_STRICT", "ORTH_STRICT_WORDS", "ORTH_STRICT_TYPES",
                "ORTH_LOG_LEVEL", "ORTH_SOURCE"):
        monkeypatch.delenv(var, raising=False)
