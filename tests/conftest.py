import pytest

from samlisp.builtin.env_builtin import default_environment
from samlisp.interpreter import Interpreter
from samlisp.reader.parser import read_all
from samlisp.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh session environment with builtins loaded."""
    return default_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in the `env` fixture; return the last value."""

    def _run(source: str):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result

    return _run
