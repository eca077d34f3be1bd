import pytest

from polaris.builtin.env_builtin import register
from polaris.evaluation.evaluator import Evaluator
from polaris.interpreter import Interpreter
from polaris.reader.parser import read
from polaris.types.cell import to_string
from polaris.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded (no importer)."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def evaluator():
    return Evaluator()


@pytest.fixture
def run(env, evaluator):
    """Evaluate one source form against the shared fixture env and render it."""
    def _run(source: str) -> str:
        return to_string(evaluator.evaluate(read(source), env))
    return _run


@pytest.fixture
def interp():
    return Interpreter(error_cb=None)
