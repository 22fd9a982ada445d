import pytest

from lilsp.builtins import register
from lilsp.interpreter import evaluate
from lilsp.reader import parse
from lilsp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Parse and evaluate one line of source against the fixture environment."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
