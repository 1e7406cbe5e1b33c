import pytest

from cinder.builtins import register
from cinder.evaluation.analyzer import Analyzer
from cinder.interpreter import Interpreter
from cinder.types.environment import Environment


@pytest.fixture
def interp():
    """A fresh interpreter with builtins registered."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def analyzer():
    return Analyzer()
