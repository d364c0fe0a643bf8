# tests/conftest.py
import io

import pytest
from loguru import logger
from rich.console import Console

from engine_core.config import EngineConfig
from engine_core.interpreter import build_interpreter
from engine_core.state import engine_init


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def state(config):
    return engine_init(config)


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(out) -> Console:
    return Console(file=out, width=100, highlight=False, color_system=None)


@pytest.fixture
def make_interpreter():
    """
    Factory for an interpreter reading from an in-memory stream.

        interpreter = make_interpreter("help\\nfoo\\n")
    """

    def _make(text: str = ""):
        return build_interpreter(io.StringIO(text))

    return _make
