"""
Engine state: the single object every command reads and mutates during a session.

engine_init() is called once at startup, before the banner is printed and
before any input is read. It must stay silent on stdout.
"""
import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List

from loguru import logger

from engine_core.config import EngineConfig
from engine_core.errors import EngineInitError


@dataclass
class EngineState:
    config: EngineConfig
    started_at: datetime.datetime
    initialized: bool = False
    history: List[str] = field(default_factory=list)
    commands_run: int = 0
    data: Dict[str, Any] = field(default_factory=dict)

    def record(self, line: str):
        """Remember a non-empty input line before it is dispatched."""
        self.history.append(line)
        self.commands_run += 1


def engine_init(config: EngineConfig = None) -> EngineState:
    """
    Build the engine state for a new session.

    Raises EngineInitError if the state cannot be established; callers treat
    that as fatal and exit before the first prompt.
    """
    if config is None:
        config = EngineConfig()
    try:
        config.validate()
    except EngineInitError as e:
        logger.error(f"Engine init rejected config: {e}")
        raise

    state = EngineState(
        config=config,
        started_at=datetime.datetime.now(datetime.timezone.utc),
    )
    state.initialized = True
    logger.info(f"Engine state initialized: {config.banner}")
    return state
