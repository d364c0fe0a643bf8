import datetime

import pytest

from engine_core.config import EngineConfig
from engine_core.errors import EngineInitError
from engine_core.state import EngineState, engine_init


def test_engine_init_builds_fresh_state(config):
    state = engine_init(config)
    assert isinstance(state, EngineState)
    assert state.initialized
    assert state.config is config
    assert state.history == []
    assert state.commands_run == 0
    assert state.started_at.tzinfo == datetime.timezone.utc


def test_engine_init_defaults_config():
    assert engine_init().config == EngineConfig()


def test_each_init_is_independent(config):
    a = engine_init(config)
    b = engine_init(config)
    a.record("help")
    a.data["k"] = 1
    assert b.history == []
    assert b.data == {}


def test_engine_init_prints_nothing(capsys, config):
    engine_init(config)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_engine_init_rejects_invalid_config():
    with pytest.raises(EngineInitError):
        engine_init(EngineConfig(on_command_error="sometimes"))


def test_record_tracks_history(state):
    state.record("help")
    state.record("help me")
    assert state.history == ["help", "help me"]
    assert state.commands_run == 2
