from pathlib import Path

import pytest

from engine_core.config import EngineConfig, load_config
from engine_core.errors import ConfigError, EngineInitError

ROOT = Path(__file__).resolve().parent.parent


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.yaml"))
    assert cfg == EngineConfig()
    assert cfg.banner == "Portfolio Engine v0.2"


def test_yaml_values_override_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        'ENGINE_NAME: "Test Engine"\n'
        "ENGINE_VERSION: 1.5\n"
        'PROMPT: "$ "\n'
        'ON_COMMAND_ERROR: "abort"\n'
        "SOMETHING_ELSE: 42\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.banner == "Test Engine v1.5"
    assert cfg.prompt == "$ "
    assert cfg.on_command_error == "abort"
    assert cfg.shutdown_message == "Exiting."


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == EngineConfig()


def test_bundled_config_loads():
    cfg = load_config(str(ROOT / "config" / "config.yaml"))
    assert cfg.prompt == "> "
    assert cfg.on_command_error == "continue"


@pytest.mark.parametrize(
    "body",
    [
        "ENGINE_NAME: [unclosed\n",
        "- just\n- a list\n",
        'ON_COMMAND_ERROR: "explode"\n',
        'PROMPT: ""\n',
    ],
)
def test_bad_config_is_an_init_error(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))
    assert issubclass(ConfigError, EngineInitError)


def test_null_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("PROMPT: null\nSHUTDOWN_MESSAGE:\nENGINE_NAME: Custom\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.prompt == "> "
    assert cfg.shutdown_message == "Exiting."
    assert cfg.engine_name == "Custom"
