"""
Config module: Loads engine settings from config/config.yaml.
"""
import os
from dataclasses import dataclass

import yaml

from engine_core.errors import ConfigError

DEFAULT_CONFIG_PATH = os.path.join("config", "config.yaml")

ERROR_POLICIES = ("continue", "abort")

# YAML key -> EngineConfig attribute
_KEYS = {
    "ENGINE_NAME": "engine_name",
    "ENGINE_VERSION": "engine_version",
    "USAGE_HINT": "usage_hint",
    "PROMPT": "prompt",
    "SHUTDOWN_MESSAGE": "shutdown_message",
    "ON_COMMAND_ERROR": "on_command_error",
    "LOG_DIR": "log_dir",
    "LOG_LEVEL": "log_level",
}


@dataclass
class EngineConfig:
    engine_name: str = "Portfolio Engine"
    engine_version: str = "0.2"
    usage_hint: str = "Type 'help' for a list of commands."
    prompt: str = "> "
    shutdown_message: str = "Exiting."
    on_command_error: str = "continue"
    log_dir: str = "logs"
    log_level: str = "INFO"

    @property
    def banner(self) -> str:
        return f"{self.engine_name} v{self.engine_version}"

    def validate(self):
        if self.on_command_error not in ERROR_POLICIES:
            raise ConfigError(
                f"ON_COMMAND_ERROR must be one of {', '.join(ERROR_POLICIES)}, "
                f"got {self.on_command_error!r}"
            )
        if not self.prompt:
            raise ConfigError("PROMPT must not be empty")
        return self


def load_config(path: str = DEFAULT_CONFIG_PATH) -> EngineConfig:
    """
    Read the YAML config at `path`. A missing file yields the defaults;
    unknown keys are ignored.
    """
    if not os.path.exists(path):
        return EngineConfig().validate()
    try:
        with open(path, "r") as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    values = {}
    for key, attr in _KEYS.items():
        # a key left empty (`PROMPT:`) falls back to its default
        if cfg.get(key) is not None:
            values[attr] = str(cfg[key])
    return EngineConfig(**values).validate()
