"""
Errors raised by the engine core.
"""


class EngineError(Exception):
    """Base class for every engine failure."""


class EngineInitError(EngineError):
    """Engine state could not be established; the session must not start."""


class ConfigError(EngineInitError):
    pass


class CommandError(EngineError):
    """A command failed in a way the session can recover from."""


class UnknownCommandError(CommandError):
    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name}")
        self.name = name


class ParseError(CommandError):
    pass
