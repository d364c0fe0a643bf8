"""
Interpreter: consumes one line of input per call and dispatches it to a registered command.
"""
import enum
import shlex
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from loguru import logger

from engine_core.errors import CommandError, ParseError, UnknownCommandError


class Directive(enum.Enum):
    """Non-text results a command can hand back to the loop."""
    CLEAR_SCREEN = "clear_screen"


class Outcome(enum.Enum):
    HANDLED = "handled"
    END_OF_INPUT = "end_of_input"
    FAILED = "failed"


@dataclass
class StepResult:
    outcome: Outcome
    command: Optional[str] = None
    output: Any = None
    error: Optional[Exception] = None

    @property
    def message(self) -> str:
        if self.error is None:
            return ""
        if isinstance(self.error, CommandError):
            return str(self.error)
        return f"Internal error in {self.command}: {self.error}"


class Interpreter:
    def __init__(self, stream=None):
        # None means sys.stdin, resolved on every read so redirection is honoured
        self._stream = stream
        self._commands: Dict[str, dict] = {}

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdin

    @stream.setter
    def stream(self, stream):
        self._stream = stream

    @property
    def draws_prompt(self) -> bool:
        """True when the input source renders the prompt itself (terminal line editor)."""
        return getattr(self.stream, "draws_prompt", False)

    def register(self, name: str, handler: Callable, help_text: str = "", usage: str = ""):
        self._commands[name] = {"handler": handler, "help": help_text, "usage": usage or name}

    def commands(self) -> Dict[str, dict]:
        return dict(self._commands)

    def step(self, state) -> StepResult:
        """Read exactly one line from the input stream and act on it."""
        try:
            line = self.stream.readline()
        except UnicodeDecodeError as e:
            err = ParseError(f"Input is not valid text: {e.reason} at byte {e.start}")
            logger.warning(str(err))
            return StepResult(Outcome.FAILED, error=err)
        if line == "":
            logger.debug("End of input")
            return StepResult(Outcome.END_OF_INPUT)

        line = line.strip()
        if not line:
            return StepResult(Outcome.HANDLED)

        state.record(line)
        try:
            parts = shlex.split(line)
        except ValueError as e:
            err = ParseError(f"Could not parse input: {e}")
            logger.warning(f"{err} ({line!r})")
            return StepResult(Outcome.FAILED, error=err)

        name, args = parts[0], parts[1:]
        entry = self._commands.get(name)
        if entry is None:
            err = UnknownCommandError(name)
            logger.warning(str(err))
            return StepResult(Outcome.FAILED, command=name, error=err)

        logger.debug(f"Dispatching {name} args={args}")
        try:
            output = entry["handler"](state, *args)
        except CommandError as e:
            logger.warning(f"Command {name} failed: {e}")
            return StepResult(Outcome.FAILED, command=name, error=e)
        except Exception as e:
            logger.exception(f"Internal error in command {name}")
            return StepResult(Outcome.FAILED, command=name, error=e)
        return StepResult(Outcome.HANDLED, command=name, output=output)


def build_interpreter(stream=None) -> Interpreter:
    """Interpreter with the built-in commands registered."""
    from modules import clear as clear_module
    from modules import help as help_module

    interpreter = Interpreter(stream)
    help_module.register(interpreter)
    clear_module.register(interpreter)
    return interpreter
