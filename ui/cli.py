"""
CLI interface for the Portfolio Engine: banner, prompt, dispatch, repeat.
"""
import enum

from loguru import logger
from rich.console import Console
from rich.text import Text

from engine_core.interpreter import Directive, Outcome

EXIT_OK = 0
EXIT_COMMAND_FAILURE = 1
EXIT_INTERRUPTED = 130

console = Console(highlight=False)


class LoopState(enum.Enum):
    RUNNING = "running"
    ENDED = "ended"


class CommandLoop:
    """
    Drives one interactive session against a single EngineState.

    Output order is fixed: banner, usage hint, then prompt/action pairs until
    the interpreter reports end of input (or a fatal failure), then the
    shutdown message.
    """

    def __init__(self, state, interpreter, output: Console = None):
        self.state = state
        self.interpreter = interpreter
        self.console = output or console
        self.loop_state = LoopState.RUNNING
        self.exit_code = EXIT_OK
        self.iterations = 0

    @property
    def config(self):
        return self.state.config

    def run(self) -> int:
        self._print_banner()
        while self.loop_state is LoopState.RUNNING:
            self._show_prompt()
            try:
                result = self.interpreter.step(self.state)
            except KeyboardInterrupt:
                logger.info("Session interrupted")
                self._end(EXIT_INTERRUPTED, newline=True)
                break
            except Exception as e:
                logger.exception("Input could not be read")
                self.console.print(Text(f"Error: could not read input: {e}", style="bold red"))
                self._end(EXIT_COMMAND_FAILURE)
                break
            self.iterations += 1
            self._handle(result)
        self.console.print(Text(self.config.shutdown_message))
        self.console.file.flush()
        logger.info(f"Session ended after {self.iterations} iterations, exit code {self.exit_code}")
        return self.exit_code

    def _print_banner(self):
        self.console.print(Text(self.config.banner, style="bold cyan"))
        self.console.print(Text(self.config.usage_hint))

    def _show_prompt(self):
        if getattr(self.interpreter, "draws_prompt", False):
            return
        self.console.print(Text(self.config.prompt), end="")
        # The prompt must be on screen before the interpreter blocks on input
        self.console.file.flush()

    def _handle(self, result):
        if result.outcome is Outcome.END_OF_INPUT:
            self._end(EXIT_OK, newline=True)
        elif result.outcome is Outcome.FAILED:
            self.console.print(Text(f"Error: {result.message}", style="bold red"))
            if self.config.on_command_error == "abort":
                logger.error(f"Aborting session: {result.message}")
                self._end(EXIT_COMMAND_FAILURE)
        elif result.output is Directive.CLEAR_SCREEN:
            self.console.clear()
        elif isinstance(result.output, str):
            self.console.print(Text(result.output))
        elif result.output is not None:
            self.console.print(result.output)

    def _end(self, exit_code: int, newline: bool = False):
        if newline:
            # Input ended while the cursor sat after the prompt
            self.console.print()
        self.exit_code = exit_code
        self.loop_state = LoopState.ENDED


def start_cli(state, interpreter, output: Console = None) -> int:
    return CommandLoop(state, interpreter, output).run()
