"""
Terminal input: line editing for interactive sessions.

Used only when stdin and stdout are a TTY. Piped input keeps going through
the interpreter's plain stream so the prompt/flush ordering stays observable.
"""
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory


class TerminalInput:
    """
    Stream-like line source backed by a prompt_toolkit session.

    - ArrowUp/ArrowDown recall earlier lines
    - Tab completes command names
    - Ctrl-D on an empty line is end of input
    """

    # prompt_toolkit renders the prompt and flushes before it waits for keys
    draws_prompt = True

    def __init__(self, prompt: str, commands, history=None, input=None, output=None):
        self.prompt = prompt
        self.session = PromptSession(
            history=history or InMemoryHistory(),
            completer=WordCompleter(lambda: sorted(commands())),
            complete_while_typing=False,
            input=input,
            output=output,
        )

    def readline(self) -> str:
        try:
            return self.session.prompt(self.prompt) + "\n"
        except EOFError:
            return ""


def is_interactive(stdin=None, stdout=None) -> bool:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    return stdin.isatty() and stdout.isatty()
