"""
Clear module: Wipe the terminal screen.
"""
from engine_core.interpreter import Directive


def clear_screen(state, *args):
    return Directive.CLEAR_SCREEN


def register(interpreter):
    interpreter.register("clear", clear_screen, help_text="Clear the screen.")
    interpreter.register("cls", clear_screen, help_text="Same as clear.")
