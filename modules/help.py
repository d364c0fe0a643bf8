"""
Help module: List the commands the interpreter knows about.
"""
from rich import box
from rich.table import Table


def show_help(interpreter):
    table = Table(title="Available Commands", box=box.SIMPLE, border_style="cyan")
    table.add_column("Command", style="bold green")
    table.add_column("Description", style="white")
    for name, entry in sorted(interpreter.commands().items()):
        table.add_row(entry["usage"], entry["help"])
    return table


def register(interpreter):
    interpreter.register(
        "help",
        lambda state, *args: show_help(interpreter),
        help_text="Show this list of commands.",
    )
