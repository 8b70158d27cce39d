"""Text-mode menu over the same form commands as the Qt window."""

import logging

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from catalog import Catalog
from commands import Command, FormFields, LibraryForm

logger = logging.getLogger(__name__)

APP_NAME = "Library Management System"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# (menu key, label, command)
MENU_ITEMS = [
    ("1", "Add book", Command.ADD),
    ("2", "Update book availability", Command.UPDATE),
    ("3", "Delete book", Command.DELETE),
    ("4", "Search books", Command.SEARCH),
    ("5", "Display all books", Command.DISPLAY_ALL),
    ("0", "Exit", Command.EXIT),
]
COMMANDS_BY_KEY = {key: command for key, _, command in MENU_ITEMS}


def render_menu(console):
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, _ in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", label)
    console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(1, 2)))


def prompt_fields(command, console):
    """Asks only for the inputs the given command reads."""
    fields = FormFields()
    if command is Command.ADD:
        fields.title = Prompt.ask("Title", default="", console=console)
        fields.author = Prompt.ask("Author", default="", console=console)
    if command in (Command.ADD, Command.UPDATE, Command.DELETE):
        fields.isbn = Prompt.ask("ISBN", default="", console=console)
    if command in (Command.ADD, Command.UPDATE):
        fields.available = Confirm.ask("Available?", default=False, console=console)
    if command is Command.SEARCH:
        fields.query = Prompt.ask("Title or author", default="", console=console)
    return fields


def run_shell(catalog=None, console=None):
    """
    Runs the menu loop until the user picks Exit.

    Returns the catalog so callers (and tests) can inspect its final state.
    """
    catalog = catalog if catalog is not None else Catalog()
    console = console or Console()
    form = LibraryForm(catalog)
    choices = [key for key, _, _ in MENU_ITEMS]

    while True:
        render_menu(console)
        choice = Prompt.ask("Choose an option", choices=choices, default="5", console=console)
        command = COMMANDS_BY_KEY[choice]
        result = form.dispatch(command, prompt_fields(command, console))
        if result.exit_requested:
            console.print("[green]Goodbye![/]")
            return catalog
        # Output contains book titles; print it verbatim rather than as markup.
        console.print(result.output.rstrip("\n"), markup=False, highlight=False)
        console.print()


def main():
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    run_shell()


if __name__ == "__main__":
    main()
