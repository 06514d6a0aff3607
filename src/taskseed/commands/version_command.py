"""Command 'version' of taskseed."""

import typer

from taskseed import __version__
from taskseed.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
