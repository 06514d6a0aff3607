"""Command 'fetch' of taskseed."""

from typing import Optional

import typer

from taskseed.adapters.sql import SqlTaskReader
from taskseed.config import get_config_manager
from taskseed.utils.ui.formatters import format_output, to_plain

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def fetch(
    db: Optional[str] = typer.Option(
        None, "--db", help="SQLite database file, overrides the profile's database"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Read every task stored in the tasks table."""
    config = get_config_manager(profile).config
    database = config.database
    if db is not None:
        database = database.model_copy(update={"driver": "sqlite", "path": db})

    tasks = SqlTaskReader(database).fetch_all()
    format_output(to_plain(tasks), output or config.output.format)
