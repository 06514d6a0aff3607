"""Command 'users' of taskseed."""

from typing import Optional

import typer

from taskseed.config import get_config_manager
from taskseed.services import generate_users
from taskseed.utils.ui.formatters import format_output, to_plain

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def users(
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List the seed users generated tasks are assigned to."""
    config = get_config_manager(profile).config
    format_output(to_plain(generate_users()), output or config.output.format)
