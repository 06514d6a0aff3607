"""Command 'generate' of taskseed."""

import random
from typing import Optional

import typer

from taskseed.config import get_config_manager
from taskseed.services import GeneratedTaskSource, TaskGenerator
from taskseed.utils.ui.formatters import format_output, to_plain

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def generate(
    count: Optional[int] = typer.Option(
        None, "--count", "-n", min=0, help="Number of tasks to generate"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for reproducible descriptions and assignees"
    ),
    users: Optional[bool] = typer.Option(
        None, "--users/--no-users", help="Assign each task to a seed user"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Generate synthetic pending tasks due from today onwards."""
    config = get_config_manager(profile).config
    count = config.generator.count if count is None else count
    seed = config.generator.seed if seed is None else seed
    with_users = config.generator.with_users if users is None else users

    generator = TaskGenerator(rng=random.Random(seed))
    assignees = generator.generate_users() if with_users else None
    source = GeneratedTaskSource(generator, count, assignees)

    format_output(to_plain(source.fetch_all()), output or config.output.format)
