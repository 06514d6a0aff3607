"""Main entry point for TaskSeed."""

import typer

from taskseed.commands import (
    config_command,
    fetch_command,
    generate_command,
    users_command,
    version_command,
)

app = typer.Typer(
    name="taskseed",
    help="Generate synthetic task records or read them from a SQL store",
    no_args_is_help=True,
)

app.command("generate")(generate_command.generate)
app.command("fetch")(fetch_command.fetch)
app.command("users")(users_command.users)
app.command("version")(version_command.version)
app.add_typer(config_command.app, name="config", help="Configuration management")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
