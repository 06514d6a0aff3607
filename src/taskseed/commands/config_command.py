"""Configuration management commands."""

from typing import Any, Optional

import typer
from rich.console import Console

from taskseed.config import get_config_manager
from taskseed.errors import ConfigurationError
from taskseed.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = Console()

# Never echo secrets back to the terminal
_SECRET_KEYS = {"password"}


def _redact(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key: ("***" if key in _SECRET_KEYS and value else _redact(value))
            for key, value in data.items()
        }
    return data


def _parse_value(value: str) -> str | None:
    """Map "null" and "none" to an unset value.

    Anything else stays text and is coerced by the target field, so "5432"
    becomes a port number while "123456" stays a password.
    """
    if value.lower() in ("null", "none"):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("json", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    format_output(_redact(config_manager.config.model_dump()), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., database.path)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager(profile)
    value = config_manager.get(key)
    if value is None:
        raise ConfigurationError(f"Configuration key '{key}' not found or not set")
    if key.split(".")[-1] in _SECRET_KEYS:
        value = "***"
    console.print(_redact(value.model_dump()) if hasattr(value, "model_dump") else value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., database.path)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    config_manager.set(key, _parse_value(value))
    shown = "***" if key.split(".")[-1] in _SECRET_KEYS else config_manager.get(key)
    format_success(f"Configuration '{key}' set to '{shown}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = key or "all settings"
        if not typer.confirm(f"Reset {target} to defaults?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    config_manager = get_config_manager(profile)
    config_manager.reset(key)
    format_success(f"Reset {key or 'configuration'} to defaults")
