"""Output formatters for different formats."""

import json
from collections.abc import Sequence
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console()

OUTPUT_FORMATS = ("table", "json", "yaml", "quiet")

TASK_COLUMNS = ("id", "title", "description", "due_date", "priority", "status", "assigned_to")


def to_plain(items: Sequence[BaseModel]) -> list[dict[str, Any]]:
    """Dump models to JSON-compatible dictionaries."""
    return [item.model_dump(mode="json") for item in items]


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "quiet":
        format_quiet(data)
    elif output_format == "table":
        format_table(data)
    else:
        raise ValueError(
            f"Unknown output format '{output_format}', "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    # Task rows keep a stable column order, anything else follows the first item
    columns = list(items[0].keys())
    if set(columns) == set(TASK_COLUMNS):
        columns = list(TASK_COLUMNS)

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_format_value(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _format_value(value))

    console.print(table)


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (one identifier per line).

    Stored tasks and users print their id, generated tasks their title.
    """
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        print(data)
        return

    for item in data:
        if item.get("id") is not None:
            print(item["id"])
        elif item.get("title") is not None:
            print(item["title"])


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items())
    if value is None:
        return "-"
    return str(value)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
