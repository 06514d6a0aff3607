"""Utility functions for the SQL adapter."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any


def column_names(description: Sequence[Sequence[Any]] | None) -> list[str]:
    """Extract lower-cased column names from a DB-API cursor description.

    Args:
        description: ``cursor.description`` after a query

    Returns:
        Column names in result order
    """
    if not description:
        return []
    return [str(col[0]).lower() for col in description]


def row_to_dict(columns: Sequence[str], row: Sequence[Any]) -> dict[str, Any]:
    """Convert a positional result row to a dictionary keyed by column name."""
    if row is None:
        return {}
    return dict(zip(columns, row))


def parse_date(value: str | date | datetime | None) -> date:
    """Parse a stored due date.

    Args:
        value: ``date``, ``datetime`` (time part dropped) or ISO 8601 string

    Returns:
        date object

    Raises:
        ValueError: If the value is missing or not a date
    """
    if value is None:
        raise ValueError("due date is missing")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()

    raise ValueError(f"not a date: {value!r}")


def parse_optional_int(value: Any) -> int | None:
    """Parse an optional integer column, rejecting fractional values."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"not an integer: {value!r}")
    return int(value)
