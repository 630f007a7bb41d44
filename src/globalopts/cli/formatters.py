"""Output formatters for CLI commands.

This module provides formatting functions for different output formats:
- JSON: Pretty-printed JSON
- JSONL: Newline-delimited JSON (one object per line)
- Table: Rich table
- CSV: Comma-separated values with headers
- Plain: One option name per line
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from rich.table import Table


def _rows(data: dict[str, Any] | list[Any]) -> list[Any]:
    return [data] if isinstance(data, dict) else data


def format_json(data: dict[str, Any] | list[Any]) -> str:
    """Format data as pretty-printed JSON with 2-space indentation."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_jsonl(data: dict[str, Any] | list[Any]) -> str:
    """Format data as newline-delimited JSON, one row per line."""
    return "\n".join(json.dumps(row, ensure_ascii=False) for row in _rows(data))


def format_table(
    data: dict[str, Any] | list[Any],
    columns: list[str] | None = None,
) -> Table:
    """Format rows as a Rich table.

    Args:
        data: A dict or a list of dicts.
        columns: Column names to display. If None, taken from the first row.

    Returns:
        Rich Table object ready for printing.
    """
    table = Table(show_header=True, header_style="bold")
    rows = _rows(data)
    if not rows:
        return table

    if columns is None:
        columns = list(rows[0].keys())

    for col in columns:
        table.add_column(col.upper().replace("_", " "))
    for row in rows:
        table.add_row(*[_format_cell(row.get(col)) for col in columns])
    return table


def _format_cell(value: Any) -> str:
    """Format a single cell value for table display."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, list | dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def format_csv(data: dict[str, Any] | list[Any]) -> str:
    """Format rows as comma-separated values with a header row."""
    rows = _rows(data)
    if not rows:
        return ""

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    for row in rows:
        writer.writerow({k: _csv_value(v) for k, v in row.items()})
    return output.getvalue()


def _csv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, list | dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def format_plain(data: dict[str, Any] | list[Any]) -> str:
    """Format data as minimal plain text.

    Rows with a "name" key print that name; other dicts print as
    key=value lines.
    """
    if isinstance(data, dict):
        return "\n".join(f"{k}={v}" for k, v in data.items())
    lines = []
    for row in data:
        if isinstance(row, dict) and "name" in row:
            lines.append(str(row["name"]))
        else:
            lines.append(str(row))
    return "\n".join(lines)
