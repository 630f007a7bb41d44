"""Shared CLI option definitions.

Provides reusable Annotated type aliases for common CLI options
to avoid duplication across commands.
"""

from __future__ import annotations

from typing import Annotated, Literal

import typer

# Output format type for formatting command output
OutputFormat = Literal["json", "jsonl", "table", "csv", "plain"]

# Reusable Annotated type for --format option
# Checked against OutputFormat by validate_output_format
OutputFormatOption = Annotated[
    str,
    typer.Option(
        "--format",
        "-f",
        help="Output format: json, jsonl, table, csv, plain.",
    ),
]

# Encoding string argument shared by every command
EncodingArgument = Annotated[
    str,
    typer.Argument(
        help="One character per global option: '.' long-only, '-' disabled, "
        "anything else is the short alias.",
    ),
]
