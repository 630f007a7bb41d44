"""CLI parameter validators.

Validates raw strings from Typer before they reach the library, providing
early error feedback. The library itself trusts its callers.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, cast, get_args

import typer

from globalopts.binder import DISABLED, NO_ALIAS
from globalopts.catalogue import GLOBAL_OPTIONS
from globalopts.cli.options import OutputFormat
from globalopts.cli.utils import ExitCode, err_console


def validate_literal(value: str, literal_type: Any, param_name: str) -> Any:
    """Validate a CLI string against a Literal type.

    Args:
        value: String value from CLI.
        literal_type: The Literal type to validate against.
        param_name: Parameter name for error message.

    Returns:
        The validated value, cast to the Literal type.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if invalid.
    """
    valid_values = get_args(literal_type)
    if value not in valid_values:
        err_console.print(
            f"[red]Error:[/red] Invalid value for {param_name}: '{value}'"
        )
        err_console.print(f"Valid options: {', '.join(valid_values)}")
        raise typer.Exit(ExitCode.INVALID_ARGS)
    return value


def validate_output_format(value: str, param_name: str = "--format") -> OutputFormat:
    """Validate the --format option against OutputFormat."""
    validate_literal(value, OutputFormat, param_name)
    return cast(OutputFormat, value)


def validate_encoding(value: str, param_name: str = "ENCODING") -> str:
    """Validate an encoding string typed on the command line.

    Rejects strings longer than the catalogue, aliases getopt cannot scan
    (':' and whitespace) and aliases used twice.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if invalid.
    """
    if len(value) > len(GLOBAL_OPTIONS):
        err_console.print(
            f"[red]Error:[/red] {param_name} has {len(value)} characters, "
            f"but there are only {len(GLOBAL_OPTIONS)} global options"
        )
        raise typer.Exit(ExitCode.INVALID_ARGS)

    unscannable = sorted({repr(c) for c in value if c == ":" or c.isspace()})
    if unscannable:
        err_console.print(
            f"[red]Error:[/red] {param_name} cannot use {', '.join(unscannable)} "
            "as a short option"
        )
        raise typer.Exit(ExitCode.INVALID_ARGS)

    aliases = Counter(c for c in value if c not in (NO_ALIAS, DISABLED))
    duplicates = sorted(c for c, n in aliases.items() if n > 1)
    if duplicates:
        err_console.print(
            f"[red]Error:[/red] Short option used more than once in "
            f"{param_name}: {', '.join(duplicates)}"
        )
        raise typer.Exit(ExitCode.INVALID_ARGS)
    return value
