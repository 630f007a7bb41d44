"""CLI utility functions and error handling.

This module provides shared utilities for the CLI:
- ExitCode enum for standardized exit codes
- handle_errors decorator for exception-to-exit-code mapping
- Console instances for stdout/stderr separation
- Lazy config initialization helper
- output_result for routing rows to a formatter
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar

import typer
from rich.console import Console

from globalopts.exceptions import (
    ConfigError,
    FormatError,
    GlobalOptsError,
    IntegrationError,
    ScanError,
    UnknownFormatError,
)

if TYPE_CHECKING:
    from globalopts._internal.config import OptionsConfig

# Data output goes to stdout; logs and errors go to stderr
console = Console()
err_console = Console(stderr=True, no_color=bool(os.environ.get("NO_COLOR")))


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands.

    Exit codes follow Unix conventions:
    - 0: Success
    - 1, 3, 4: Application-specific errors
    - 130: Interrupted by SIGINT (Ctrl+C)
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGS = 3
    INTEGRATION_ERROR = 4
    INTERRUPTED = 130


F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Decorator to convert library exceptions to CLI exit codes.

    Maps GlobalOptsError subclasses to appropriate exit codes and
    displays formatted error messages to stderr.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except UnknownFormatError as e:
            err_console.print(f"[red]Unknown format:[/red] '{e.format_name}'")
            if e.known_formats:
                err_console.print(f"Known formats: {', '.join(e.known_formats)}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except FormatError as e:
            err_console.print(f"[red]Format error:[/red] {e.message}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except ScanError as e:
            err_console.print(f"[red]Invalid option:[/red] {e.message}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except IntegrationError as e:
            err_console.print(f"[red]Internal error:[/red] {e.message}")
            raise typer.Exit(ExitCode.INTEGRATION_ERROR) from None
        except ConfigError as e:
            err_console.print(f"[red]Configuration error:[/red] {e.message}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        except GlobalOptsError as e:
            err_console.print(f"[red]Error:[/red] {e.message}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None

    return wrapper  # type: ignore[return-value]


def get_config(ctx: typer.Context) -> OptionsConfig:
    """Get or load configuration from context.

    The config is resolved from the environment once and cached in the
    context for reuse.

    Raises:
        ConfigError: If an environment variable holds an invalid value.
    """
    from globalopts._internal.config import load_config

    if ctx.obj is None:
        ctx.obj = {}
    if ctx.obj.get("config") is None:
        ctx.obj["config"] = load_config()
    config: OptionsConfig = ctx.obj["config"]
    return config


def output_result(
    data: dict[str, Any] | list[Any],
    columns: list[str] | None = None,
    *,
    format: str = "json",
) -> None:
    """Output data in the requested format.

    Args:
        data: Data to output (dict or list of dicts).
        columns: Column names for table format (auto-detected if None).
        format: One of json, jsonl, table, csv, plain.
    """
    from globalopts.cli.formatters import (
        format_csv,
        format_json,
        format_jsonl,
        format_plain,
        format_table,
    )

    if format == "table":
        console.print(format_table(data, columns))
    elif format == "jsonl":
        console.print(format_jsonl(data), highlight=False, markup=False, emoji=False)
    elif format == "csv":
        console.print(
            format_csv(data), highlight=False, markup=False, emoji=False, end=""
        )
    elif format == "plain":
        console.print(format_plain(data), highlight=False, markup=False, emoji=False)
    else:
        console.print(format_json(data), highlight=False, markup=False, emoji=False)
