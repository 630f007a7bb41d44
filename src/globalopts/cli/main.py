"""CLI entry point for globalopts.

This module provides the `globalopts` command-line interface. It defines
the top-level options and registers the commands.

Usage:
    globalopts [OPTIONS] COMMAND [ARGS]...

Examples:
    globalopts --help
    globalopts usage iIoOv
    globalopts bind x.-v --format table
    globalopts -v parse iIoOv -- -i bam -v in.bam
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Annotated

import typer
from rich.logging import RichHandler

import globalopts
from globalopts.cli.utils import ExitCode, err_console

# Create main application
app = typer.Typer(
    name="globalopts",
    help="Shared global options - bind short aliases and parse format options.",
    epilog="""[dim]Encoding strings:[/dim] one character per option, in order
  input-fmt, input-fmt-option, output-fmt, output-fmt-option, verbose
  [cyan].[/cyan] long-only  [cyan]-[/cyan] disabled  [cyan]c[/cyan] short alias -c""",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        print(f"globalopts version {globalopts.__version__}")
        raise typer.Exit()


def _handle_interrupt(_signum: int, _frame: object) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    err_console.print("\n[yellow]Interrupted[/yellow]")
    sys.exit(ExitCode.INTERRUPTED)


# Set up signal handler for Ctrl+C
signal.signal(signal.SIGINT, _handle_interrupt)


def _configure_logging() -> None:
    """Route library debug logs to stderr."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug output.",
        ),
    ] = False,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Shared global options - bind short aliases and parse format options."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = None
    if verbose:
        _configure_logging()


# Import and register commands
# These imports are done here to avoid circular imports
def _register_commands() -> None:
    """Register all commands with the main app."""
    from globalopts.cli.commands.options import bind_table, parse, usage

    app.command("usage")(usage)
    app.command("bind")(bind_table)
    app.command(
        "parse",
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )(parse)


# Register commands when module is imported
_register_commands()


if __name__ == "__main__":
    app()
