"""Commands for inspecting and exercising encoding strings.

This module provides:
- usage: Print the help block a sub-command would show
- bind: Show the option table an encoding produces
- parse: Scan a sample command line and print the resulting settings
"""

from __future__ import annotations

from typing import Annotated

import typer

from globalopts._internal.scanner import scan
from globalopts.binder import bind, short_option_string
from globalopts.catalogue import working_copy
from globalopts.cli.options import EncodingArgument, OutputFormatOption
from globalopts.cli.utils import console, get_config, handle_errors, output_result
from globalopts.cli.validators import validate_encoding, validate_output_format
from globalopts.dispatcher import apply_all
from globalopts.help import render_help
from globalopts.settings import free_settings, init_settings


@handle_errors
def usage(
    ctx: typer.Context,
    encoding: EncodingArgument,
) -> None:
    """Print the global options help block for an encoding.

    Examples:

        globalopts usage iIoOv
        globalopts usage ..-.
    """
    validate_encoding(encoding)
    config = get_config(ctx)
    console.print(
        render_help(encoding, indent=config.help_indent),
        highlight=False,
        markup=False,
        emoji=False,
        end="",
    )


@handle_errors
def bind_table(
    ctx: typer.Context,
    encoding: EncodingArgument,
    format: OutputFormatOption = "json",
) -> None:
    """Show the usable options an encoding produces.

    Examples:

        globalopts bind iIoOv
        globalopts bind x.-v --format table
    """
    validate_encoding(encoding)
    fmt = validate_output_format(format)
    usable = bind(working_copy(), encoding)

    data = [
        {
            "name": d.name,
            "alias": d.alias,
            "takes_argument": d.takes_argument,
            "value": d.value,
        }
        for d in usable
    ]
    output_result(
        data,
        columns=["name", "alias", "takes_argument", "value"],
        format=fmt,
    )


@handle_errors
def parse(
    ctx: typer.Context,
    encoding: EncodingArgument,
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Command line to scan (put it after --)."),
    ] = None,
) -> None:
    """Scan a command line with the bound options and print the settings.

    Examples:

        globalopts parse iIoOv -- -i bam -O cram,level=5 -v in.bam
        globalopts parse ..-.v -- --input-fmt sam --output-fmt-option nthreads=4
    """
    validate_encoding(encoding)
    config = get_config(ctx)
    usable = bind(working_copy(), encoding)
    scanned, remaining = scan(args or [], usable)

    settings = init_settings(config)
    try:
        apply_all(scanned, usable, settings)
        data = settings.to_dict()
        data["short_options"] = short_option_string(usable)
        data["arguments"] = remaining
        output_result(data, format="json")
    finally:
        free_settings(settings)
