"""Usage text for the global options.

Takes the same encoding string as ``globalopts.binder.bind`` so the help a
sub-command prints always agrees with the options it accepts. Entries past
the end of the encoding are shown long-only, as ``bind`` keeps them usable.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from globalopts._internal.config import DEFAULT_HELP_INDENT
from globalopts.binder import bind
from globalopts.catalogue import GLOBAL_OPTIONS, OptionDescriptor

# Synopsis and description lines, keyed by long option name
HELP_TEXT: dict[str, tuple[str, tuple[str, ...]]] = {
    "input-fmt": (
        "FORMAT[,OPT[=VAL]]...",
        ("Specify input format (SAM, BAM, CRAM)",),
    ),
    "input-fmt-option": (
        "OPT[=VAL]",
        (
            "Specify a single input file format option in the form",
            "of OPTION or OPTION=VALUE",
        ),
    ),
    "output-fmt": (
        "FORMAT[,OPT[=VAL]]...",
        ("Specify output format (SAM, BAM, CRAM)",),
    ),
    "output-fmt-option": (
        "OPT[=VAL]",
        (
            "Specify a single output file format option in the form",
            "of OPTION or OPTION=VALUE",
        ),
    ),
    "verbose": (
        "",
        ("Increment level of verbosity",),
    ),
}


def _header(descriptor: OptionDescriptor) -> str:
    synopsis, _ = HELP_TEXT.get(descriptor.name, ("", ()))
    if descriptor.alias is None:
        prefix = "      --"
    else:
        prefix = f"  -{descriptor.alias}, --"
    line = prefix + descriptor.name
    if synopsis:
        line += " " + synopsis
    return line


def render_help(
    encoding: str | None,
    catalogue: Sequence[OptionDescriptor] = GLOBAL_OPTIONS,
    *,
    indent: int = DEFAULT_HELP_INDENT,
) -> str:
    """Render the help block for the options usable under ``encoding``.

    Args:
        encoding: Encoding string as passed to ``bind``.
        catalogue: Master catalogue to describe.
        indent: Column at which description lines start.

    Returns:
        Newline-terminated help text, or an empty string if every option
        is disabled.
    """
    lines: list[str] = []
    for descriptor in bind(catalogue, encoding):
        lines.append(_header(descriptor))
        _, description = HELP_TEXT.get(descriptor.name, ("", ()))
        lines.extend(" " * indent + text for text in description)
    return "".join(line + "\n" for line in lines)


def print_help(
    encoding: str | None,
    file: TextIO | None = None,
    *,
    catalogue: Sequence[OptionDescriptor] = GLOBAL_OPTIONS,
    indent: int = DEFAULT_HELP_INDENT,
) -> None:
    """Write ``render_help`` output to ``file`` (stdout by default)."""
    (file or sys.stdout).write(render_help(encoding, catalogue, indent=indent))
