"""Bind sub-command specific short options onto the global catalogue.

An encoding string carries one character per catalogue entry, consumed in
lock-step with the catalogue:

- ``.``  no short option; the entry is usable as ``--long-opt`` only.
- ``-``  the entry is disabled and dropped from the usable subset.
- ``c``  any other character becomes the entry's short alias ``-c``.

Entries beyond the end of the encoding stay usable without an alias, so a
sub-command only has to spell out the leading options it cares about.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from globalopts.catalogue import OptionDescriptor

_logger = logging.getLogger(__name__)

NO_ALIAS = "."
DISABLED = "-"


def bind(
    working_catalogue: Sequence[OptionDescriptor],
    encoding: str | None,
) -> list[OptionDescriptor]:
    """Apply an encoding string to a working copy of the catalogue.

    Args:
        working_catalogue: Descriptors in declaration order. Not modified.
        encoding: Per-invocation encoding string. None or empty keeps every
            entry usable with no alias.

    Returns:
        The usable subset, dense and in catalogue order.
    """
    encoding = encoding or ""
    usable: list[OptionDescriptor] = []

    for position, descriptor in enumerate(working_catalogue):
        code = encoding[position] if position < len(encoding) else NO_ALIAS
        if code == DISABLED:
            continue
        if code == NO_ALIAS:
            usable.append(descriptor)
        else:
            usable.append(descriptor.with_alias(code))

    _logger.debug(
        "Bound %r: %d of %d options usable",
        encoding,
        len(usable),
        len(working_catalogue),
    )
    return usable


def short_option_string(usable: Sequence[OptionDescriptor]) -> str:
    """Build a getopt-style short option spec from the aliased entries.

    Example:
        ``bind(working_copy(), "iIoOv")`` gives ``"i:I:o:O:v"``.
    """
    parts = []
    for descriptor in usable:
        if descriptor.alias is None:
            continue
        parts.append(descriptor.alias + (":" if descriptor.takes_argument else ""))
    return "".join(parts)


def long_option_names(usable: Sequence[OptionDescriptor]) -> list[str]:
    """Build getopt-style long option names (``name=`` when an argument is taken)."""
    return [
        descriptor.name + ("=" if descriptor.takes_argument else "")
        for descriptor in usable
    ]
