"""Command-line scanning with the bound option table.

Wraps ``getopt.gnu_getopt`` and reports every matched option the way the
dispatcher expects: the short alias when the option has one, otherwise its
placeholder. ``--input-fmt`` and ``-i`` therefore scan to the same value
when ``input-fmt`` is aliased to ``i``.
"""

from __future__ import annotations

import getopt
from collections.abc import Sequence

from globalopts.binder import long_option_names, short_option_string
from globalopts.catalogue import OptionDescriptor
from globalopts.exceptions import ScanError

ScannedOption = tuple[str, str | None]


def scan(
    argv: Sequence[str],
    usable: Sequence[OptionDescriptor],
) -> tuple[list[ScannedOption], list[str]]:
    """Scan ``argv`` against the usable subset produced by ``bind``.

    Args:
        argv: Arguments without the program name.
        usable: Bound option table.

    Returns:
        Tuple of (scanned options in order, remaining positional arguments).

    Raises:
        ScanError: On an unknown option or a missing argument.
    """
    try:
        opts, remaining = getopt.gnu_getopt(
            list(argv), short_option_string(usable), long_option_names(usable)
        )
    except getopt.GetoptError as e:
        raise ScanError(e.msg, option=e.opt or None) from None

    by_alias = {d.alias: d for d in usable if d.alias is not None}
    by_name = {d.name: d for d in usable}

    scanned: list[ScannedOption] = []
    for flag, arg in opts:
        if flag.startswith("--"):
            descriptor = by_name[flag[2:]]
        else:
            descriptor = by_alias[flag[1:]]
        scanned.append((descriptor.value, arg if descriptor.takes_argument else None))
    return scanned, remaining
