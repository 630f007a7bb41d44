"""Catalogue of global long options shared by every sub-command.

The catalogue is declared once and never mutated. Sub-commands that want
their own short aliases work on a copy (see ``working_copy``) and hand it to
``globalopts.binder.bind``.

Declaration order matters: encoding strings are matched to catalogue
entries by position.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class OptionIdentity(Enum):
    """Stable identity of a global option, independent of its alias."""

    INPUT_FMT = "input-fmt"
    INPUT_FMT_OPTION = "input-fmt-option"
    OUTPUT_FMT = "output-fmt"
    OUTPUT_FMT_OPTION = "output-fmt-option"
    VERBOSE = "verbose"


@dataclass(frozen=True)
class OptionDescriptor:
    """A single long option, optionally bound to a short alias."""

    name: str
    """Long option name without the leading dashes."""

    takes_argument: bool
    """Whether the option requires an argument."""

    identity: OptionIdentity
    """Stable identity used when dispatching."""

    placeholder: str
    """Value reported by a scanner when the option has no alias."""

    alias: str | None = None
    """Single-character short alias, or None for long-only."""

    @property
    def value(self) -> str:
        """Value a scanner reports when this option is matched."""
        return self.alias if self.alias is not None else self.placeholder

    def with_alias(self, alias: str | None) -> OptionDescriptor:
        """Return a copy of this descriptor bound to ``alias``."""
        return dataclasses.replace(self, alias=alias)


def _declare(
    *entries: tuple[str, bool, OptionIdentity],
) -> tuple[OptionDescriptor, ...]:
    return tuple(
        OptionDescriptor(
            name=name,
            takes_argument=takes_argument,
            identity=identity,
            placeholder=f"--{name}",
        )
        for name, takes_argument, identity in entries
    )


GLOBAL_OPTIONS: tuple[OptionDescriptor, ...] = _declare(
    ("input-fmt", True, OptionIdentity.INPUT_FMT),
    ("input-fmt-option", True, OptionIdentity.INPUT_FMT_OPTION),
    ("output-fmt", True, OptionIdentity.OUTPUT_FMT),
    ("output-fmt-option", True, OptionIdentity.OUTPUT_FMT_OPTION),
    ("verbose", False, OptionIdentity.VERBOSE),
)


def working_copy(
    catalogue: tuple[OptionDescriptor, ...] = GLOBAL_OPTIONS,
) -> list[OptionDescriptor]:
    """Return a per-invocation copy of the catalogue for binding."""
    return list(catalogue)


def find_option(
    name: str,
    catalogue: tuple[OptionDescriptor, ...] = GLOBAL_OPTIONS,
) -> OptionDescriptor:
    """Look up a descriptor by long name.

    Raises:
        KeyError: If no descriptor has that name.
    """
    for descriptor in catalogue:
        if descriptor.name == name:
            return descriptor
    raise KeyError(name)
