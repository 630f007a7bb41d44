"""Apply a scanned global option to a settings record.

The value passed in is whatever the scanning loop reported for the option:
the short alias for aliased entries, or the descriptor's placeholder for
long-only ones. It is looked up in the catalogue the caller scanned with,
and the matching descriptor's identity picks the effect.

Each dispatched option is atomic: on failure the settings record is left
exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from globalopts import formats
from globalopts.catalogue import OptionDescriptor, OptionIdentity
from globalopts.exceptions import MissingArgumentError, UnrecognizedOptionError
from globalopts.formats import FormatBackend, FormatSpec
from globalopts.settings import GlobalSettings

_logger = logging.getLogger(__name__)

_Effect = Callable[[GlobalSettings, str, FormatBackend], None]


def _select_format(spec: FormatSpec, text: str, backend: FormatBackend) -> None:
    parsed = backend.parse_format_string(text)
    spec.format = parsed.format
    spec.options.extend(parsed.options)


def _input_fmt(settings: GlobalSettings, arg: str, backend: FormatBackend) -> None:
    _select_format(settings.input, arg, backend)


def _input_fmt_option(
    settings: GlobalSettings, arg: str, backend: FormatBackend
) -> None:
    backend.add_format_option(settings.input, arg)


def _output_fmt(settings: GlobalSettings, arg: str, backend: FormatBackend) -> None:
    _select_format(settings.output, arg, backend)


def _output_fmt_option(
    settings: GlobalSettings, arg: str, backend: FormatBackend
) -> None:
    backend.add_format_option(settings.output, arg)


def _verbose(settings: GlobalSettings, arg: str, backend: FormatBackend) -> None:
    settings.verbosity += 1


_EFFECTS: dict[OptionIdentity, _Effect] = {
    OptionIdentity.INPUT_FMT: _input_fmt,
    OptionIdentity.INPUT_FMT_OPTION: _input_fmt_option,
    OptionIdentity.OUTPUT_FMT: _output_fmt,
    OptionIdentity.OUTPUT_FMT_OPTION: _output_fmt_option,
    OptionIdentity.VERBOSE: _verbose,
}


def resolve(
    resolved: str, catalogue: Sequence[OptionDescriptor]
) -> OptionDescriptor | None:
    """Return the first descriptor whose value equals ``resolved``."""
    for descriptor in catalogue:
        if descriptor.value == resolved:
            return descriptor
    return None


def dispatch(
    resolved: str,
    catalogue: Sequence[OptionDescriptor],
    argument: str | None,
    settings: GlobalSettings,
    *,
    backend: FormatBackend | None = None,
) -> None:
    """Apply one scanned global option to ``settings``.

    Args:
        resolved: Value reported by the scanner (alias or placeholder).
        catalogue: The option table the scan was performed with.
        argument: The option's argument, if it takes one.
        settings: Record to update.
        backend: Format collaborator. Defaults to ``globalopts.formats``.

    Raises:
        UnrecognizedOptionError: If ``resolved`` matches no descriptor.
        MissingArgumentError: If the option needs an argument and got None.
        FormatError: Propagated unchanged from the format collaborator.
    """
    descriptor = resolve(resolved, catalogue)
    if descriptor is None:
        _logger.error("Unexpected global option: %s", resolved)
        raise UnrecognizedOptionError(resolved)

    if descriptor.takes_argument and argument is None:
        raise MissingArgumentError(descriptor.name)

    _logger.debug("Applying --%s (argument=%r)", descriptor.name, argument)
    effect = _EFFECTS[descriptor.identity]
    effect(settings, argument if argument is not None else "", backend or formats)


def apply_all(
    scanned: Iterable[tuple[str, str | None]],
    catalogue: Sequence[OptionDescriptor],
    settings: GlobalSettings,
    *,
    backend: FormatBackend | None = None,
) -> int:
    """Dispatch every ``(value, argument)`` pair in order.

    Stops at the first failure, leaving earlier options applied.

    Returns:
        Number of options applied.
    """
    count = 0
    for resolved, argument in scanned:
        dispatch(resolved, catalogue, argument, settings, backend=backend)
        count += 1
    return count
