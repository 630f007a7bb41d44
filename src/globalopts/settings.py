"""Shared settings record mutated by the global-option dispatcher.

A record is created with ``init_settings`` before option processing and
released with ``free_settings`` once the tool is done with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from globalopts import formats
from globalopts._internal.config import OptionsConfig, load_config
from globalopts.formats import FormatBackend, FormatSpec

_logger = logging.getLogger(__name__)


@dataclass
class GlobalSettings:
    """Settings collected from the global options of one invocation."""

    input: FormatSpec = field(default_factory=FormatSpec)
    """Input format selection and options."""

    output: FormatSpec = field(default_factory=FormatSpec)
    """Output format selection and options."""

    verbosity: int = 0
    """Number of times --verbose was given, plus the configured baseline."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "input": self.input.to_dict(),
            "output": self.output.to_dict(),
            "verbosity": self.verbosity,
        }


def init_settings(config: OptionsConfig | None = None) -> GlobalSettings:
    """Create a fresh settings record.

    Args:
        config: Configuration to take the baseline verbosity from.
            Resolved from the environment when omitted.

    Raises:
        ConfigError: If config is omitted and a GLOBALOPTS_* environment
            variable holds an invalid value.
    """
    config = config or load_config()
    return GlobalSettings(verbosity=config.verbosity)


def free_settings(
    settings: GlobalSettings,
    backend: FormatBackend | None = None,
) -> None:
    """Release format options owned by ``settings``.

    Safe to call on a record that was already released.
    """
    backend = backend or formats
    backend.free_format_options(settings.input)
    backend.free_format_options(settings.output)
    _logger.debug("Released settings record")
