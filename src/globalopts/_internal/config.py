"""Configuration for globalopts.

Settings are resolved from environment variables:
- GLOBALOPTS_VERBOSITY: baseline verbosity for fresh settings records
- GLOBALOPTS_HELP_INDENT: column at which help descriptions start
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from globalopts.exceptions import ConfigError

ENV_VERBOSITY = "GLOBALOPTS_VERBOSITY"
ENV_HELP_INDENT = "GLOBALOPTS_HELP_INDENT"

DEFAULT_HELP_INDENT = 15


class OptionsConfig(BaseModel):
    """Immutable configuration for option processing and help output."""

    model_config = ConfigDict(frozen=True)

    verbosity: int = Field(default=0, ge=0)
    """Verbosity a freshly initialized settings record starts at."""

    help_indent: int = Field(default=DEFAULT_HELP_INDENT, ge=4)
    """Column at which help description lines start."""


def load_config(environ: Mapping[str, str] | None = None) -> OptionsConfig:
    """Resolve configuration from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Validated OptionsConfig. Unset variables keep their defaults.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    env = os.environ if environ is None else environ

    values: dict[str, str] = {}
    if env.get(ENV_VERBOSITY):
        values["verbosity"] = env[ENV_VERBOSITY]
    if env.get(ENV_HELP_INDENT):
        values["help_indent"] = env[ENV_HELP_INDENT]

    try:
        return OptionsConfig.model_validate(values)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigError(
            f"Invalid configuration in environment: {', '.join(fields)}",
            details={"fields": fields, "values": values},
        ) from None
