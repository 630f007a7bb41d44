"""
globalopts - shared global options for command-line sub-commands.

Every sub-command accepts the same long options (input/output format,
format options, verbosity) but may bind its own short aliases to them, or
disable some, through a compact encoding string.
"""

from globalopts.binder import bind
from globalopts.catalogue import (
    GLOBAL_OPTIONS,
    OptionDescriptor,
    OptionIdentity,
    working_copy,
)
from globalopts.dispatcher import apply_all, dispatch
from globalopts.exceptions import (
    ConfigError,
    FormatError,
    FormatOptionError,
    GlobalOptsError,
    IntegrationError,
    MissingArgumentError,
    ScanError,
    UnknownFormatError,
    UnrecognizedOptionError,
)
from globalopts.formats import FormatOption, FormatSpec
from globalopts.help import print_help, render_help
from globalopts.settings import GlobalSettings, free_settings, init_settings

__version__ = "0.1.0"

__all__ = [
    # Core
    "bind",
    "dispatch",
    "apply_all",
    "render_help",
    "print_help",
    "init_settings",
    "free_settings",
    # Catalogue
    "GLOBAL_OPTIONS",
    "OptionDescriptor",
    "OptionIdentity",
    "working_copy",
    # Settings types
    "GlobalSettings",
    "FormatSpec",
    "FormatOption",
    # Exceptions
    "GlobalOptsError",
    "IntegrationError",
    "UnrecognizedOptionError",
    "MissingArgumentError",
    "FormatError",
    "UnknownFormatError",
    "FormatOptionError",
    "ScanError",
    "ConfigError",
]
