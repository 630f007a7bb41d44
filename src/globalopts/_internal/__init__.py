"""Internal implementation modules. Not part of the public API."""

from globalopts._internal.config import OptionsConfig, load_config
from globalopts._internal.scanner import scan

__all__ = ["OptionsConfig", "load_config", "scan"]
