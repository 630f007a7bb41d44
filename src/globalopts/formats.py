"""File format selection parsed from ``FORMAT[,OPT[=VAL]]...`` strings.

This is the collaborator the dispatcher delegates ``--input-fmt``,
``--output-fmt`` and their ``-option`` variants to. Only the generic
syntax is understood here; option keys are not checked against any
per-format list.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from globalopts.exceptions import (
    FormatError,
    FormatOptionError,
    UnknownFormatError,
)

_logger = logging.getLogger(__name__)

KNOWN_FORMATS = ("sam", "bam", "cram", "vcf", "bcf", "fasta", "fastq", "bed")

_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")

# Value stored for a bare OPT without "=VAL"
FLAG_VALUE = "1"


class FormatOption(BaseModel):
    """A single ``OPT=VAL`` format option."""

    model_config = ConfigDict(frozen=True)

    key: str
    """Option name, normalized to lowercase."""

    value: str
    """Option value as given (``"1"`` for bare flags)."""

    @field_validator("key", mode="before")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate and normalize the option name."""
        if not isinstance(v, str):
            raise ValueError(f"Option name must be a string. Got: {type(v).__name__}")
        v = v.strip()
        if not _KEY_PATTERN.match(v):
            raise ValueError(f"Invalid option name: {v!r}")
        return v.lower()

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Reject empty values (``OPT=``)."""
        if not v:
            raise ValueError("Option value cannot be empty")
        return v

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass
class FormatSpec:
    """A selected file format plus its collected options."""

    format: str | None = None
    """Lowercase format name, or None when not chosen yet."""

    options: list[FormatOption] = field(default_factory=list)
    """Options in the order they were given."""

    def to_dict(self) -> dict[str, object]:
        """Serialize for JSON output."""
        return {
            "format": self.format,
            "options": {opt.key: opt.value for opt in self.options},
        }


class FormatBackend(Protocol):
    """The three calls the dispatcher and settings teardown rely on."""

    def parse_format_string(self, text: str) -> FormatSpec: ...

    def add_format_option(self, spec: FormatSpec, text: str) -> None: ...

    def free_format_options(self, spec: FormatSpec) -> None: ...


def _parse_option(text: str) -> FormatOption:
    """Parse one ``OPT[=VAL]`` token.

    Raises:
        FormatOptionError: If the token is empty or malformed.
    """
    if not text or not text.strip():
        raise FormatOptionError("Empty format option", text=text)

    key, sep, value = text.partition("=")
    if not sep:
        value = FLAG_VALUE

    try:
        return FormatOption(key=key, value=value)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        raise FormatOptionError(
            f"Invalid format option {text!r}: {reason}", text=text
        ) from None


def parse_format_string(text: str) -> FormatSpec:
    """Parse ``FORMAT[,OPT[=VAL]]...`` into a new FormatSpec.

    Args:
        text: Raw format string from the command line.

    Returns:
        A new FormatSpec. Nothing else is modified.

    Raises:
        UnknownFormatError: If the format name is not recognized.
        FormatOptionError: If any trailing option is malformed.
        FormatError: If the string is empty.
    """
    if not text or not text.strip():
        raise FormatError("Empty format string", text=text)

    name, *option_texts = text.split(",")
    name = name.strip().lower()
    if name not in KNOWN_FORMATS:
        raise UnknownFormatError(name, list(KNOWN_FORMATS), text=text)

    options = [_parse_option(option_text) for option_text in option_texts]
    _logger.debug("Parsed format %r with %d option(s)", name, len(options))
    return FormatSpec(format=name, options=options)


def add_format_option(spec: FormatSpec, text: str) -> None:
    """Append a single ``OPT[=VAL]`` option to ``spec``.

    The option is fully validated before ``spec`` is touched.

    Raises:
        FormatOptionError: If the option is malformed.
    """
    option = _parse_option(text)
    spec.options.append(option)
    _logger.debug("Added format option %s", option)


def free_format_options(spec: FormatSpec) -> None:
    """Release every option collected on ``spec``."""
    if spec.options:
        _logger.debug("Releasing %d format option(s)", len(spec.options))
    spec.options.clear()
