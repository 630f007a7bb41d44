"""Exception hierarchy for globalopts.

All library exceptions inherit from GlobalOptsError, enabling callers to
catch every library error with a single except clause while still allowing
fine-grained handling when needed.

Two failure kinds matter to option processing:
- IntegrationError: the dispatcher was handed a value that does not belong
  to the catalogue it was given. Always a programming bug on the caller side.
- FormatError: a format string or format option could not be parsed. These
  are surfaced verbatim and never partially applied.
"""

from __future__ import annotations

from typing import Any


class GlobalOptsError(Exception):
    """Base exception for all globalopts errors.

    All library exceptions inherit from this class, allowing callers to:
    - Catch all library errors: except GlobalOptsError
    - Handle specific errors: except FormatError
    - Serialize errors: error.to_dict()
    """

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code for programmatic handling.
            details: Additional structured data about the error.
        """
        super().__init__(message)
        self._message = message
        self._code = code
        self._details = details or {}

    @property
    def code(self) -> str:
        """Machine-readable error code."""
        return self._code

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """Additional structured error data."""
        return self._details

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/JSON output.

        Returns:
            Dictionary with keys: code, message, details.
            All values are JSON-serializable.
        """
        return {
            "code": self._code,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self._message

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return (
            f"{self.__class__.__name__}(message={self._message!r}, code={self._code!r})"
        )


# Integration Exceptions


class IntegrationError(GlobalOptsError):
    """Base for caller/catalogue mismatches.

    Raised when the dispatcher is used in a way the catalogue cannot
    satisfy. These indicate a bug in the calling tool and are never retried.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTEGRATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class UnrecognizedOptionError(IntegrationError):
    """The resolved option value matches no descriptor in the catalogue."""

    def __init__(self, option: str) -> None:
        """Initialize UnrecognizedOptionError.

        Args:
            option: The value the scanner reported.
        """
        self._option = option
        super().__init__(
            f"Unrecognized global option: {option!r}",
            code="UNRECOGNIZED_OPTION",
            details={"option": option},
        )

    @property
    def option(self) -> str:
        """The value that could not be resolved."""
        return self._option


class MissingArgumentError(IntegrationError):
    """An option that takes an argument was dispatched without one."""

    def __init__(self, option_name: str) -> None:
        """Initialize MissingArgumentError.

        Args:
            option_name: Long name of the option missing its argument.
        """
        self._option_name = option_name
        super().__init__(
            f"Option --{option_name} requires an argument",
            code="MISSING_ARGUMENT",
            details={"option_name": option_name},
        )

    @property
    def option_name(self) -> str:
        """Long name of the option."""
        return self._option_name


# Format Exceptions


class FormatError(GlobalOptsError):
    """Base for failures parsing a format string or a format option.

    The offending text is kept so callers can echo it back unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str | None = None,
        code: str = "FORMAT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize FormatError.

        Args:
            message: Human-readable error message.
            text: The raw text that failed to parse.
            code: Machine-readable error code.
            details: Additional structured data about the error.
        """
        self._text = text
        merged: dict[str, Any] = {"text": text}
        if details:
            merged.update(details)
        super().__init__(message, code=code, details=merged)

    @property
    def text(self) -> str | None:
        """The raw text that failed to parse."""
        return self._text


class UnknownFormatError(FormatError):
    """The format name is not one of the known formats."""

    def __init__(
        self,
        format_name: str,
        known_formats: list[str] | None = None,
        *,
        text: str | None = None,
    ) -> None:
        """Initialize UnknownFormatError.

        Args:
            format_name: The format name as supplied.
            known_formats: Format names that would have been accepted.
            text: The full format string the name came from.
        """
        self._format_name = format_name
        self._known_formats = known_formats or []

        message = f"Unknown format: {format_name!r}"
        if self._known_formats:
            message += f". Known formats: {', '.join(self._known_formats)}"

        super().__init__(
            message,
            text=text,
            code="UNKNOWN_FORMAT",
            details={
                "format_name": format_name,
                "known_formats": self._known_formats,
            },
        )

    @property
    def format_name(self) -> str:
        """The format name as supplied."""
        return self._format_name

    @property
    def known_formats(self) -> list[str]:
        """Format names that would have been accepted."""
        return self._known_formats


class FormatOptionError(FormatError):
    """A single OPT[=VAL] format option is malformed."""

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message, text=text, code="FORMAT_OPTION_ERROR")


# Scanning and Configuration Exceptions


class ScanError(GlobalOptsError):
    """The command-line scan hit an unknown option or a missing argument."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        self._option = option
        super().__init__(message, code="SCAN_ERROR", details={"option": option})

    @property
    def option(self) -> str | None:
        """The option the scanner complained about, if known."""
        return self._option


class ConfigError(GlobalOptsError):
    """Invalid configuration from environment variables."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)
