"""Unit tests for format string parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from globalopts.exceptions import FormatError, FormatOptionError, UnknownFormatError
from globalopts.formats import (
    KNOWN_FORMATS,
    FormatOption,
    FormatSpec,
    add_format_option,
    free_format_options,
    parse_format_string,
)


class TestFormatOption:
    """Tests for the FormatOption model."""

    def test_key_lowercased(self) -> None:
        """Test option names are normalized to lowercase."""
        assert FormatOption(key="NThreads", value="4").key == "nthreads"

    def test_frozen(self) -> None:
        """Test options cannot be modified after creation."""
        option = FormatOption(key="level", value="5")

        with pytest.raises(ValidationError):
            option.value = "6"  # type: ignore[misc]

    @pytest.mark.parametrize("key", ["", "1abc", "a b", "a=b"])
    def test_invalid_keys(self, key: str) -> None:
        """Test malformed option names are rejected."""
        with pytest.raises(ValidationError):
            FormatOption(key=key, value="1")

    def test_str(self) -> None:
        """Test the key=value rendering."""
        assert str(FormatOption(key="level", value="5")) == "level=5"


class TestParseFormatString:
    """Tests for parse_format_string()."""

    @pytest.mark.parametrize("name", KNOWN_FORMATS)
    def test_known_formats(self, name: str) -> None:
        """Test every known format parses on its own."""
        assert parse_format_string(name) == FormatSpec(format=name)

    def test_case_insensitive(self) -> None:
        """Test format names are matched case-insensitively."""
        assert parse_format_string("CRAM").format == "cram"

    def test_with_options(self) -> None:
        """Test trailing options are parsed in order."""
        spec = parse_format_string("cram,version=3.0,no_ref,Level=7")

        assert spec.format == "cram"
        assert [(o.key, o.value) for o in spec.options] == [
            ("version", "3.0"),
            ("no_ref", "1"),
            ("level", "7"),
        ]

    def test_value_may_contain_equals(self) -> None:
        """Test only the first '=' separates key from value."""
        spec = parse_format_string("bam,filter=a=b")

        assert spec.options[0].value == "a=b"

    def test_unknown_format(self) -> None:
        """Test an unknown format name raises UnknownFormatError."""
        with pytest.raises(UnknownFormatError) as exc_info:
            parse_format_string("gif,level=3")

        assert exc_info.value.format_name == "gif"
        assert exc_info.value.text == "gif,level=3"
        assert "sam" in exc_info.value.known_formats

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text: str) -> None:
        """Test an empty format string is rejected."""
        with pytest.raises(FormatError, match="Empty format string"):
            parse_format_string(text)

    @pytest.mark.parametrize("text", ["bam,", "bam,,level=1", "bam,level="])
    def test_malformed_options(self, text: str) -> None:
        """Test malformed trailing options raise FormatOptionError."""
        with pytest.raises(FormatOptionError):
            parse_format_string(text)


class TestAddFormatOption:
    """Tests for add_format_option()."""

    def test_appends(self) -> None:
        """Test options accumulate in order."""
        spec = FormatSpec(format="bam")
        add_format_option(spec, "nthreads=2")
        add_format_option(spec, "block_size")

        assert [str(o) for o in spec.options] == ["nthreads=2", "block_size=1"]

    def test_invalid_leaves_spec_untouched(self) -> None:
        """Test a malformed option does not modify the spec."""
        spec = FormatSpec(format="bam")
        add_format_option(spec, "nthreads=2")

        with pytest.raises(FormatOptionError) as exc_info:
            add_format_option(spec, "=2")

        assert exc_info.value.text == "=2"
        assert [str(o) for o in spec.options] == ["nthreads=2"]


class TestFreeFormatOptions:
    """Tests for free_format_options()."""

    def test_clears_options(self) -> None:
        """Test all options are released and the format kept."""
        spec = parse_format_string("sam,level=1,x=2")
        free_format_options(spec)

        assert spec.options == []
        assert spec.format == "sam"

    def test_idempotent(self) -> None:
        """Test releasing twice is harmless."""
        spec = FormatSpec()
        free_format_options(spec)
        free_format_options(spec)

        assert spec.options == []

    def test_to_dict(self) -> None:
        """Test JSON-friendly serialization."""
        spec = parse_format_string("vcf,threads=3")

        assert spec.to_dict() == {"format": "vcf", "options": {"threads": "3"}}
