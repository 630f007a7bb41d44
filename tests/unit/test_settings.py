"""Unit tests for the settings record lifecycle."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from globalopts._internal.config import OptionsConfig
from globalopts.exceptions import ConfigError
from globalopts.formats import FormatSpec, add_format_option, parse_format_string
from globalopts.settings import GlobalSettings, free_settings, init_settings


class TestInitSettings:
    """Tests for init_settings()."""

    def test_fresh_record(self) -> None:
        """Test a new record has no formats and zero verbosity."""
        settings = init_settings(OptionsConfig())

        assert settings == GlobalSettings()
        assert settings.input is not settings.output

    def test_baseline_verbosity_from_config(self) -> None:
        """Test the configured baseline is applied."""
        assert init_settings(OptionsConfig(verbosity=2)).verbosity == 2

    def test_reads_environment_when_no_config(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the environment is consulted when no config is passed."""
        monkeypatch.setenv("GLOBALOPTS_VERBOSITY", "3")

        assert init_settings().verbosity == 3

    def test_invalid_environment_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a bad environment value surfaces as ConfigError."""
        monkeypatch.setenv("GLOBALOPTS_VERBOSITY", "loud")

        with pytest.raises(ConfigError):
            init_settings()

    def test_explicit_config_skips_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a passed config is used even when the environment is bad."""
        monkeypatch.setenv("GLOBALOPTS_VERBOSITY", "loud")

        assert init_settings(OptionsConfig(verbosity=1)).verbosity == 1

    def test_records_independent(self) -> None:
        """Test two records never share option lists."""
        a = init_settings(OptionsConfig())
        b = init_settings(OptionsConfig())
        add_format_option(a.input, "level=1")

        assert b.input.options == []


class TestFreeSettings:
    """Tests for free_settings()."""

    def test_releases_both_sides(self) -> None:
        """Test input and output options are released."""
        settings = GlobalSettings(
            input=parse_format_string("bam,nthreads=2"),
            output=parse_format_string("cram,level=7,no_ref"),
        )
        free_settings(settings)

        assert settings.input.options == []
        assert settings.output.options == []

    def test_second_call_harmless(self) -> None:
        """Test releasing an already released record does nothing."""
        settings = GlobalSettings(input=parse_format_string("sam,x=1"))
        free_settings(settings)
        free_settings(settings)

        assert settings.input.options == []

    def test_custom_backend(self) -> None:
        """Test the backend's free call is used once per side."""
        backend = MagicMock()
        settings = GlobalSettings()
        free_settings(settings, backend)

        assert backend.free_format_options.call_count == 2
        backend.free_format_options.assert_any_call(settings.input)
        backend.free_format_options.assert_any_call(settings.output)

    def test_to_dict(self) -> None:
        """Test JSON-friendly serialization."""
        settings = GlobalSettings(output=FormatSpec(format="sam"), verbosity=1)

        assert settings.to_dict() == {
            "input": {"format": None, "options": {}},
            "output": {"format": "sam", "options": {}},
            "verbosity": 1,
        }
