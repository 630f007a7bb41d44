"""Shared fixtures for globalopts tests."""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from globalopts._internal.config import OptionsConfig
from globalopts.catalogue import OptionDescriptor, OptionIdentity
from globalopts.settings import GlobalSettings, free_settings, init_settings

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)

settings.register_profile(
    "ci",
    max_examples=200,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
    derandomize=True,  # Reproducible in CI
)

settings.register_profile(
    "dev",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)

# Load profile from HYPOTHESIS_PROFILE env var, default to "default"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture
def four_options() -> list[OptionDescriptor]:
    """A four-entry catalogue [A, B, C, D] for positional tests."""
    identities = [
        OptionIdentity.INPUT_FMT,
        OptionIdentity.INPUT_FMT_OPTION,
        OptionIdentity.OUTPUT_FMT,
        OptionIdentity.VERBOSE,
    ]
    return [
        OptionDescriptor(
            name=name,
            takes_argument=True,
            identity=identity,
            placeholder=f"--{name}",
        )
        for name, identity in zip("ABCD", identities, strict=True)
    ]


@pytest.fixture
def global_settings() -> Generator[GlobalSettings, None, None]:
    """A fresh settings record with zero baseline verbosity."""
    record = init_settings(OptionsConfig())
    yield record
    free_settings(record)
