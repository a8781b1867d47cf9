"""Shared pytest setup for lngkit.

Hypothesis profiles (example counts are set here and nowhere else):
    dev      500 examples, random seed; used locally
    ci       50 examples, derandomized, failing blobs printed
    verbose  100 examples with per-example output

The profile comes from HYPOTHESIS_PROFILE when set to one of the above,
otherwise "ci" when CI=true, otherwise "dev".
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from lngkit.syntax import TranslationHeader
from tests.helpers.lng_sources import ENGLISH_HEADER_SOURCE

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in {"dev", "ci", "verbose"}:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def english_header() -> TranslationHeader:
    """Header matching ENGLISH_HEADER_SOURCE."""
    return TranslationHeader(
        language_name="English (UK)",
        translator_name="Zenju",
        locale="en_GB",
        flag_file="england.png",
        plural_count=2,
        plural_definition="n == 1 ? 0 : 1",
    )


@pytest.fixture
def header_source() -> str:
    """Header block of a valid two-form language file."""
    return ENGLISH_HEADER_SOURCE
