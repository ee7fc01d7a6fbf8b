# tests/conftest.py
from __future__ import annotations

"""
Pytest configuration for the astronav suite.

- Registers Hypothesis profiles for local dev and CI.
- Adds a 'tzdata' marker for the tzfpy/pytz lookup tests, handy to deselect
  where the timezone data is unavailable.
"""

import os

import pytest
from hypothesis import HealthCheck, settings


# ──────────────────────────────────────────────────────────────────────────────
# Hypothesis profiles
# ──────────────────────────────────────────────────────────────────────────────
settings.register_profile(
    "dev",
    settings(
        deadline=None,
        max_examples=60,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=120,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

_profile = (
    "ci"
    if (os.getenv("CI") or os.getenv("GITHUB_ACTIONS"))
    else os.getenv("HYPOTHESIS_PROFILE", "dev")
)
settings.load_profile(_profile)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "tzdata: needs the tzfpy/pytz timezone data")


def pytest_report_header(config: pytest.Config) -> str:
    return f"Hypothesis profile: '{_profile}'"


# ──────────────────────────────────────────────────────────────────────────────
# Observer fixtures
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def new_york() -> dict:
    """New York City on May 16th 2024 (EDT)."""
    return {"doy": 137, "long": -74.0060, "lat": 40.7128, "timezone": -4.0}


@pytest.fixture
def chennai() -> dict:
    """Chennai, India on May 17th 2024 at 13:08:47 IST."""
    return {
        "year": 2024, "doy": 138, "long": 80.2705, "lat": 13.0843,
        "timezone": 5.5, "hour": 13, "min": 8, "sec": 47,
    }
