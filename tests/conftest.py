# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for versionkit tests."""

from __future__ import annotations

from datetime import date

import pytest
from click.testing import CliRunner

from versionkit import FixedClock


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2023-04-12 (ISO week 15)."""
    return FixedClock(date(2023, 4, 12))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove VERSIONKIT_* variables so tests see default configuration."""
    for name in (
        "VERSIONKIT_CALVER_FORMAT",
        "VERSIONKIT_PREFIX",
        "VERSIONKIT_PRERELEASE_MODIFIER",
        "VERSIONKIT_BUILD_MODIFIER",
    ):
        monkeypatch.delenv(name, raising=False)
