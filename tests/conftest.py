# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from strict_semver.config import ALLOW_PARTIAL_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from changing parser behaviour."""
    monkeypatch.delenv(ALLOW_PARTIAL_ENV, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()
