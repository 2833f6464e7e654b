# SPDX-License-Identifier: MIT
"""Tests for the semver command."""

from __future__ import annotations

from click.testing import CliRunner

from strict_semver.cli import cli
from strict_semver.config import ALLOW_PARTIAL_ENV, ConfigError


class TestCheckCommand:
    """Tests for semver check."""

    def test_valid_versions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.2.3", "1.0.0-alpha+001"])

        assert result.exit_code == 0
        assert "1.2.3: valid" in result.output
        assert "1.0.0-alpha+001: valid" in result.output

    def test_invalid_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.2.3", "1.0.0,ab"])

        assert result.exit_code == 1
        assert "Error: unexpected character ',' at position 5" in result.output

    def test_reports_every_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.0.0-", "1.2.3-01"])

        assert result.exit_code == 1
        assert "empty identifier" in result.output
        assert "leading zero" in result.output

    def test_partial_rejected_by_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.2"])

        assert result.exit_code == 1
        assert "missing patch version" in result.output

    def test_partial_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--partial", "check", "1.2"])

        assert result.exit_code == 0

    def test_partial_from_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1"], env={ALLOW_PARTIAL_ENV: "1"})

        assert result.exit_code == 0

    def test_invalid_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.0.0"], env={ALLOW_PARTIAL_ENV: "maybe"})

        assert result.exit_code == 1
        assert isinstance(result.exception, ConfigError)

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])

        assert result.exit_code == 2


class TestShowCommand:
    """Tests for semver show."""

    def test_show_components(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert "major: 1" in result.output
        assert "minor: 2" in result.output
        assert "patch: 3" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build: build.5" in result.output
        assert "canonical: 1.2.3-rc.1+build.5" in result.output

    def test_show_partial(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--partial", "show", "1.2"])

        assert result.exit_code == 0
        assert "canonical: 1.2.0" in result.output


class TestCompareCommand:
    """Tests for semver compare."""

    def test_lower(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_equal_ignores_build(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0+a", "1.0.0+b"])

        assert result.output.strip() == "0"

    def test_higher(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-beta.11", "1.0.0-beta.2"])

        assert result.output.strip() == "1"

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "1.0"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSortCommand:
    """Tests for semver sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["sort", "1.0.0", "1.0.0-beta.11", "1.0.0-alpha", "1.0.0-beta.2"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "1.0.0-alpha",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0",
        ]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--reverse", "0.9.0", "1.0.0", "0.10.0"])

        assert result.output.splitlines() == ["1.0.0", "0.10.0", "0.9.0"]

    def test_sort_keeps_original_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--partial", "sort", "2", "1.5"])

        assert result.output.splitlines() == ["1.5", "2"]
