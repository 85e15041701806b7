# SPDX-License-Identifier: MIT
"""Tests for the semrange check and filter commands."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from semver_range_cli.main import cli


class TestCheckCommand:
    """Tests for semrange check command."""

    def test_matching_version(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "check", "^1.2.3", "1.4.0"])

        assert result.exit_code == 0
        assert "1.4.0 matches" in result.output

    def test_non_matching_version(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "check", "^1.2.3", "2.0.0"])

        assert result.exit_code == 1
        assert "2.0.0 does not match" in result.output

    def test_all_versions_must_match(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-C", str(empty_dir), "check", "1.2.3 || 4.5.6", "1.2.3", "4.5.6", "7.8.9"]
        )

        assert result.exit_code == 1
        assert "1.2.3 matches" in result.output
        assert "4.5.6 matches" in result.output
        assert "7.8.9 does not match" in result.output

    def test_default_mode_is_node(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        """Test that pre-releases outside the range are rejected by default."""
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "check", ">=1.2.3", "1.2.4-0"])

        assert result.exit_code == 1
        assert "--mode classic" in result.output

    def test_classic_mode_option(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-C", str(empty_dir), "check", ">=1.2.3", "1.2.4-0", "--mode", "classic"]
        )

        assert result.exit_code == 0

    def test_mode_from_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that [tool.semrange] mode applies when no option is given."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check", ">=1.2.3", "1.2.4-0"])

        assert result.exit_code == 0

    def test_option_overrides_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "check", ">=1.2.3", "1.2.4-0", "--mode", "node"]
        )

        assert result.exit_code == 1

    def test_invalid_range(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "check", "^1.2", "1.2.0"])

        assert result.exit_code == 1
        assert "Invalid version range" in result.output

    def test_invalid_version(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "check", "^1.2.3", "1.2"])

        assert result.exit_code == 1
        assert "Invalid version string" in result.output

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.semrange]\nmode = "loose"\n')

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "check", "1.2.3", "1.2.3"])

        assert result.exit_code == 1
        assert "Invalid mode" in result.output

    def test_requires_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "^1.2.3"])

        assert result.exit_code == 2


class TestFilterCommand:
    """Tests for semrange filter command."""

    def test_filters_in_input_order(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["-C", str(empty_dir), "filter", "1.x || >=3.0.0", "3.1.0", "0.9.0", "1.5.0", "2.0.0"],
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["3.1.0", "1.5.0"]

    def test_nothing_matches(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "filter", "~1.2", "2.0.0"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_prereleases_with_classic_mode(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["-C", str(empty_dir), "filter", "1.x", "1.5.0-rc.1", "1.5.0", "--mode", "classic"],
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.5.0-rc.1", "1.5.0"]
