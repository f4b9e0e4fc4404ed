"""Unit tests for the CLI entry point."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tests.fixtures.repos import Upstream
from vcsdriver import __version__
from vcsdriver.main import cli


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated(temp_dir: Path, clean_env: None) -> Iterator[Path]:
    os.chdir(temp_dir)
    with patch(
        "vcsdriver.config.get_user_config_path",
        return_value=temp_dir / "no-user-config.yaml",
    ):
        yield temp_dir


def test_version_output(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("clone", "pull", "head-rev", "special-files", "drivers"):
        assert command in result.output


def test_drivers(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["drivers"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["git"]


def test_special_files(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["special-files"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [".git"]


def test_unknown_driver(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["special-files", "--driver", "svn"])
    assert result.exit_code == 1
    assert "Unknown VCS driver" in result.output


@pytest.mark.requires_git
def test_clone_pull_head_rev(
    cli_runner: CliRunner, upstream: Upstream, workspace: Path
) -> None:
    target = str(workspace / "copy")

    result = cli_runner.invoke(cli, ["clone", target, upstream.url, "main"])
    assert result.exit_code == 0, result.output
    assert upstream.tip in result.output

    advanced = upstream.commit("CHANGES.md", "new\n", "Advance main")
    result = cli_runner.invoke(cli, ["pull", target, upstream.url, "main"])
    assert result.exit_code == 0, result.output
    assert advanced in result.output

    result = cli_runner.invoke(cli, ["head-rev", target])
    assert result.exit_code == 0
    assert result.output.strip() == advanced


@pytest.mark.requires_git
def test_process_failure_exit_code(cli_runner: CliRunner, temp_dir: Path) -> None:
    result = cli_runner.invoke(cli, ["-q", "head-rev", str(temp_dir)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_invalid_config_file(cli_runner: CliRunner, temp_dir: Path) -> None:
    bad = temp_dir / "bad.yaml"
    bad.write_text("git:\n  network_retries: 99\n")

    result = cli_runner.invoke(cli, ["-c", str(bad), "drivers"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert "git.network_retries" in result.output


def test_config_reaches_driver(cli_runner: CliRunner, temp_dir: Path) -> None:
    config = temp_dir / "vcsdriver.yaml"
    config.write_text("git:\n  executable: definitely-not-git-xyz\n")

    result = cli_runner.invoke(cli, ["-q", "head-rev", str(temp_dir)])

    assert result.exit_code == 1
    assert "could not be started" in result.output
