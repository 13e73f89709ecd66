"""Tests for the root notichain CLI."""

import pytest
from click.testing import CliRunner

from notichain import __version__
from notichain.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "notichain" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_missing_config_is_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "does-not-exist.toml", "describe"])
    assert result.exit_code != 0
    assert "Config file not found" in result.output


@pytest.mark.parametrize("command", ["send", "describe", "decorators"])
def test_commands_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
