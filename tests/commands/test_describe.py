"""Tests for the describe CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from notichain.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestDescribeCommand:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "describe", "-d", "timestamp", "-d", "urgent"])
        assert result.exit_code == 0
        assert result.output == "UrgentDecorator(TimestampDecorator(SimpleNotifier))\n"

    def test_terminal_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "describe"])
        assert result.output == "SimpleNotifier\n"

    def test_tree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["describe", "-d", "emoji:⚡", "-d", "emoji"])
        assert result.exit_code == 0
        assert "EmojiDecorator(EmojiDecorator(SimpleNotifier))" in result.output
        assert "depth: 2" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "describe", "-d", "urgent"])
        data = json.loads(result.output)
        assert data["data"]["links"] == ["UrgentDecorator", "SimpleNotifier"]

    def test_invalid_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["describe", "-d", "urgent:loud"])
        assert result.exit_code == 1
        assert "does not accept" in result.output
