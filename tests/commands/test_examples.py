"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from socialctl.cli import cli
from socialctl.commands._base import SocialCommand

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["socialctl conn add alice bob", "--json conn degree"]),
    (["user", "--examples"], ["socialctl user add", "socialctl user fof"]),
    (["user", "add", "--examples"], ["--email"]),
    (["user", "show", "--examples"], ["socialctl user show alice"]),
    (["user", "list", "--examples"], ["socialctl user list"]),
    (["user", "friends", "--examples"], ["socialctl user friends"]),
    (["user", "fof", "--examples"], ["socialctl user fof"]),
    (["conn", "--examples"], ["socialctl conn add", "socialctl conn degree"]),
    (["conn", "add", "--examples"], ["socialctl conn add alice bob"]),
    (["conn", "remove", "--examples"], ["socialctl conn remove"]),
    (["conn", "list", "--examples"], ["socialctl conn list"]),
    (["conn", "degree", "--examples"], ["-q conn degree"]),
    (["health", "--examples"], ["socialctl health"]),
    (["serve", "--examples"], ["--transport streamable-http"]),
]


@pytest.mark.usefixtures("_isolated_root")
class TestExamplesFlag:
    @pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
    def test_examples_output(
        self, cli_runner: CliRunner, args: list[str], keywords: list[str]
    ) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Examples for" in result.output
        for keyword in keywords:
            assert keyword in result.output

    def test_help_does_not_print_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["conn", "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output
        assert "Examples for" not in result.output

    def test_root_examples_skip_store(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert not (tmp_path / ".socialctl").exists()

    def test_plain_command_has_no_flag(self) -> None:
        command = SocialCommand(name="bare")
        assert command.examples is None
        assert all(param.name != "examples" for param in command.params)
