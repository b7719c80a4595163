"""Tests for the conn command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from socialctl.cli import cli
from socialctl.infrastructure.store import StoreUnavailableError
from socialctl.services.result import ServiceResult


def _seed_users(runner: CliRunner, *ids: str) -> None:
    for user_id in ids:
        result = runner.invoke(cli, ["user", "add", user_id, user_id.title()])
        assert result.exit_code == 0, result.output


@pytest.mark.usefixtures("_isolated_root")
class TestConnAdd:
    def test_add(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "bob")
        result = cli_runner.invoke(cli, ["--json", "conn", "add", "bob", "alice"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["status"] == "connection_added"
        assert data["data"]["user1_str_id"] == "alice"

    def test_add_reverse_duplicate(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "bob")
        cli_runner.invoke(cli, ["conn", "add", "alice", "bob"])
        result = cli_runner.invoke(cli, ["--json", "conn", "add", "bob", "alice"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "EDGE_ALREADY_EXISTS"

    def test_add_self(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice")
        result = cli_runner.invoke(cli, ["conn", "add", "alice", "alice"])
        assert result.exit_code == 1
        assert "Users cannot connect to themselves" in result.output

    def test_add_unknown_verbose_error(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice")
        result = cli_runner.invoke(cli, ["-v", "conn", "add", "alice", "zed"])
        assert result.exit_code == 1
        assert "VERTEX_NOT_FOUND (404)" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestConnRemoveAndList:
    def test_remove(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "bob")
        cli_runner.invoke(cli, ["conn", "add", "alice", "bob"])
        result = cli_runner.invoke(cli, ["--json", "conn", "remove", "bob", "alice"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["status"] == "connection_removed"

    def test_remove_missing(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "bob")
        result = cli_runner.invoke(cli, ["--json", "conn", "remove", "alice", "bob"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "EDGE_NOT_FOUND"

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "bob", "carol")
        cli_runner.invoke(cli, ["conn", "add", "carol", "bob"])
        result = cli_runner.invoke(cli, ["-q", "conn", "list"])
        assert result.exit_code == 0
        assert result.output.strip() == "bob-carol"

    def test_list_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["conn", "list"])
        assert result.exit_code == 0
        assert "No connections." in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestConnDegree:
    def test_degree(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "bob", "carol")
        cli_runner.invoke(cli, ["conn", "add", "alice", "bob"])
        cli_runner.invoke(cli, ["conn", "add", "bob", "carol"])
        result = cli_runner.invoke(cli, ["-q", "conn", "degree", "alice", "carol"])
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_degree_not_connected(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice", "dave")
        result = cli_runner.invoke(cli, ["--json", "conn", "degree", "alice", "dave"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["degree"] == -1
        assert data["data"]["message"] == "not_connected"

    def test_degree_same_user(self, cli_runner: CliRunner) -> None:
        _seed_users(cli_runner, "alice")
        result = cli_runner.invoke(cli, ["-q", "conn", "degree", "alice", "alice"])
        assert result.output.strip() == "0"

    def test_store_unavailable(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _down(*_args: object, **_kwargs: object) -> ServiceResult:
            raise StoreUnavailableError("connection refused")

        monkeypatch.setattr("socialctl.services.query.QueryService.degree", _down)
        result = cli_runner.invoke(cli, ["--json", "conn", "degree", "alice", "bob"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["op"] == "degree"
        assert data["error"]["code"] == "STORE_UNAVAILABLE"
        assert "connection refused" in data["error"]["message"]
