"""Shared pytest fixtures and test helpers for socialctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from socialctl.config.settings import SocialSettings
from socialctl.infrastructure.database.engine import init_database
from socialctl.infrastructure.store import Store
from socialctl.services.connection import ConnectionService
from socialctl.services.telemetry import disable_telemetry
from socialctl.services.users import UserService


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep env config, root log handlers, and telemetry from leaking between tests."""
    monkeypatch.delenv("SOCIALCTL_CONFIG", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(f"sqlite:///{tmp_path / '.socialctl' / 'socialctl.db'}")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(tmp_path: Path) -> Generator[Store]:
    """Fully initialized store on a temp directory."""
    settings = SocialSettings.from_cli(data_root=tmp_path)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared seeding helpers
# ---------------------------------------------------------------------------


def add_user(store: Store, user_id: str, display_name: str | None = None) -> None:
    """Register a user via UserService, asserting success."""
    result = UserService(store).register(user_id, display_name or user_id.title())
    assert result.ok, result.error


def add_edge(store: Store, a: str, b: str) -> None:
    """Connect two users via ConnectionService, asserting success."""
    result = ConnectionService(store).connect(a, b)
    assert result.ok, result.error


@pytest.fixture
def seed() -> Callable[..., None]:
    """Seed users and edges: ``seed(store, users=[...], edges=[(a, b), ...])``."""

    def _seed(
        store: Store,
        *,
        users: list[str] | dict[str, str],
        edges: list[tuple[str, str]] | None = None,
    ) -> None:
        names = users if isinstance(users, dict) else {u: u.title() for u in users}
        for user_id, name in names.items():
            add_user(store, user_id, name)
        for a, b in edges or []:
            add_edge(store, a, b)

    return _seed


@pytest.fixture
def example_store(store: Store, seed: Callable[..., None]) -> Store:
    """alice, bob, carol, dave with edges alice-bob and bob-carol."""
    seed(
        store,
        users={"alice": "Alice", "bob": "Bob", "carol": "Carol", "dave": "Dave"},
        edges=[("alice", "bob"), ("bob", "carol")],
    )
    return store
