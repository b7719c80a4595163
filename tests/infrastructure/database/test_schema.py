"""Tests for table constraints on users and connections."""

from __future__ import annotations

import pytest
from sqlalchemy import insert, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from socialctl.infrastructure.database.schema import connections, users

NOW = "2026-01-01T00:00:00+00:00"


def _add_users(engine: Engine, *ids: str) -> None:
    with engine.begin() as conn:
        for uid in ids:
            conn.execute(
                insert(users).values(
                    user_str_id=uid,
                    display_name=uid.title(),
                    created_at=NOW,
                    updated_at=NOW,
                )
            )


def _add_edge(engine: Engine, first: str, second: str) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(connections).values(user1_str_id=first, user2_str_id=second, created_at=NOW)
        )


class TestUsersTable:
    def test_user_id_unique(self, db_engine: Engine) -> None:
        _add_users(db_engine, "alice")
        with pytest.raises(IntegrityError):
            _add_users(db_engine, "alice")

    def test_status_defaults_active(self, db_engine: Engine) -> None:
        _add_users(db_engine, "alice")
        with db_engine.connect() as conn:
            row = conn.execute(users.select()).mappings().one()
        assert row["status"] == "active"

    def test_display_name_index(self, db_engine: Engine) -> None:
        names = {ix["name"] for ix in inspect(db_engine).get_indexes("users")}
        assert "ix_users_display_name" in names


class TestConnectionsTable:
    def test_ordered_pair_accepted(self, db_engine: Engine) -> None:
        _add_users(db_engine, "alice", "bob")
        _add_edge(db_engine, "alice", "bob")

    def test_mixed_case_pair_accepted(self, db_engine: Engine) -> None:
        # "Bob" < "alice" in Python; the table must not impose its own order.
        _add_users(db_engine, "alice", "Bob")
        _add_edge(db_engine, "Bob", "alice")

    def test_self_loop_rejected(self, db_engine: Engine) -> None:
        _add_users(db_engine, "alice")
        with pytest.raises(IntegrityError):
            _add_edge(db_engine, "alice", "alice")

    def test_duplicate_rejected(self, db_engine: Engine) -> None:
        _add_users(db_engine, "alice", "bob")
        _add_edge(db_engine, "alice", "bob")
        with pytest.raises(IntegrityError):
            _add_edge(db_engine, "alice", "bob")

    def test_unknown_user_rejected(self, db_engine: Engine) -> None:
        _add_users(db_engine, "alice")
        with pytest.raises(IntegrityError):
            _add_edge(db_engine, "alice", "zed")

    def test_endpoint_indexes(self, db_engine: Engine) -> None:
        names = {ix["name"] for ix in inspect(db_engine).get_indexes("connections")}
        assert {"ix_connections_user1", "ix_connections_user2"} <= names
