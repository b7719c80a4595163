"""SQLAlchemy Core table definitions for the socialctl database.

Two tables: ``users`` (vertices) and ``connections`` (undirected edges
stored in canonical order). The table constraints mirror the service-layer
invariants so the store stays well-formed even under concurrent writers.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("internal_db_id", Integer, primary_key=True, autoincrement=True),
    Column("user_str_id", Text, nullable=False, unique=True),
    Column("display_name", Text, nullable=False),
    Column("email", Text),
    Column("status", Text, nullable=False, default="active", server_default="active"),
    Column("created_at", Text, nullable=False),
    Column("updated_at", Text, nullable=False),
)

connections = Table(
    "connections",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user1_str_id", Text, ForeignKey("users.user_str_id"), nullable=False),
    Column("user2_str_id", Text, ForeignKey("users.user_str_id"), nullable=False),
    Column("created_at", Text, nullable=False),
    # Canonical order is enforced by the store (Python str ordering), not
    # here: a SQL "<" would follow the database collation.
    CheckConstraint("user1_str_id <> user2_str_id", name="connections_no_self_loop"),
    UniqueConstraint("user1_str_id", "user2_str_id", name="connections_pair_key"),
)

# ---------------------------------------------------------------------------
# Indexes for neighbor lookups
# ---------------------------------------------------------------------------

Index("ix_connections_user1", connections.c.user1_str_id)
Index("ix_connections_user2", connections.c.user2_str_id)
Index("ix_users_display_name", users.c.display_name)
