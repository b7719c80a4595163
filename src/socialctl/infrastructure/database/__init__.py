"""Relational store engine and schema via SQLAlchemy Core."""

from socialctl.infrastructure.database.engine import create_db_engine, init_database
from socialctl.infrastructure.database.schema import connections, metadata, users

__all__ = [
    "connections",
    "create_db_engine",
    "init_database",
    "metadata",
    "users",
]
