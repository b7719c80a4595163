"""Store — repository over the relational users/connections tables.

The Store is the single dependency injected into every service. It owns
the database engine and the graph engine. Data access happens through a
:class:`StoreTransaction` obtained from either:

- :meth:`Store.transaction` — ``engine.begin()``, auto-commit/rollback,
  for mutations.
- :meth:`Store.read` — ``engine.connect()``, for reads.

Connectivity failures are translated once, here, into
:class:`StoreUnavailableError`. Nothing above this layer catches raw
SQLAlchemy errors.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, select, text
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError

from socialctl.domain.edges import canonical_pair
from socialctl.infrastructure.database.engine import init_database
from socialctl.infrastructure.database.schema import connections, users
from socialctl.infrastructure.graph.engine import GraphEngine

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection, Select
    from sqlalchemy.engine import Engine

    from socialctl.config.settings import SocialSettings

logger = logging.getLogger(__name__)


class StoreUnavailableError(RuntimeError):
    """The relational store could not be reached or queried."""


class EdgeConflictError(Exception):
    """Insert violated the unique canonical-pair constraint."""


class UserConflictError(Exception):
    """Insert violated the unique user id constraint."""


@contextmanager
def _translate_errors() -> Iterator[None]:
    """Map driver connectivity failures onto :class:`StoreUnavailableError`."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        logger.warning("Store unavailable: %s", exc.orig or exc)
        raise StoreUnavailableError(str(exc.orig or exc)) from exc


def _user_lookup(user_id: str) -> Select[Any]:
    return select(users.c.user_str_id).where(users.c.user_str_id == user_id)


def _edge_lookup(first: str, second: str) -> Select[Any]:
    return select(connections.c.id).where(
        connections.c.user1_str_id == first,
        connections.c.user2_str_id == second,
    )


def _committed(engine: Engine, stmt: Select[Any]) -> bool:
    """Whether *stmt* matches a row visible to a fresh connection.

    Run after an :class:`IntegrityError`: the failed transaction may be
    unusable, and only a committed duplicate counts as a conflict.
    """
    with engine.connect() as fresh:
        return fresh.execute(stmt).first() is not None


# ---------------------------------------------------------------------------
# StoreTransaction: yielded by transaction() and read()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active connection with the data-access helpers services use.

    Every edge helper canonicalizes its endpoints via
    :func:`canonical_pair`; callers pass ids in any order.
    """

    conn: Connection
    engine: Engine

    # -- users ---------------------------------------------------------

    def vertex_exists(self, user_id: str) -> bool:
        """Whether a user with *user_id* is registered."""
        return self.conn.execute(_user_lookup(user_id)).first() is not None

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        """Fetch one user row by id."""
        row = (
            self.conn.execute(select(users).where(users.c.user_str_id == user_id))
            .mappings()
            .first()
        )
        return dict(row) if row is not None else None

    def get_users(self, user_ids: list[str] | set[str]) -> dict[str, dict[str, Any]]:
        """Fetch user rows for a set of ids, keyed by id."""
        if not user_ids:
            return {}
        rows = (
            self.conn.execute(select(users).where(users.c.user_str_id.in_(list(user_ids))))
            .mappings()
            .all()
        )
        return {str(row["user_str_id"]): dict(row) for row in rows}

    def list_users(self) -> list[dict[str, Any]]:
        """All users, newest first."""
        stmt = select(users).order_by(users.c.created_at.desc(), users.c.internal_db_id.desc())
        return [dict(row) for row in self.conn.execute(stmt).mappings().all()]

    def insert_user(
        self,
        user_id: str,
        display_name: str,
        email: str | None,
        now: str,
    ) -> dict[str, Any]:
        """Insert a user row.

        Raises :class:`UserConflictError` only when a user with *user_id* is
        already committed; any other constraint failure propagates.
        """
        try:
            self.conn.execute(
                insert(users).values(
                    user_str_id=user_id,
                    display_name=display_name,
                    email=email,
                    status="active",
                    created_at=now,
                    updated_at=now,
                )
            )
        except IntegrityError as exc:
            if not _committed(self.engine, _user_lookup(user_id)):
                raise
            raise UserConflictError(user_id) from exc
        user = self.get_user(user_id)
        assert user is not None
        return user

    def count_users(self) -> int:
        return int(self.conn.execute(select(func.count()).select_from(users)).scalar_one())

    # -- edges ---------------------------------------------------------

    def find_edge(self, a: str, b: str) -> dict[str, Any] | None:
        """Look up the canonical edge between *a* and *b*."""
        first, second = canonical_pair(a, b)
        row = (
            self.conn.execute(
                select(connections).where(
                    connections.c.user1_str_id == first,
                    connections.c.user2_str_id == second,
                )
            )
            .mappings()
            .first()
        )
        return dict(row) if row is not None else None

    def insert_edge(self, a: str, b: str, now: str) -> dict[str, Any]:
        """Insert the canonical edge between *a* and *b*.

        Raises :class:`EdgeConflictError` when the canonical pair is already
        committed (a concurrent duplicate insert). Other integrity failures,
        such as an unregistered endpoint, propagate as :class:`IntegrityError`.
        """
        first, second = canonical_pair(a, b)
        try:
            result = self.conn.execute(
                insert(connections).values(
                    user1_str_id=first,
                    user2_str_id=second,
                    created_at=now,
                )
            )
        except IntegrityError as exc:
            if not _committed(self.engine, _edge_lookup(first, second)):
                raise
            raise EdgeConflictError(f"{first}-{second}") from exc
        (edge_id,) = result.inserted_primary_key or (None,)
        return {
            "id": edge_id,
            "user1_str_id": first,
            "user2_str_id": second,
            "created_at": now,
        }

    def delete_edge(self, a: str, b: str) -> dict[str, Any] | None:
        """Delete the canonical edge between *a* and *b*.

        Returns the removed record, or None when no such edge exists.
        """
        existing = self.find_edge(a, b)
        if existing is None:
            return None
        self.conn.execute(delete(connections).where(connections.c.id == existing["id"]))
        return existing

    def list_all_edges(self) -> list[tuple[str, str]]:
        """Full scan of the edge table as ``(user1, user2)`` pairs."""
        rows = self.conn.execute(
            select(connections.c.user1_str_id, connections.c.user2_str_id)
        ).fetchall()
        return [(str(row.user1_str_id), str(row.user2_str_id)) for row in rows]

    def list_connections(self) -> list[dict[str, Any]]:
        """All edges joined with both display names, newest first."""
        u1 = users.alias("u1")
        u2 = users.alias("u2")
        stmt = (
            select(
                connections.c.id,
                connections.c.user1_str_id,
                connections.c.user2_str_id,
                connections.c.created_at,
                u1.c.display_name.label("user1_display_name"),
                u2.c.display_name.label("user2_display_name"),
            )
            .join(u1, connections.c.user1_str_id == u1.c.user_str_id)
            .join(u2, connections.c.user2_str_id == u2.c.user_str_id)
            .order_by(connections.c.created_at.desc(), connections.c.id.desc())
        )
        return [dict(row) for row in self.conn.execute(stmt).mappings().all()]

    def count_edges(self) -> int:
        return int(self.conn.execute(select(func.count()).select_from(connections)).scalar_one())

    def ping(self) -> None:
        """Round-trip a trivial query."""
        self.conn.execute(text("SELECT 1"))


# ---------------------------------------------------------------------------
# Store: the repository
# ---------------------------------------------------------------------------


class Store:
    """Repository encapsulating database and graph access.

    Constructed once per CLI invocation (or once per MCP server) from
    :class:`SocialSettings`. Services receive the Store via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: SocialSettings) -> None:
        self._settings = settings
        with _translate_errors():
            self._engine: Engine = init_database(
                settings.database_url, echo=settings.database.echo
            )
        self._graph = GraphEngine(self.list_all_edges)

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def graph(self) -> GraphEngine:
        """The graph engine (fresh snapshot per call)."""
        return self._graph

    @property
    def settings(self) -> SocialSettings:
        """The resolved settings for this store."""
        return self._settings

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    def list_all_edges(self) -> list[tuple[str, str]]:
        """Edge source for :class:`GraphEngine`: one full scan per call."""
        with self.read() as txn:
            return txn.list_all_edges()

    @contextmanager
    def read(self) -> Iterator[StoreTransaction]:
        """Read-only access on a pooled connection."""
        with _translate_errors(), self._engine.connect() as conn:
            yield StoreTransaction(conn=conn, engine=self._engine)

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Write access in a single DB transaction.

        Commits when the block exits normally, rolls back on any exception
        (including :class:`EdgeConflictError` raised from inside).

        Usage::

            with store.transaction() as txn:
                if txn.find_edge(a, b) is None:
                    txn.insert_edge(a, b, now)
        """
        with _translate_errors(), self._engine.begin() as conn:
            yield StoreTransaction(conn=conn, engine=self._engine)
