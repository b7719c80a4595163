"""ConnectionService — create and remove friendship edges.

Pipeline: VALIDATE (self-loop, both vertices exist) → CANONICALIZE →
CHECK (edge present/absent) → MUTATE → RESPOND.
All steps after the self-loop check run inside one store transaction.
"""

from __future__ import annotations

import logging

from socialctl.domain.edges import canonical_pair, is_self_loop
from socialctl.infrastructure.store import EdgeConflictError
from socialctl.services._helpers import now_iso
from socialctl.services.base import BaseService
from socialctl.services.contracts import (
    ConnectionChangeData,
    ConnectionListData,
    dump_validated,
)
from socialctl.services.result import ErrorCode, ServiceResult
from socialctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class ConnectionService(BaseService):
    """Handles connect/disconnect and the admin edge listing."""

    @traced
    def connect(self, user_a: str, user_b: str) -> ServiceResult:
        """Create the undirected edge between *user_a* and *user_b*.

        Fails with SELF_CONNECTION (before touching the store),
        VERTEX_NOT_FOUND, or EDGE_ALREADY_EXISTS. A duplicate insert that
        races past the existence check is caught by the store's unique
        constraint and reported as EDGE_ALREADY_EXISTS too.
        """
        op = "connect"
        if is_self_loop(user_a, user_b):
            return ServiceResult.failure(
                op,
                ErrorCode.SELF_CONNECTION,
                "Users cannot connect to themselves",
                user_id=user_a,
            )

        first, second = canonical_pair(user_a, user_b)
        try:
            with self._store.transaction() as txn:
                missing = self._missing_vertex(txn, op, user_a, user_b)
                if missing is not None:
                    return missing

                if txn.find_edge(first, second) is not None:
                    return self._already_exists(op, first, second)

                edge = txn.insert_edge(first, second, now_iso())
        except EdgeConflictError:
            logger.info("Concurrent duplicate connect for %s-%s", first, second)
            return self._already_exists(op, first, second)

        logger.info("Connected %s and %s", first, second)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ConnectionChangeData, {**edge, "status": "connection_added"}),
        )

    @traced
    def disconnect(self, user_a: str, user_b: str) -> ServiceResult:
        """Remove the undirected edge between *user_a* and *user_b*.

        Fails with VERTEX_NOT_FOUND or EDGE_NOT_FOUND; the store is left
        unchanged on failure.
        """
        op = "disconnect"
        first, second = canonical_pair(user_a, user_b)

        with self._store.transaction() as txn:
            missing = self._missing_vertex(txn, op, user_a, user_b)
            if missing is not None:
                return missing

            removed = txn.delete_edge(first, second)

        if removed is None:
            return ServiceResult.failure(
                op,
                ErrorCode.EDGE_NOT_FOUND,
                "Connection not found between these users",
                user1_str_id=first,
                user2_str_id=second,
            )

        logger.info("Disconnected %s and %s", first, second)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                ConnectionChangeData, {**removed, "status": "connection_removed"}
            ),
        )

    @traced
    def list_connections(self) -> ServiceResult:
        """All edges with both endpoints' display names, newest first."""
        with self._store.read() as txn:
            items = txn.list_connections()
        return ServiceResult(
            ok=True,
            op="list_connections",
            data=dump_validated(ConnectionListData, {"count": len(items), "items": items}),
        )

    @staticmethod
    def _already_exists(op: str, first: str, second: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            ErrorCode.EDGE_ALREADY_EXISTS,
            "Connection already exists between these users",
            user1_str_id=first,
            user2_str_id=second,
        )
