"""QueryService — degree of separation and friend neighborhoods.

Every query follows snapshot-then-traverse on a single read connection:
confirm the users exist, build a fresh adjacency graph from the full edge
list, run BFS, then shape the result. Nothing is cached between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from socialctl.infrastructure.graph.traversal import (
    UNREACHABLE,
    direct_neighbors,
    second_degree_neighbors,
    shortest_path_length,
)
from socialctl.services._helpers import by_display_name
from socialctl.services.base import BaseService
from socialctl.services.contracts import DegreeResultData, FriendsResultData, dump_validated
from socialctl.services.result import ServiceResult
from socialctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from collections.abc import Callable

    from socialctl.infrastructure.graph.builder import Adjacency
    from socialctl.infrastructure.store import StoreTransaction

NOT_CONNECTED = "not_connected"


class QueryService(BaseService):
    """Handles read-only graph queries."""

    def _snapshot(self, txn: StoreTransaction) -> Adjacency:
        with trace_span("build_graph") as span:
            g = self._store.graph.snapshot(txn.list_all_edges)
            if span:
                span.annotate("vertices", g.number_of_nodes())
                span.annotate("edges", g.number_of_edges())
        return g

    # ------------------------------------------------------------------
    # degree: shortest-path length
    # ------------------------------------------------------------------

    @traced
    def degree(self, from_user_id: str, to_user_id: str) -> ServiceResult:
        """Degree of separation between two users.

        ``0`` for the same user, ``-1`` with ``message="not_connected"``
        when no path exists. Unreachable is a successful result; only an
        unknown user is an error.
        """
        op = "degree"
        payload: dict[str, object] = {"from_user_id": from_user_id, "to_user_id": to_user_id}
        with self._store.read() as txn:
            missing = self._missing_vertex(txn, op, from_user_id, to_user_id)
            if missing is not None:
                return missing
            g = self._snapshot(txn) if from_user_id != to_user_id else None

        if g is None:
            payload["degree"] = 0
        else:
            with trace_span("bfs"):
                distance = shortest_path_length(g, from_user_id, to_user_id)
            payload["degree"] = distance
            if distance == UNREACHABLE:
                payload["message"] = NOT_CONNECTED

        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(DegreeResultData, payload, exclude_none=True),
        )

    # ------------------------------------------------------------------
    # friends / friends_of_friends: distance-1 and distance-2 sets
    # ------------------------------------------------------------------

    @traced
    def friends(self, user_id: str) -> ServiceResult:
        """Direct friends of *user_id*, ordered by display name."""
        return self._neighborhood("friends", user_id, direct_neighbors)

    @traced
    def friends_of_friends(self, user_id: str) -> ServiceResult:
        """Users exactly two hops from *user_id*, ordered by display name.

        Direct friends and the user themself are never included.
        """
        return self._neighborhood("friends_of_friends", user_id, second_degree_neighbors)

    def _neighborhood(
        self,
        op: str,
        user_id: str,
        select_ids: Callable[[Adjacency, str], set[str]],
    ) -> ServiceResult:
        with self._store.read() as txn:
            missing = self._missing_vertex(txn, op, user_id)
            if missing is not None:
                return missing
            g = self._snapshot(txn)
            with trace_span("traverse") as span:
                ids = select_ids(g, user_id)
                if span:
                    span.annotate("found", len(ids))
            rows = txn.get_users(ids)

        items = by_display_name(
            [
                {"id": uid, "display_name": str(row["display_name"])}
                for uid, row in rows.items()
            ]
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                FriendsResultData,
                {"user_id": user_id, "count": len(items), "items": items},
            ),
        )
