"""Integration workflow tests — multi-step scenarios spanning multiple services.

These exercise the interplay of registration, edge mutation, and graph
queries: every query must observe the store as of its own call.
"""

from __future__ import annotations

from collections.abc import Callable

from socialctl.infrastructure.store import Store
from socialctl.services.connection import ConnectionService
from socialctl.services.health import HealthService
from socialctl.services.query import QueryService
from socialctl.services.users import UserService


class TestExampleGraph:
    """alice - bob - carol, with dave isolated."""

    def test_example_answers(self, example_store: Store) -> None:
        q = QueryService(example_store)
        assert q.degree("alice", "carol").data["degree"] == 2
        assert q.degree("alice", "dave").data == {
            "from_user_id": "alice",
            "to_user_id": "dave",
            "degree": -1,
            "message": "not_connected",
        }
        assert [i["id"] for i in q.friends("bob").data["items"]] == ["alice", "carol"]
        assert [i["id"] for i in q.friends_of_friends("alice").data["items"]] == ["carol"]

    def test_health_counts_follow_mutations(self, example_store: Store) -> None:
        assert HealthService(example_store).check().data["connections"] == 2
        ConnectionService(example_store).disconnect("alice", "bob")
        assert HealthService(example_store).check().data["connections"] == 1


class TestGrowAndShrink:
    def test_bridge_joins_components(self, store: Store, seed: Callable[..., None]) -> None:
        seed(
            store,
            users=["alice", "bob", "carol", "dave"],
            edges=[("alice", "bob"), ("carol", "dave")],
        )
        q = QueryService(store)
        conns = ConnectionService(store)
        assert q.degree("alice", "dave").data["degree"] == -1

        assert conns.connect("carol", "bob").ok
        assert q.degree("alice", "dave").data["degree"] == 3
        assert [i["id"] for i in q.friends_of_friends("alice").data["items"]] == ["carol"]

        assert conns.disconnect("bob", "carol").ok
        assert q.degree("dave", "alice").data["degree"] == -1
        assert q.friends_of_friends("alice").data["count"] == 0

    def test_new_user_starts_isolated(self, example_store: Store) -> None:
        assert UserService(example_store).register("erin", "Erin").ok
        q = QueryService(example_store)
        assert q.friends("erin").data["count"] == 0
        assert q.degree("erin", "alice").data["degree"] == -1
        assert ConnectionService(example_store).connect("erin", "carol").ok
        assert q.degree("erin", "alice").data["degree"] == 3

    def test_adjacency_symmetric_after_mutations(
        self, store: Store, seed: Callable[..., None]
    ) -> None:
        seed(
            store,
            users=["alice", "bob", "carol", "dave"],
            edges=[("dave", "alice"), ("carol", "bob"), ("bob", "alice"), ("dave", "carol")],
        )
        ConnectionService(store).disconnect("carol", "dave")
        q = QueryService(store)
        for uid in ("alice", "bob", "carol", "dave"):
            for friend in q.friends(uid).data["items"]:
                back = {i["id"] for i in q.friends(friend["id"]).data["items"]}
                assert uid in back
