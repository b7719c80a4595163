"""GraphEngine — per-query adjacency snapshots built from the edge store.

Rebuilt on every call with no cross-request cache. Each query reads the
full edge list and traverses its own private graph.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from socialctl.infrastructure.graph.builder import Adjacency, build_adjacency

logger = logging.getLogger(__name__)

type EdgeSource = Callable[[], Iterable[tuple[str, str]]]


class GraphEngine:
    """Snapshot factory over an edge source (normally ``Store.list_all_edges``)."""

    def __init__(self, edge_source: EdgeSource) -> None:
        self._edge_source = edge_source

    def snapshot(self, source: EdgeSource | None = None) -> Adjacency:
        """Read all edges and build a fresh adjacency graph.

        *source* overrides the default edge source for this call, e.g. a
        caller's open ``StoreTransaction.list_all_edges``.
        """
        g = build_adjacency((source or self._edge_source)())
        logger.debug(
            "Built graph snapshot: %d vertices, %d edges",
            g.number_of_nodes(),
            g.number_of_edges(),
        )
        return g
