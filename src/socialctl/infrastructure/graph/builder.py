"""Adjacency construction from a flat edge list.

Undirected and unweighted: every edge ``(a, b)`` puts ``b`` in ``a``'s
neighbor set and ``a`` in ``b``'s. Only vertices that appear in at least
one edge get an entry; isolated users are simply absent and callers treat
"not in graph" as "no neighbors".
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

type Adjacency = nx.Graph


def build_adjacency(edge_list: Iterable[tuple[str, str]]) -> Adjacency:
    """Build an undirected adjacency snapshot from *edge_list*.

    No filtering and no error conditions. ``nx.Graph`` stores each edge in
    both endpoints' adjacency dicts, so the result is symmetric.
    """
    g: Adjacency = nx.Graph()
    g.add_edges_from(edge_list)
    return g
