"""Breadth-first traversal over an adjacency snapshot.

Pure functions: no I/O, no shared state. Vertex existence is the caller's
responsibility; a vertex missing from the snapshot is treated as isolated
here, never as an error.
"""

from __future__ import annotations

from collections import deque

from socialctl.infrastructure.graph.builder import Adjacency

UNREACHABLE = -1


def _neighbors(adjacency: Adjacency, vertex: str) -> set[str]:
    if vertex not in adjacency:
        return set()
    return set(adjacency[vertex])


def shortest_path_length(adjacency: Adjacency, source: str, target: str) -> int:
    """Return the edge count of the shortest path, or ``UNREACHABLE``.

    ``source == target`` is answered as ``0`` before any traversal.
    Otherwise BFS from *source*; the first time *target* is dequeued its
    distance is minimal, since the frontier is explored in non-decreasing
    distance order.
    """
    if source == target:
        return 0

    frontier: deque[tuple[str, int]] = deque([(source, 0)])
    visited: set[str] = {source}

    while frontier:
        vertex, distance = frontier.popleft()
        if vertex == target:
            return distance
        for neighbor in _neighbors(adjacency, vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                frontier.append((neighbor, distance + 1))

    return UNREACHABLE


def direct_neighbors(adjacency: Adjacency, vertex: str) -> set[str]:
    """Vertices at distance exactly 1 from *vertex*."""
    return _neighbors(adjacency, vertex)


def second_degree_neighbors(adjacency: Adjacency, vertex: str) -> set[str]:
    """Vertices at distance exactly 2 from *vertex*.

    Union of the neighbors of every direct neighbor, minus *vertex* itself
    and minus the entire distance-1 set, so a mutual friend in a triangle
    never shows up as a friend-of-friend.
    """
    first = _neighbors(adjacency, vertex)
    second: set[str] = set()
    for friend in first:
        second |= _neighbors(adjacency, friend)
    second.discard(vertex)
    return second - first
