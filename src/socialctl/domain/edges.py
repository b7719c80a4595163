"""Edge canonicalization for undirected connections.

INVARIANT: An edge is stored once, with the lexicographically smaller
user id in the first slot. ``(a, b)`` and ``(b, a)`` normalize to the same
pair, so uniqueness and lookup are plain equality checks.
INVARIANT: No self-loops, so ``first != second``.
"""

from __future__ import annotations

from typing import NamedTuple


class EdgeKey(NamedTuple):
    """Canonically ordered endpoints of an undirected edge."""

    first: str
    second: str


def canonical_pair(a: str, b: str) -> EdgeKey:
    """Return ``(min, max)`` of two user ids.

    The single canonicalization point: insert, lookup, and delete paths
    all go through here.

    Examples:
        >>> canonical_pair("bob", "alice")
        EdgeKey(first='alice', second='bob')
        >>> canonical_pair("alice", "bob")
        EdgeKey(first='alice', second='bob')
    """
    if a <= b:
        return EdgeKey(a, b)
    return EdgeKey(b, a)


def is_self_loop(a: str, b: str) -> bool:
    """Whether *a* and *b* name the same vertex."""
    return a == b
