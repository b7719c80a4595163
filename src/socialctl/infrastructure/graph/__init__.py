"""Graph snapshot construction and BFS traversal."""

from socialctl.infrastructure.graph.builder import Adjacency, build_adjacency
from socialctl.infrastructure.graph.engine import GraphEngine
from socialctl.infrastructure.graph.traversal import (
    UNREACHABLE,
    direct_neighbors,
    second_degree_neighbors,
    shortest_path_length,
)

__all__ = [
    "UNREACHABLE",
    "Adjacency",
    "GraphEngine",
    "build_adjacency",
    "direct_neighbors",
    "second_degree_neighbors",
    "shortest_path_length",
]
