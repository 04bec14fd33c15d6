"""Graph package - kinship graph and path search."""

from community_roots.graph.models import Edge, PathStep, Relation
from community_roots.graph.kinship_graph import KinshipGraph, neighbors
from community_roots.graph.path_resolver import find_path

__all__ = [
    "Edge",
    "PathStep",
    "Relation",
    "KinshipGraph",
    "neighbors",
    "find_path",
]
