"""Filtering, traversal and query passes over a resolution graph."""

from .category import classify
from .filters import apply_filters, compute_focus
from .focus import clear_focus, direct_predecessors, mark_focus, transitive_predecessors
from .inspect import find_nodes, node_details
from .shortest_path import ShortestPaths, apply_shortest_path_filter, shortest_paths
from .visibility import apply_visibility

__all__ = [
    "ShortestPaths",
    "apply_filters",
    "apply_shortest_path_filter",
    "apply_visibility",
    "classify",
    "clear_focus",
    "compute_focus",
    "direct_predecessors",
    "find_nodes",
    "mark_focus",
    "node_details",
    "shortest_paths",
    "transitive_predecessors",
]
