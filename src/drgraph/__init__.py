"""
drgraph: filtering and traversal engine for dependency-resolution graphs.

Load a resolution report, apply the viewer's filters and query a node's
dependency ancestry:

    graph = load_graph("graphs/core_runtimeClasspath.json")
    apply_filters(graph, shortest_path_only=True)
    focus = compute_focus(graph, "org.slf4j:slf4j-api")
"""

from .analysis import apply_filters, compute_focus, find_nodes, node_details
from .core import (
    Category,
    FilterOptions,
    GraphIntegrityError,
    LoadError,
    ResolutionGraph,
    UnknownNodeError,
)
from .graph import build_graph, graph_file_for, load_graph

__version__ = "0.1.0"

__all__ = [
    "Category",
    "FilterOptions",
    "GraphIntegrityError",
    "LoadError",
    "ResolutionGraph",
    "UnknownNodeError",
    "apply_filters",
    "build_graph",
    "compute_focus",
    "find_nodes",
    "graph_file_for",
    "load_graph",
    "node_details",
]
