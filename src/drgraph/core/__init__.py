"""
Core components of drgraph.

This package contains the data model, the graph structure and the error types.
"""

from .errors import DrGraphError, GraphIntegrityError, LoadError, UnknownNodeError
from .graph import ResolutionGraph
from .types import Category, FilterOptions, Link, Node, NodeType, Predecessors

__all__ = [
    "Category",
    "DrGraphError",
    "FilterOptions",
    "GraphIntegrityError",
    "Link",
    "LoadError",
    "Node",
    "NodeType",
    "Predecessors",
    "ResolutionGraph",
    "UnknownNodeError",
]
