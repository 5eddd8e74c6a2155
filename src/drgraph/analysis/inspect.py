"""
Node search and details queries backing the viewer's search box and
details panel.
"""

from typing import Any, List

from ..core.graph import ResolutionGraph
from ..core.types import Node, NodeDetails
from .category import classify


def find_nodes(graph: ResolutionGraph, pattern: str) -> List[Node]:
    """
    Visible nodes whose name contains `pattern` (case-sensitive).

    An empty pattern matches nothing; the viewer treats it as "unfocus".
    """
    if not pattern:
        return []
    return [n for n in graph.iter_visible_nodes() if pattern in n.name]


def requested_versions(graph: ResolutionGraph, index: int) -> List[str]:
    """Distinct coordinates originally requested by links targeting the node."""
    requested = {
        graph.links[link_idx].requested
        for link_idx in graph.in_links(index)
        if graph.links[link_idx].requested
    }
    return sorted(requested)


def node_details(graph: ResolutionGraph, node: Any) -> NodeDetails:
    """
    Collect what the details panel shows for a node.

    Requested coordinates come from all incoming links, visible or not.
    """
    index = graph.resolve(node)
    target = graph.nodes[index]
    return NodeDetails(
        name=target.name,
        markers=target.markers,
        requested=requested_versions(graph, index),
        variant=target.resolved_variant_display_name,
        attributes=dict(target.resolved_variant_attributes),
        category=classify(target).label,
        selection_reasons=list(target.selection_reasons),
    )
