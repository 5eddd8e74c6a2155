"""
Visibility Filter.

Applies the coarse viewer toggles (projects only, show constraints) to a
graph and recomputes the edge-degree counters consumed by the layout.
Every pass rebuilds all flags from scratch.
"""

import logging
from collections import Counter

from ..core.graph import ResolutionGraph
from ..core.types import FilterOptions, NodeType
from .category import classify

logger = logging.getLogger(__name__)


def apply_visibility(graph: ResolutionGraph, options: FilterOptions) -> None:
    """
    Recompute node categories, node/link visibility and degree counters.

    Degree counters count every link, whatever its visibility.
    """
    for node in graph.nodes:
        node.category = classify(node)
        node.visible = True
        if options.projects_only and node.type != NodeType.PROJECT:
            node.visible = False

    incoming: Counter = Counter()
    outgoing: Counter = Counter()
    for link in graph.links:
        link.visible = True
        if not options.show_constraints and link.constraint:
            link.visible = False
        incoming[link.target] += 1
        outgoing[link.source] += 1

    graph.incoming_edge_count = incoming
    graph.outgoing_edge_count = outgoing

    logger.debug(
        f"Visibility pass: {sum(1 for _ in graph.iter_visible_nodes())}/{graph.node_count} nodes, "
        f"{sum(1 for _ in graph.iter_visible_links())}/{graph.link_count} links visible"
    )
