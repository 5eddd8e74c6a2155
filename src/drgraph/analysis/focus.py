"""
Focus Traversal.

Computes the upstream dependency ancestry of a node over the currently
visible links. The highlight layer shows members of the closure at full
opacity and dims everything else.
"""

import logging
from collections import deque

from ..core.graph import ResolutionGraph
from ..core.types import Predecessors

logger = logging.getLogger(__name__)


def direct_predecessors(graph: ResolutionGraph, index: int) -> Predecessors:
    """Visible links targeting the node, and the nodes they come from."""
    result = Predecessors()
    for link_idx in graph.in_links(index):
        link = graph.links[link_idx]
        if link.visible:
            result.node_indices.add(graph.source_index(link))
            result.link_indices.add(link_idx)
    return result


def transitive_predecessors(graph: ResolutionGraph, index: int) -> Predecessors:
    """
    Breadth-first closure of `direct_predecessors`, seeded with the node itself.

    Only reads the graph; cycles terminate because a node is enqueued at
    most once.
    """
    result = Predecessors(node_indices={index})
    queue = deque([index])

    while queue:
        current = queue.popleft()
        direct = direct_predecessors(graph, current)
        for pred in sorted(direct.node_indices):
            if pred not in result.node_indices:
                result.node_indices.add(pred)
                queue.append(pred)
        result.link_indices |= direct.link_indices

    return result


def mark_focus(graph: ResolutionGraph, predecessors: Predecessors) -> None:
    """Set `focus` on every node and link according to the closure."""
    for node in graph.nodes:
        node.focus = node.index in predecessors.node_indices
    for link in graph.links:
        link.focus = link.index in predecessors.link_indices


def clear_focus(graph: ResolutionGraph) -> None:
    for node in graph.nodes:
        node.focus = False
    for link in graph.links:
        link.focus = False
