"""
Filter composition and focus entry points.

These are the two calls the viewer makes: `apply_filters` whenever a toggle
changes and `compute_focus` whenever a node is selected.
"""

import logging
from typing import Any, Optional

from ..core.graph import ResolutionGraph
from ..core.types import FilterOptions, Predecessors
from .focus import transitive_predecessors
from .shortest_path import apply_shortest_path_filter
from .visibility import apply_visibility

logger = logging.getLogger(__name__)


def apply_filters(
    graph: ResolutionGraph,
    options: Optional[FilterOptions] = None,
    **overrides: bool,
) -> FilterOptions:
    """
    Recompute all derived visibility state of the graph.

    Args:
        graph: Graph to annotate in place.
        options: Filter options; defaults are used when omitted.
        **overrides: Individual option values, e.g. `shortest_path_only=True`.

    Returns:
        FilterOptions: The options that were applied.
    """
    options = options or FilterOptions()
    if overrides:
        options = FilterOptions.model_validate({**options.model_dump(), **overrides})

    apply_visibility(graph, options)
    if options.shortest_path_only:
        apply_shortest_path_filter(graph)
    return options


def compute_focus(graph: ResolutionGraph, node: Any) -> Predecessors:
    """
    Dependency ancestry of `node` over the currently visible links.

    Args:
        node: A `Node`, node id or node index.

    Raises:
        UnknownNodeError: If the node is not part of the graph.
    """
    index = graph.resolve(node)
    predecessors = transitive_predecessors(graph, index)
    logger.debug(
        f"Focus on {graph.nodes[index].id}: {len(predecessors.node_indices)} nodes, "
        f"{len(predecessors.link_indices)} links"
    )
    return predecessors
