"""
Shortest Path Filter.

Prunes the visible links down to those lying on a shortest dependency path
from the root to some node. Distances use unit weights and ignore
constraint links: a constraint alone never makes a component reachable.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.graph import ResolutionGraph

logger = logging.getLogger(__name__)


@dataclass
class ShortestPaths:
    """
    Single-source shortest path result, indexed by node position.

    Attributes:
        source: Index of the root node.
        dist: Hop count from the root, or None when unreachable.
        prev: Predecessor on the shortest path, or None for the root and
            unreachable nodes.
    """

    source: int
    dist: List[Optional[int]]
    prev: List[Optional[int]]

    def is_reachable(self, index: int) -> bool:
        return self.dist[index] is not None

    def path_to(self, index: int) -> List[int]:
        """Node indices from the root to `index`; `[index]` when unreachable."""
        return reconstruct_path(self.prev, index)

    def tree_edges(self) -> Set[Tuple[int, int]]:
        """(source, target) index pairs appearing in any reconstructed path."""
        # Consecutive pairs of every path are exactly the (prev[x], x) pairs
        return {(p, idx) for idx, p in enumerate(self.prev) if p is not None}


def reconstruct_path(prev: List[Optional[int]], index: int) -> List[int]:
    path = [index]
    current = prev[index]
    while current is not None:
        path.append(current)
        current = prev[current]
    path.reverse()
    return path


def shortest_paths(graph: ResolutionGraph) -> ShortestPaths:
    """
    Dijkstra from the root over non-constraint links.

    Nodes are settled in (distance, index) order, so among nodes at equal
    distance the lowest index relaxes its successors first and wins ties
    for `prev`.
    """
    count = graph.node_count
    dist: List[Optional[int]] = [None] * count
    prev: List[Optional[int]] = [None] * count
    settled = [False] * count

    root = graph.root_index
    dist[root] = 0
    heap: List[Tuple[int, int]] = [(0, root)]

    while heap:
        d, current = heapq.heappop(heap)
        if settled[current]:
            continue
        settled[current] = True

        for link_idx in graph.out_links(current):
            link = graph.links[link_idx]
            if link.constraint:
                continue
            target = graph.target_index(link)
            candidate = d + 1
            if dist[target] is None or candidate < dist[target]:
                dist[target] = candidate
                prev[target] = current
                heapq.heappush(heap, (candidate, target))

    return ShortestPaths(source=root, dist=dist, prev=prev)


def apply_shortest_path_filter(graph: ResolutionGraph) -> None:
    """
    Hide every visible link that is not on a shortest path from the root.

    Must run after the visibility pass. Links are only ever hidden here,
    never shown.
    """
    paths = shortest_paths(graph)
    keep = paths.tree_edges()

    hidden = 0
    for link in graph.links:
        if not link.visible:
            continue
        if (graph.source_index(link), graph.target_index(link)) not in keep:
            link.visible = False
            hidden += 1

    unreachable = sum(1 for d in paths.dist if d is None)
    logger.debug(f"Shortest path pass: hid {hidden} links, {unreachable} nodes unreachable from root")
