"""
Resolution Graph backed by rustworkx.

It manages:
- The fixed node and link sequences of one resolution report. A node's or
  link's position is its index for the lifetime of the graph.
- The map between string node ids and integer indices, built once.
- A rustworkx adjacency mirror whose node index equals the node's position
  and whose edge payload is the link index, for in/out edge queries.
- Edge-degree counters, recomputed by the visibility pass.
"""

import logging
from collections import Counter, defaultdict
from typing import Any, Dict, Iterable, Iterator, List, Set

import rustworkx as rx

from .errors import GraphIntegrityError, LoadError, UnknownNodeError
from .types import Link, Node

logger = logging.getLogger(__name__)


class ResolutionGraph:
    """
    Dependency-resolution graph with immutable topology.

    Features:
    - O(1) node lookup via the id-to-index map
    - Integer-indexed adjacency for the filtering and focus passes
    - In-place derived annotations (`visible`, `category`, `focus`)
    """

    def __init__(
        self,
        nodes: Iterable[Node],
        links: Iterable[Link],
        root: str,
        project: str = "",
        configuration: str = "",
        description: str = "",
    ):
        self.project = project
        self.configuration = configuration
        self.description = description
        self.nodes: List[Node] = list(nodes)
        self.links: List[Link] = list(links)
        self.root = root

        self._id_to_idx: Dict[str, int] = {}
        for idx, node in enumerate(self.nodes):
            if node.id in self._id_to_idx:
                raise GraphIntegrityError(f"Duplicate node id '{node.id}'")
            node.index = idx
            self._id_to_idx[node.id] = idx

        if root not in self._id_to_idx:
            raise LoadError(f"Root node '{root}' is not part of the graph")

        self._graph = rx.PyDiGraph(multigraph=True)
        self._graph.add_nodes_from(list(range(len(self.nodes))))
        for idx, link in enumerate(self.links):
            link.index = idx
            u = self._id_to_idx.get(link.source)
            v = self._id_to_idx.get(link.target)
            if u is None or v is None:
                missing = link.source if u is None else link.target
                raise GraphIntegrityError(
                    f"Link {link.source} -> {link.target} references unknown node '{missing}'"
                )
            self._graph.add_edge(u, v, idx)

        self.incoming_edge_count: Dict[str, int] = Counter()
        self.outgoing_edge_count: Dict[str, int] = Counter()

        logger.debug(
            f"Built graph for {project or '?'}:{configuration or '?'} "
            f"({len(self.nodes)} nodes, {len(self.links)} links)"
        )

    # =========================================================================
    # Lookup
    # =========================================================================

    def index_of(self, node_id: str) -> int:
        """Position of the node with the given id."""
        try:
            return self._id_to_idx[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def get_node(self, node_id: str) -> Node:
        return self.nodes[self.index_of(node_id)]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    @property
    def root_index(self) -> int:
        return self._id_to_idx[self.root]

    def source_index(self, link: Link) -> int:
        return self._id_to_idx[link.source]

    def target_index(self, link: Link) -> int:
        return self._id_to_idx[link.target]

    def resolve(self, node: Any) -> int:
        """
        Normalize a node reference to its index.

        Accepts a `Node`, a node id or an index.
        """
        if isinstance(node, Node):
            node = node.id
        if isinstance(node, bool):
            raise UnknownNodeError(str(node))
        if isinstance(node, int):
            if 0 <= node < len(self.nodes):
                return node
            raise UnknownNodeError(str(node))
        return self.index_of(node)

    # =========================================================================
    # Adjacency
    # =========================================================================

    def in_links(self, index: int) -> List[int]:
        """Indices of links whose target is the node at `index`, in link order."""
        return sorted(link_idx for _, _, link_idx in self._graph.in_edges(index))

    def out_links(self, index: int) -> List[int]:
        """Indices of links whose source is the node at `index`, in link order."""
        return sorted(link_idx for _, _, link_idx in self._graph.out_edges(index))

    def degree(self, node_id: str) -> int:
        """Incoming plus outgoing link count, as of the last visibility pass."""
        return self.incoming_edge_count.get(node_id, 0) + self.outgoing_edge_count.get(node_id, 0)

    # =========================================================================
    # Iteration
    # =========================================================================

    def iter_visible_nodes(self) -> Iterator[Node]:
        return (n for n in self.nodes if n.visible)

    def iter_visible_links(self) -> Iterator[Link]:
        return (link for link in self.links if link.visible)

    def visible_link_indices(self) -> Set[int]:
        return {link.index for link in self.links if link.visible}

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def link_count(self) -> int:
        return len(self.links)

    # =========================================================================
    # Export
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        nodes_by_type: Dict[str, int] = defaultdict(int)
        nodes_by_category: Dict[str, int] = defaultdict(int)
        for node in self.nodes:
            nodes_by_type[node.type.value] += 1
            nodes_by_category[node.category.value] += 1

        return {
            "total_nodes": self.node_count,
            "total_links": self.link_count,
            "visible_nodes": sum(1 for _ in self.iter_visible_nodes()),
            "visible_links": sum(1 for _ in self.iter_visible_links()),
            "constraint_links": sum(1 for link in self.links if link.constraint),
            "nodes_by_type": dict(nodes_by_type),
            "nodes_by_category": dict(nodes_by_category),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project": self.project,
            "configuration": self.configuration,
            "description": self.description,
            "root": self.root,
            "nodes": [
                {**n.model_dump(mode="json", by_alias=True), "degree": self.degree(n.id)}
                for n in self.nodes
            ],
            "links": [link.model_dump(mode="json", by_alias=True) for link in self.links],
            "stats": self.get_stats(),
        }
