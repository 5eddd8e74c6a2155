"""Unit tests for the ResolutionGraph structure."""

import pytest

from drgraph.core.errors import GraphIntegrityError, LoadError, UnknownNodeError
from drgraph.core.graph import ResolutionGraph
from drgraph.core.types import Link, Node


class TestResolutionGraph:
    def test_indices_follow_sequence_order(self, scenario_graph):
        assert [n.index for n in scenario_graph.nodes] == [0, 1, 2, 3]
        assert [l.index for l in scenario_graph.links] == [0, 1, 2, 3]
        assert scenario_graph.index_of("C") == 2
        assert scenario_graph.root_index == 0

    def test_index_of_unknown_node(self, scenario_graph):
        with pytest.raises(UnknownNodeError) as exc_info:
            scenario_graph.index_of("Z")

        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value) == "Unknown node: Z"

    def test_resolve_accepts_node_id_and_index(self, scenario_graph):
        node = scenario_graph.nodes[3]
        assert scenario_graph.resolve(node) == 3
        assert scenario_graph.resolve("D") == 3
        assert scenario_graph.resolve(3) == 3
        with pytest.raises(UnknownNodeError):
            scenario_graph.resolve(4)

    def test_in_and_out_links(self, scenario_graph):
        assert scenario_graph.out_links(0) == [0, 1]
        assert scenario_graph.in_links(3) == [2, 3]
        assert scenario_graph.in_links(0) == []

    def test_dangling_link_rejected(self):
        with pytest.raises(GraphIntegrityError, match="unknown node 'Z'"):
            ResolutionGraph([Node(id="A")], [Link(source="A", target="Z")], root="A")

    def test_duplicate_node_rejected(self):
        with pytest.raises(GraphIntegrityError, match="Duplicate"):
            ResolutionGraph([Node(id="A"), Node(id="A")], [], root="A")

    def test_missing_root_rejected(self):
        with pytest.raises(LoadError, match="Root node"):
            ResolutionGraph([Node(id="A")], [], root="B")

    def test_self_loop_allowed(self):
        graph = ResolutionGraph([Node(id="A")], [Link(source="A", target="A")], root="A")
        assert graph.in_links(0) == [0]
        assert graph.out_links(0) == [0]

    def test_stats(self, scenario_graph):
        stats = scenario_graph.get_stats()
        assert stats["total_nodes"] == 4
        assert stats["total_links"] == 4
        assert stats["constraint_links"] == 1
        assert stats["nodes_by_type"] == {"project": 1, "module": 2, "unresolved": 1}

    def test_to_dict_uses_report_keys(self, scenario_graph):
        data = scenario_graph.to_dict()
        assert data["root"] == "A"
        assert data["project"] == "core"
        assert "resolvedVariantAttributes" in data["nodes"][1]
        assert data["links"][1]["constraint"] is True
