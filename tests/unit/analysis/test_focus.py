"""Unit tests for focus traversal."""

import copy

from drgraph.analysis.focus import (
    clear_focus,
    direct_predecessors,
    mark_focus,
    transitive_predecessors,
)
from drgraph.analysis.visibility import apply_visibility
from drgraph.core.types import FilterOptions
from drgraph.graph.loader import build_graph


class TestDirectPredecessors:
    def test_returns_source_nodes_and_links(self, scenario_graph):
        preds = direct_predecessors(scenario_graph, 3)

        assert preds.node_indices == {1, 2}
        assert preds.link_indices == {2, 3}

    def test_skips_hidden_links(self, scenario_graph):
        scenario_graph.links[3].visible = False
        preds = direct_predecessors(scenario_graph, 3)

        assert preds.node_indices == {1}
        assert preds.link_indices == {2}

    def test_root_has_none(self, scenario_graph):
        preds = direct_predecessors(scenario_graph, 0)
        assert not preds.node_indices and not preds.link_indices


class TestTransitivePredecessors:
    def test_all_visible(self, scenario_graph):
        preds = transitive_predecessors(scenario_graph, 3)

        assert preds.node_indices == {0, 1, 2, 3}
        assert preds.link_indices == {0, 1, 2, 3}

    def test_contains_seed(self, scenario_graph):
        for node in scenario_graph.nodes:
            assert node.index in transitive_predecessors(scenario_graph, node.index).node_indices

    def test_respects_visibility(self, scenario_graph):
        apply_visibility(scenario_graph, FilterOptions(show_constraints=False))
        preds = transitive_predecessors(scenario_graph, 2)

        assert preds.node_indices == {2}
        assert preds.link_indices == set()

    def test_cycle_terminates(self, document_factory):
        graph = build_graph(document_factory(
            nodes=[("A", "project", None), ("B", "module", None), ("C", "module", None)],
            links=[("A", "B", False), ("B", "C", False), ("C", "B", False)],
        ))
        preds = transitive_predecessors(graph, 2)

        assert preds.node_indices == {0, 1, 2}
        assert preds.link_indices == {0, 1, 2}

    def test_self_loop(self, document_factory):
        graph = build_graph(document_factory(
            nodes=[("A", "project", None)],
            links=[("A", "A", False)],
        ))
        preds = transitive_predecessors(graph, 0)

        assert preds.node_indices == {0}
        assert preds.link_indices == {0}

    def test_stable_and_read_only(self, scenario_graph):
        before = copy.deepcopy([(n.visible, n.focus) for n in scenario_graph.nodes])
        first = transitive_predecessors(scenario_graph, 3)
        second = transitive_predecessors(scenario_graph, 3)

        assert first == second
        assert [(n.visible, n.focus) for n in scenario_graph.nodes] == before


class TestFocusFlags:
    def test_mark_and_clear(self, scenario_graph):
        scenario_graph.links[3].visible = False
        mark_focus(scenario_graph, transitive_predecessors(scenario_graph, 3))

        assert [n.focus for n in scenario_graph.nodes] == [True, True, False, True]
        assert [l.focus for l in scenario_graph.links] == [True, False, True, False]

        clear_focus(scenario_graph)
        assert not any(n.focus for n in scenario_graph.nodes)
        assert not any(l.focus for l in scenario_graph.links)
