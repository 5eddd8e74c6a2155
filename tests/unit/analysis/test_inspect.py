"""Unit tests for node search and details."""

import pytest

from drgraph.analysis.filters import apply_filters
from drgraph.analysis.inspect import find_nodes, node_details, requested_versions
from drgraph.core.errors import UnknownNodeError
from drgraph.graph.loader import build_graph


@pytest.fixture
def detailed_graph():
    return build_graph({
        "root": "app",
        "nodes": [
            {"id": "app", "name": "project :app", "type": "project"},
            {"id": "lib", "name": "project :lib", "type": "project"},
            {
                "id": "guava",
                "name": "com.google.guava:guava:32.1.2-jre",
                "type": "module",
                "forced": True,
                "conflict": True,
                "resolvedVariantDisplayName": "jreRuntimeElements",
                "resolvedVariantAttributes": {
                    "org.gradle.component.category": "library",
                    "org.gradle.usage": "java-runtime",
                },
                "selectionReasons": [
                    {"cause": "REQUESTED", "reason": "requested"},
                    {"cause": "CONFLICT_RESOLUTION", "reason": "between versions 31.0 and 32.1.2"},
                ],
            },
            {"id": "missing", "name": "org.example:missing:1.0", "type": "unresolved"},
        ],
        "links": [
            {"source": "app", "target": "lib"},
            {"source": "app", "target": "guava", "requested": "com.google.guava:guava:31.0"},
            {"source": "lib", "target": "guava", "requested": "com.google.guava:guava:32.1.2-jre"},
            {"source": "lib", "target": "guava", "requested": "com.google.guava:guava:31.0", "constraint": True},
            {"source": "lib", "target": "missing", "requested": "org.example:missing:1.0"},
        ],
    })


class TestFindNodes:
    def test_substring_match(self, detailed_graph):
        apply_filters(detailed_graph)
        assert [n.id for n in find_nodes(detailed_graph, "project")] == ["app", "lib"]

    def test_only_visible_nodes(self, detailed_graph):
        apply_filters(detailed_graph, projects_only=True)
        assert find_nodes(detailed_graph, "guava") == []

    def test_empty_pattern(self, detailed_graph):
        assert find_nodes(detailed_graph, "") == []

    def test_case_sensitive(self, detailed_graph):
        assert find_nodes(detailed_graph, "GUAVA") == []


class TestNodeDetails:
    def test_module_details(self, detailed_graph):
        info = node_details(detailed_graph, "guava")

        assert info.name == "com.google.guava:guava:32.1.2-jre"
        assert info.markers == ["forced", "conflict"]
        assert info.requested == [
            "com.google.guava:guava:31.0",
            "com.google.guava:guava:32.1.2-jre",
        ]
        assert info.variant == "jreRuntimeElements"
        assert info.category == "Library"
        assert info.attributes["org.gradle.usage"] == "java-runtime"
        assert [r.cause for r in info.selection_reasons] == ["REQUESTED", "CONFLICT_RESOLUTION"]

    def test_unresolved_label(self, detailed_graph):
        assert node_details(detailed_graph, "missing").category == "Unresolved dependency"

    def test_requested_skips_empty(self, detailed_graph):
        assert requested_versions(detailed_graph, detailed_graph.index_of("lib")) == []

    def test_to_dict(self, detailed_graph):
        data = node_details(detailed_graph, "guava").to_dict()
        assert data["selection_reasons"][1] == {
            "cause": "CONFLICT_RESOLUTION",
            "reason": "between versions 31.0 and 32.1.2",
        }

    def test_unknown_node(self, detailed_graph):
        with pytest.raises(UnknownNodeError):
            node_details(detailed_graph, "nope")
