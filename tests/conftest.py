"""Shared fixtures: small resolution reports in the build's JSON format."""

import json

import pytest

from drgraph.graph.loader import build_graph


def make_document(nodes, links, root="A"):
    """Compact report builder: nodes as (id, type, category), links as (src, dst, constraint)."""
    return {
        "project": "core",
        "configuration": "runtimeClasspath",
        "description": "Runtime classpath of the core project",
        "root": root,
        "nodes": [
            {
                "id": node_id,
                "name": node_id,
                "type": node_type,
                "resolvedVariantAttributes": (
                    {"org.gradle.component.category": category} if category else {}
                ),
            }
            for node_id, node_type, category in nodes
        ],
        "links": [
            {
                "source": src,
                "target": dst,
                "constraint": constraint,
                "depth": 0,
                "requested": f"{dst}:1.0",
            }
            for src, dst, constraint in links
        ],
    }


@pytest.fixture
def scenario_document():
    """
    A(root) -> B -> D, A -(constraint)-> C -> D.

    Link indices: 0 A->B, 1 A->C, 2 B->D, 3 C->D.
    """
    return make_document(
        nodes=[
            ("A", "project", None),
            ("B", "module", "library"),
            ("C", "module", "platform"),
            ("D", "unresolved", None),
        ],
        links=[
            ("A", "B", False),
            ("A", "C", True),
            ("B", "D", False),
            ("C", "D", False),
        ],
    )


@pytest.fixture
def scenario_graph(scenario_document):
    return build_graph(scenario_document)


@pytest.fixture
def graph_file(tmp_path, scenario_document):
    path = tmp_path / "core_runtimeClasspath.json"
    path.write_text(json.dumps(scenario_document))
    return path


@pytest.fixture
def document_factory():
    return make_document
