"""
Focus Command - Show the dependency ancestry of a node.

Renders the focus closure as a tree rooted at the selected node, walking
visible links backwards towards the resolution root.
"""

from __future__ import annotations

import json
import sys
from typing import Set

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...analysis.filters import apply_filters, compute_focus
from ...core.errors import UnknownNodeError
from ...core.graph import ResolutionGraph
from ...core.types import Category, FilterOptions, Predecessors
from ..utils import echo_error, filter_options, open_graph

console = Console()

CATEGORY_STYLES = {
    Category.UNRESOLVED: "red",
    Category.LIBRARY: "cyan",
    Category.PLATFORM: "yellow",
    Category.UNKNOWN: "white",
}


@click.command()
@click.argument("graph_file", type=click.Path())
@click.argument("node_id")
@filter_options
@click.option("--json", "json_mode", is_flag=True, help="Output node and link ids as JSON")
def focus(graph_file: str, node_id: str, json_mode: bool, options: FilterOptions):
    """
    Show everything NODE_ID is pulled in by.
    """
    graph = open_graph(graph_file)
    if graph is None:
        sys.exit(1)

    apply_filters(graph, options)
    try:
        predecessors = compute_focus(graph, node_id)
    except UnknownNodeError as e:
        echo_error(str(e))
        sys.exit(1)

    if json_mode:
        click.echo(json.dumps({
            "nodes": [graph.nodes[i].id for i in sorted(predecessors.node_indices)],
            "links": [
                {"source": graph.links[i].source, "target": graph.links[i].target}
                for i in sorted(predecessors.link_indices)
            ],
        }))
        return

    console.print(build_focus_tree(graph, graph.index_of(node_id), predecessors))
    console.print(
        f"[dim]{len(predecessors.node_indices)} nodes, "
        f"{len(predecessors.link_indices)} links in focus[/dim]"
    )


def _label(graph: ResolutionGraph, index: int) -> str:
    node = graph.nodes[index]
    style = CATEGORY_STYLES.get(node.category, "white")
    label = f"[{style}]{escape(node.name or node.id)}[/{style}]"
    if index == graph.root_index:
        label = f"[bold]{label}[/bold] [dim](root)[/dim]"
    if node.markers:
        label += f" [magenta]{', '.join(node.markers)}[/magenta]"
    return label


def build_focus_tree(graph: ResolutionGraph, index: int, predecessors: Predecessors) -> Tree:
    """Tree of focus links, each node expanded once; repeats are marked."""
    tree = Tree(f"🎯 {_label(graph, index)}")
    expanded: Set[int] = {index}
    stack = [(index, tree)]

    while stack:
        current, branch = stack.pop()
        for link_idx in graph.in_links(current):
            if link_idx not in predecessors.link_indices:
                continue
            link = graph.links[link_idx]
            source = graph.source_index(link)
            text = _label(graph, source)
            if link.requested:
                text += f" [dim]requests {escape(link.requested)}[/dim]"
            if link.constraint:
                text += " [dim](constraint)[/dim]"
            if source in expanded:
                branch.add(f"{text} [dim]…[/dim]")
                continue
            expanded.add(source)
            stack.append((source, branch.add(text)))

    return tree
