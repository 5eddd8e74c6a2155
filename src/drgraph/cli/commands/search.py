"""
Search Command - Find visible nodes by name.
"""

import sys

import click

from ...analysis.filters import apply_filters
from ...analysis.inspect import find_nodes
from ...core.types import FilterOptions
from ..utils import echo_warning, filter_options, open_graph


@click.command()
@click.argument("graph_file", type=click.Path())
@click.argument("pattern")
@filter_options
def search(graph_file: str, pattern: str, options: FilterOptions):
    """
    List visible nodes whose name contains PATTERN.
    """
    graph = open_graph(graph_file)
    if graph is None:
        sys.exit(1)

    apply_filters(graph, options)
    matches = find_nodes(graph, pattern)

    if not matches:
        echo_warning(f"No visible node matches '{pattern}'")
        return

    click.echo(f"{len(matches)} match(es):")
    for node in matches:
        click.echo(f"  {click.style(node.id, fg='cyan')}  [{node.category.value}]")
