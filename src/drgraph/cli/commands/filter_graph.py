"""
Filter Command - Apply the viewer's filters to a resolution report.

Prints a summary of what remains visible, or the annotated graph as JSON
for rendering front ends.
"""

import json
import sys

import click

from ...analysis.filters import apply_filters
from ...core.types import FilterOptions
from ..utils import echo_info, filter_options, open_graph


@click.command("filter")
@click.argument("graph_file", type=click.Path())
@filter_options
@click.option("--json", "json_mode", is_flag=True, help="Output the annotated graph as JSON to stdout")
def filter_graph(graph_file: str, json_mode: bool, options: FilterOptions):
    """
    Apply filters to GRAPH_FILE and report what stays visible.
    """
    graph = open_graph(graph_file)
    if graph is None:
        if json_mode:
            click.echo(json.dumps({
                "meta": {"status": "error"},
                "error": {"message": f"Could not load {graph_file}"},
            }))
        sys.exit(1)

    apply_filters(graph, options)

    if json_mode:
        click.echo(json.dumps({
            "meta": {"status": "success", "options": options.model_dump()},
            "data": graph.to_dict(),
        }))
        return

    stats = graph.get_stats()
    click.echo()
    click.echo(f"📦 {click.style('Dependency Resolution', bold=True)}")
    click.echo("═" * 60)
    if graph.project or graph.configuration:
        click.echo(f"Project {click.style(graph.project, fg='cyan')} "
                   f"configuration {click.style(graph.configuration, fg='cyan')}")
    if graph.description:
        echo_info(graph.description)
    click.echo(f"Root: {click.style(graph.root, fg='green')}")
    click.echo()
    click.echo(f"Nodes: {stats['visible_nodes']}/{stats['total_nodes']} visible")
    click.echo(f"Links: {stats['visible_links']}/{stats['total_links']} visible "
               f"({stats['constraint_links']} constraints)")
    click.echo()
    click.echo("Categories:")
    for category, count in sorted(stats["nodes_by_category"].items()):
        click.echo(f"  {category:<12} {count}")
