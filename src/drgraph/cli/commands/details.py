"""
Details Command - Print the details panel of a node.
"""

import json
import sys

import click

from ...analysis.inspect import node_details
from ...core.errors import UnknownNodeError
from ..utils import echo_error, open_graph


@click.command()
@click.argument("graph_file", type=click.Path())
@click.argument("node_id")
@click.option("--json", "json_mode", is_flag=True, help="Output details as JSON")
def details(graph_file: str, node_id: str, json_mode: bool):
    """
    Show resolution details for NODE_ID.
    """
    graph = open_graph(graph_file)
    if graph is None:
        sys.exit(1)

    try:
        info = node_details(graph, node_id)
    except UnknownNodeError as e:
        echo_error(str(e))
        sys.exit(1)

    if json_mode:
        click.echo(json.dumps(info.to_dict()))
        return

    title = info.name
    if info.markers:
        title += f" ({', '.join(info.markers)})"
    click.echo(click.style(title, bold=True))
    click.echo(f"Category:  {info.category}")
    click.echo(f"Variant:   {info.variant or '-'}")

    if info.requested:
        click.echo("Requested:")
        for coordinate in info.requested:
            click.echo(f"  {coordinate}")

    if info.attributes:
        click.echo("Attributes:")
        for key, value in info.attributes.items():
            click.echo(f"  {key} = {value}")

    if info.selection_reasons:
        click.echo("Selection reasons:")
        for reason in info.selection_reasons:
            click.echo(f"  - {reason.cause}: {reason.reason}")
