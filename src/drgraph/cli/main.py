"""
drgraph CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import details, filter_graph, focus, search
from .utils import configure_logging


@click.group()
@click.version_option(package_name="drgraph")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """drgraph: Dependency Resolution Graph Explorer.

    Filters and inspects the dependency-resolution reports written by the
    build, one JSON file per project and configuration.

    \b
    Quick Start:
      drgraph filter graphs/core_runtimeClasspath.json --shortest-path
      drgraph focus graphs/core_runtimeClasspath.json org.slf4j:slf4j-api
      drgraph details graphs/core_runtimeClasspath.json org.slf4j:slf4j-api
    """
    configure_logging(verbose)


# Register commands
main.add_command(filter_graph.filter_graph)
main.add_command(focus.focus)
main.add_command(search.search)
main.add_command(details.details)

if __name__ == "__main__":
    main()
