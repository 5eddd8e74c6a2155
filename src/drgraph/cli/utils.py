"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the commands:
formatted printing, graph loading with user-facing errors, and the shared
filter flags.
"""

import functools
import logging
from pathlib import Path
from typing import Callable, Optional

import click

from ..core.errors import LoadError
from ..core.graph import ResolutionGraph
from ..core.types import FilterOptions
from ..graph.loader import load_graph


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    """Route library debug logging to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def open_graph(graph_file: str) -> Optional[ResolutionGraph]:
    """
    Load a resolution graph, reporting failures to the user.

    Returns:
        Optional[ResolutionGraph]: The graph, or None if loading failed.
    """
    path = Path(graph_file)
    try:
        return load_graph(path)
    except LoadError as e:
        echo_error(f"Failed to load graph: {e}")
        if not path.exists():
            click.echo("Reports are written to graphs/<project>_<configuration>.json by the build.")
        return None


def filter_options(func: Callable) -> Callable:
    """Attach the viewer's filter toggles and pass them as a FilterOptions."""

    @click.option("--projects-only", is_flag=True, help="Only show project components")
    @click.option("--hide-constraints", is_flag=True, help="Hide constraint links")
    @click.option("--shortest-path", is_flag=True, help="Only keep shortest dependency paths from the root")
    @functools.wraps(func)
    def wrapper(*args, projects_only: bool, hide_constraints: bool, shortest_path: bool, **kwargs):
        kwargs["options"] = FilterOptions(
            projects_only=projects_only,
            show_constraints=not hide_constraints,
            shortest_path_only=shortest_path,
        )
        return func(*args, **kwargs)

    return wrapper
