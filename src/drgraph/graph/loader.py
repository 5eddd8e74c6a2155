"""
Resolution report loading.

Turns the JSON report written by the build (one per project and
configuration) into a `ResolutionGraph`. Loading fails fast: either a fully
consistent graph is returned or a `LoadError` is raised.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from .. import config
from ..core.errors import LoadError
from ..core.graph import ResolutionGraph
from ..core.types import Link, Node

logger = logging.getLogger(__name__)


def build_graph(document: Mapping[str, Any]) -> ResolutionGraph:
    """
    Build a graph from a decoded resolution report.

    Args:
        document: Mapping with `root`, `nodes` and `links`, and optionally
            `project`, `configuration` and `description`.

    Returns:
        ResolutionGraph: The graph, with node and link indices assigned.

    Raises:
        LoadError: If required fields are missing or records are malformed.
        GraphIntegrityError: If a link references an unknown node id.
    """
    if not isinstance(document, Mapping):
        raise LoadError(f"Expected a JSON object, got {type(document).__name__}")

    missing = [f for f in config.REQUIRED_DOCUMENT_FIELDS if f not in document]
    if missing:
        raise LoadError(f"Missing required field(s): {', '.join(missing)}")

    raw_nodes = document["nodes"]
    raw_links = document["links"]
    if not isinstance(raw_nodes, list) or not isinstance(raw_links, list):
        raise LoadError("'nodes' and 'links' must be arrays")

    try:
        nodes = [Node.model_validate(n) for n in raw_nodes]
        links = [Link.model_validate(r) for r in raw_links]
    except ValidationError as e:
        raise LoadError(f"Malformed record: {e}") from e

    return ResolutionGraph(
        nodes,
        links,
        root=str(document["root"]),
        project=str(document.get("project") or ""),
        configuration=str(document.get("configuration") or ""),
        description=str(document.get("description") or ""),
    )


def load_graph(path: Union[str, Path]) -> ResolutionGraph:
    """
    Read a JSON report from disk and build its graph.

    Errors raised while building are re-raised with the file path attached.
    """
    graph_path = Path(path)
    if not graph_path.is_file():
        raise LoadError("Graph file not found", source=str(graph_path))

    try:
        data: Dict[str, Any] = json.loads(graph_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read file: {e}", source=str(graph_path)) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON: {e}", source=str(graph_path)) from e

    logger.debug(f"Loading {graph_path}")
    try:
        return build_graph(data)
    except LoadError as e:
        raise type(e)(e.message, source=str(graph_path)) from e


def graph_file_for(
    project: str,
    configuration: str,
    directory: Union[str, Path] = config.DEFAULT_GRAPHS_DIR,
) -> Path:
    """Path of the report the build writes for a project and configuration."""
    name = config.GRAPH_FILE_PATTERN.format(project=project, configuration=configuration)
    return Path(directory) / name
