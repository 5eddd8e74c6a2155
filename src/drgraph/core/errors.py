"""
Error types raised while loading and querying resolution graphs.

Filtering and focus computations are total over a structurally valid graph,
so everything here is raised at build time or on an explicit lookup.
"""


class DrGraphError(Exception):
    """Base class for all drgraph errors."""


class LoadError(DrGraphError):
    """
    Raised when a resolution document cannot be turned into a graph.

    Attributes:
        source: Path of the file being loaded, or "<document>" for in-memory data.
        message: Human-readable error message.
    """

    def __init__(self, message: str, source: str = "<document>"):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class GraphIntegrityError(LoadError):
    """Raised when links reference unknown nodes or node ids are duplicated."""


class UnknownNodeError(DrGraphError, KeyError):
    """Raised when a node id is not part of the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Unknown node: {node_id}")

    def __str__(self) -> str:
        return self.args[0]
