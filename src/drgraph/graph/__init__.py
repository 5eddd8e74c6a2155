from .loader import build_graph, graph_file_for, load_graph

__all__ = ["build_graph", "graph_file_for", "load_graph"]
