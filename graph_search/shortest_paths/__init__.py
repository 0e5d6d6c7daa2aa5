"""Weighted graph model with Dijkstra and breadth-first shortest paths."""

from .breadth_first import BreadthFirstSearch, breadth_first
from .config import (
    GraphConfig,
    build_graph,
    default_graph_config,
    load_graph_config,
    parse_graph_config,
)
from .dijkstra import QUEUE_STRATEGIES, DijkstraSearch, dijkstra
from .errors import (
    EdgeNotFoundError,
    GraphError,
    GraphValidationError,
    VertexNotFoundError,
)
from .graph import DEFAULT_WEIGHT, Graph
from .priority_queue import IndexedMinHeap
from .reporting import (
    build_networkx_graph,
    format_graph,
    format_hop_report,
    format_path,
    format_search_report,
    path_edges,
)
from .result import SearchResult, ShortestPath
from .vertex import Vertex

__all__ = [
    "BreadthFirstSearch",
    "DEFAULT_WEIGHT",
    "DijkstraSearch",
    "EdgeNotFoundError",
    "Graph",
    "GraphConfig",
    "GraphError",
    "GraphValidationError",
    "IndexedMinHeap",
    "QUEUE_STRATEGIES",
    "SearchResult",
    "ShortestPath",
    "Vertex",
    "VertexNotFoundError",
    "breadth_first",
    "build_graph",
    "build_networkx_graph",
    "default_graph_config",
    "dijkstra",
    "format_graph",
    "format_hop_report",
    "format_path",
    "format_search_report",
    "load_graph_config",
    "parse_graph_config",
    "path_edges",
]
