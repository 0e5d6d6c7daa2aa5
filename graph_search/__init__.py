"""Weighted graph modelling and single-source shortest path search.

The implementation lives in :mod:`graph_search.shortest_paths`; its public
names are re-exported here.
"""

from .shortest_paths import (
    BreadthFirstSearch,
    DEFAULT_WEIGHT,
    DijkstraSearch,
    EdgeNotFoundError,
    Graph,
    GraphConfig,
    GraphError,
    GraphValidationError,
    IndexedMinHeap,
    QUEUE_STRATEGIES,
    SearchResult,
    ShortestPath,
    Vertex,
    VertexNotFoundError,
    breadth_first,
    build_graph,
    build_networkx_graph,
    default_graph_config,
    dijkstra,
    format_graph,
    format_hop_report,
    format_path,
    format_search_report,
    load_graph_config,
    parse_graph_config,
    path_edges,
)

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
