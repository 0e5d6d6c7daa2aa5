"""Human-readable reports and NetworkX export for graphs and search results.

The searches only expose cumulative distances. Per-edge breakdowns are
rebuilt here by re-walking a returned path through the graph's adjacency,
which keeps the search state private.

NetworkX is only needed by :func:`build_networkx_graph`, which imports it lazily
so the rest of the module works without it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Sequence, Tuple, TypeAlias, TypeVar, Union

from .graph import Graph
from .result import ShortestPath
from .vertex import Vertex

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-untyped]

    NxGraph: TypeAlias = Union[nx.Graph, nx.DiGraph]
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxGraph: TypeAlias = Any

__all__ = [
    "build_networkx_graph",
    "format_graph",
    "format_hop_report",
    "format_path",
    "format_search_report",
    "path_edges",
]

logger = logging.getLogger(__name__)

V = TypeVar("V")

PathEdge = Tuple[Vertex[V], Vertex[V], float]


def format_graph(graph: Graph[V]) -> List[str]:
    """Render one ``vertex -> neighbour (weight) ...`` line per vertex."""

    lines: List[str] = []
    for vertex in graph.vertices():
        neighbours = " ".join(
            f"{neighbour} ({weight:.1f})" for neighbour, weight in graph.neighbors(vertex)
        )
        lines.append(f"{vertex} -> {neighbours}".rstrip())
    return lines


def format_path(path: Sequence[Vertex[V]]) -> str:
    return " -> ".join(str(vertex) for vertex in path)


def path_edges(graph: Graph[V], path: Sequence[Vertex[V]]) -> List[PathEdge]:
    """Return the ``(from, to, weight)`` hops along *path*.

    Raises :class:`~graph_search.shortest_paths.errors.EdgeNotFoundError` when
    two consecutive vertices are not connected in *graph*.
    """

    return [
        (source, destination, graph.weight(source, destination))
        for source, destination in zip(path, path[1:])
    ]


def format_search_report(
    graph: Graph[V],
    search: ShortestPath[V],
    destination: Vertex[V],
    *,
    label: str = "Dijkstra",
    unit: str = "",
) -> List[str]:
    """Describe the weighted route from ``search.start`` to *destination*."""

    path = search.path_to(destination)
    if not path:
        return [f"{label} path: No path found."]

    suffix = f" {unit}" if unit else ""
    hops = path_edges(graph, path)
    details = " | ".join(
        f"{source} -> {target} ({weight:.1f})" for source, target, weight in hops
    )
    return [
        f"{label} path: {format_path(path)}",
        f"Total distance: {search.distance_to(destination):.1f}{suffix}",
        f"Path details: {details or '(none)'}",
    ]


def format_hop_report(
    search: ShortestPath[V],
    destination: Vertex[V],
    *,
    label: str = "BFS",
) -> List[str]:
    """Describe the route to *destination* by edge count; ``-1`` when unreachable."""

    path = search.path_to(destination)
    if not path:
        return [f"{label} path: No path found.", "Edge count: -1"]
    return [f"{label} path: {format_path(path)}", f"Edge count: {len(path) - 1}"]


def build_networkx_graph(graph: Graph[V]) -> NxGraph:
    """Convert *graph* to ``networkx.DiGraph`` or ``networkx.Graph``.

    Nodes are the :class:`Vertex` objects themselves (identity preserved) with
    a ``payload`` attribute; edges carry a ``weight`` attribute.
    """

    try:
        import networkx as nx  # type: ignore[import-untyped]
    except ImportError as exc:
        raise ModuleNotFoundError(
            "NetworkX is required for graph export. Install it via 'pip install networkx'."
        ) from exc

    nx_graph = nx.DiGraph() if graph.directed else nx.Graph()
    for vertex in graph.vertices():
        nx_graph.add_node(vertex, payload=vertex.payload)
    for source, destination, weight in graph.edges():
        nx_graph.add_edge(source, destination, weight=weight)
    logger.debug("Exported %r to %s", graph, type(nx_graph).__name__)
    return nx_graph
