from __future__ import annotations

import pytest

from graph_search.shortest_paths import (
    BreadthFirstSearch,
    DijkstraSearch,
    EdgeNotFoundError,
    Graph,
    Vertex,
    build_networkx_graph,
    format_graph,
    format_hop_report,
    format_path,
    format_search_report,
    path_edges,
)


@pytest.fixture
def triangle() -> tuple[Graph[str], Vertex[str], Vertex[str], Vertex[str], Vertex[str]]:
    a, b, c, island = Vertex("A"), Vertex("B"), Vertex("C"), Vertex("Z")
    graph: Graph[str] = Graph(directed=True)
    graph.add_edge(a, b, 100)
    graph.add_edge(b, c, 150.5)
    graph.add_edge(a, c, 300)
    graph.add_vertex(island)
    return graph, a, b, c, island


def test_format_graph_lists_weighted_neighbours(triangle) -> None:
    graph, *_ = triangle
    assert format_graph(graph) == [
        "A -> B (100.0) C (300.0)",
        "B -> C (150.5)",
        "C ->",
        "Z ->",
    ]


def test_path_edges_rebuilds_per_edge_weights(triangle) -> None:
    graph, a, b, c, island = triangle
    assert path_edges(graph, [a, b, c]) == [(a, b, 100.0), (b, c, 150.5)]
    assert path_edges(graph, [a]) == []
    with pytest.raises(EdgeNotFoundError):
        path_edges(graph, [c, a])


def test_search_report_lines(triangle) -> None:
    graph, a, b, c, island = triangle
    search = DijkstraSearch(graph, a)

    assert format_search_report(graph, search, c, unit="km") == [
        "Dijkstra path: A -> B -> C",
        "Total distance: 250.5 km",
        "Path details: A -> B (100.0) | B -> C (150.5)",
    ]
    assert format_search_report(graph, search, a) == [
        "Dijkstra path: A",
        "Total distance: 0.0",
        "Path details: (none)",
    ]
    assert format_search_report(graph, search, island) == [
        "Dijkstra path: No path found."
    ]


def test_hop_report_lines(triangle) -> None:
    graph, a, b, c, island = triangle
    search = BreadthFirstSearch(graph, a)

    assert format_hop_report(search, c) == ["BFS path: A -> C", "Edge count: 1"]
    assert format_hop_report(search, island, label="Hops") == [
        "Hops path: No path found.",
        "Edge count: -1",
    ]
    assert format_path([]) == ""


def test_networkx_export_preserves_direction_and_weights(triangle) -> None:
    nx = pytest.importorskip("networkx")
    graph, a, b, c, island = triangle

    exported = build_networkx_graph(graph)
    assert isinstance(exported, nx.DiGraph)
    assert list(exported.nodes) == [a, b, c, island]
    assert exported.nodes[a]["payload"] == "A"
    assert exported[b][c]["weight"] == 150.5
    assert not exported.has_edge(c, b)


def test_networkx_export_of_undirected_graph() -> None:
    nx = pytest.importorskip("networkx")
    a, b = Vertex("A"), Vertex("B")
    graph: Graph[str] = Graph()
    graph.add_edge(a, b, 4)

    exported = build_networkx_graph(graph)
    assert type(exported) is nx.Graph
    assert exported.number_of_edges() == 1
    assert exported[b][a]["weight"] == 4.0
