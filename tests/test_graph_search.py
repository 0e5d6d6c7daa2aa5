"""Tests for the package root and the optional NetworkX export."""

from __future__ import annotations

import sys

import pytest

import graph_search
from graph_search import Graph, Vertex, build_networkx_graph, dijkstra


def test_package_root_re_exports_the_search_api() -> None:
    a, b = Vertex("A"), Vertex("B")
    graph: Graph[str] = Graph()
    graph.add_edge(a, b, 3)

    assert dijkstra(graph, a).distance_to(b) == 3.0
    assert "DijkstraSearch" in graph_search.__all__


def test_networkx_export_reports_missing_dependency(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setitem(sys.modules, "networkx", None)
    graph: Graph[str] = Graph()
    graph.add_edge(Vertex("A"), Vertex("B"), 1.0)

    with pytest.raises(ModuleNotFoundError, match="pip install networkx"):
        build_networkx_graph(graph)
