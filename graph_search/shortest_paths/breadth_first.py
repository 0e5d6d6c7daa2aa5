"""Unweighted shortest paths measured in hops."""

from __future__ import annotations

from collections import deque
import logging
import math
from typing import Deque, Dict, Generic, List, TypeVar

from .graph import Graph
from .result import SearchResult, initial_distances
from .vertex import Vertex

__all__ = ["BreadthFirstSearch", "breadth_first"]

logger = logging.getLogger(__name__)

V = TypeVar("V")


def breadth_first(graph: Graph[V], start: Vertex[V]) -> SearchResult[V]:
    """Return hop-count distances from *start*, ignoring edge weights.

    Neighbours are expanded in adjacency insertion order, so among paths with
    the same number of hops the one discovered first is kept.
    """

    distances = initial_distances(graph, start)
    predecessors: Dict[Vertex[V], Vertex[V]] = {}

    frontier: Deque[Vertex[V]] = deque([start])
    while frontier:
        vertex = frontier.popleft()
        hops = distances[vertex] + 1
        for neighbour, _ in graph.neighbors(vertex):
            if math.isinf(distances[neighbour]):
                distances[neighbour] = hops
                predecessors[neighbour] = vertex
                frontier.append(neighbour)

    logger.debug(
        "BFS from %s reached %d of %d vertices",
        start,
        len(predecessors) + 1,
        len(distances),
    )
    return SearchResult.freeze(start, distances, predecessors)


class BreadthFirstSearch(Generic[V]):
    """Eager breadth-first search; ``distance_to`` reports hop counts."""

    __slots__ = ("_result",)

    def __init__(self, graph: Graph[V], start: Vertex[V]) -> None:
        self._result = breadth_first(graph, start)

    @property
    def start(self) -> Vertex[V]:
        return self._result.start

    @property
    def result(self) -> SearchResult[V]:
        return self._result

    def path_to(self, destination: Vertex[V]) -> List[Vertex[V]]:
        return self._result.path_to(destination)

    def distance_to(self, destination: Vertex[V]) -> float:
        return self._result.distance_to(destination)
