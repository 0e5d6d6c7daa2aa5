"""Single-source shortest paths with Dijkstra's algorithm.

The search is eager: constructing :class:`DijkstraSearch` (or calling
:func:`dijkstra`) relaxes the whole reachable part of the graph and freezes the
outcome into a :class:`~graph_search.shortest_paths.result.SearchResult`.

Two interchangeable priority queue strategies are provided:

* ``"indexed"`` - an :class:`IndexedMinHeap` holding each vertex once; an
  improved distance removes the vertex and reinserts it with the new key.
* ``"lazy"`` - a plain ``heapq`` list; every improvement pushes a new entry and
  popped entries whose key exceeds the recorded distance are discarded.

Both produce identical distances. Queue keys are ``(distance, index)`` where
``index`` is the vertex's first-insertion index in the graph, so vertices at
equal distance are always settled in insertion order. A start vertex that was
never added to the graph uses index ``-1``.

Edge weights are non-negative by construction (``Graph`` rejects anything
else). The graph must not be mutated while a search is being constructed.
"""

from __future__ import annotations

import heapq
import logging
from typing import Callable, Dict, Generic, List, Mapping, Tuple, TypeVar

from .graph import Graph
from .priority_queue import IndexedMinHeap
from .result import SearchResult, initial_distances
from .vertex import Vertex

__all__ = ["QUEUE_STRATEGIES", "DijkstraSearch", "dijkstra"]

logger = logging.getLogger(__name__)

V = TypeVar("V")


def dijkstra(
    graph: Graph[V],
    start: Vertex[V],
    *,
    queue: str = "indexed",
) -> SearchResult[V]:
    """Compute shortest distances and predecessors from *start*.

    Parameters
    ----------
    graph:
        Graph to search. Only its authoritative adjacency is read.
    start:
        Source vertex. It does not need to be part of *graph*; an absent start
        simply reaches nothing but itself.
    queue:
        Priority queue strategy, ``"indexed"`` (default) or ``"lazy"``.

    Raises
    ------
    ValueError
        If *queue* names an unknown strategy.
    """

    try:
        run = QUEUE_STRATEGIES[queue]
    except KeyError as exc:
        raise ValueError(
            f"Unsupported queue strategy {queue!r}. Choose from {sorted(QUEUE_STRATEGIES)}"
        ) from exc

    distances = initial_distances(graph, start)
    predecessors: Dict[Vertex[V], Vertex[V]] = {}

    settled = run(graph, start, distances, predecessors)
    logger.debug(
        "Dijkstra (%s queue) from %s settled %d of %d vertices",
        queue,
        start,
        settled,
        len(distances),
    )
    return SearchResult.freeze(start, distances, predecessors)


def _tie_break(graph: Graph[V]) -> Callable[[Vertex[V]], int]:
    def index(vertex: Vertex[V]) -> int:
        return graph.index_of(vertex) if vertex in graph else -1

    return index


def _run_indexed(
    graph: Graph[V],
    start: Vertex[V],
    distances: Dict[Vertex[V], float],
    predecessors: Dict[Vertex[V], Vertex[V]],
) -> int:
    index = _tie_break(graph)
    pending: IndexedMinHeap[Vertex[V]] = IndexedMinHeap()
    pending.push(start, (0.0, index(start)))
    settled = 0

    while pending:
        (current, _), vertex = pending.pop()
        settled += 1
        for neighbour, weight in graph.neighbors(vertex):
            candidate = current + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = vertex
                # push() removes any queued entry before reinserting.
                pending.push(neighbour, (candidate, index(neighbour)))
    return settled


def _run_lazy(
    graph: Graph[V],
    start: Vertex[V],
    distances: Dict[Vertex[V], float],
    predecessors: Dict[Vertex[V], Vertex[V]],
) -> int:
    index = _tie_break(graph)
    # (distance, index) is unique per entry so vertices are never compared.
    pending: List[Tuple[float, int, Vertex[V]]] = [(0.0, index(start), start)]
    settled = 0

    while pending:
        current, _, vertex = heapq.heappop(pending)
        if current > distances[vertex]:
            continue
        settled += 1
        for neighbour, weight in graph.neighbors(vertex):
            candidate = current + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                predecessors[neighbour] = vertex
                heapq.heappush(pending, (candidate, index(neighbour), neighbour))
    return settled


QUEUE_STRATEGIES: Mapping[
    str,
    Callable[[Graph, Vertex, Dict[Vertex, float], Dict[Vertex, Vertex]], int],
] = {
    "indexed": _run_indexed,
    "lazy": _run_lazy,
}


class DijkstraSearch(Generic[V]):
    """Eager Dijkstra search bound to one start vertex.

    Implements :class:`~graph_search.shortest_paths.result.ShortestPath`.
    """

    __slots__ = ("_result",)

    def __init__(
        self, graph: Graph[V], start: Vertex[V], *, queue: str = "indexed"
    ) -> None:
        self._result = dijkstra(graph, start, queue=queue)

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
