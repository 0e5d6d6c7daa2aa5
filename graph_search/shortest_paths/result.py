"""Read-only query surface shared by the search variants."""

from __future__ import annotations

from dataclasses import dataclass
import math
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Generic,
    List,
    Mapping,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from .graph import Graph
from .vertex import Vertex

__all__ = ["SearchResult", "ShortestPath", "initial_distances"]

V = TypeVar("V")


def initial_distances(graph: Graph[V], start: Vertex[V]) -> Dict[Vertex[V], float]:
    """Return the starting distance map of a search from *start*.

    Every graph vertex maps to ``math.inf`` in insertion order and *start* maps
    to ``0.0``. A start vertex outside the graph is placed first.
    """

    distances: Dict[Vertex[V], float] = {} if start in graph else {start: 0.0}
    for vertex in graph.vertices():
        distances[vertex] = 0.0 if vertex is start else math.inf
    return distances


@runtime_checkable
class ShortestPath(Protocol[V]):
    """Capability implemented by every single-source search variant."""

    @property
    def start(self) -> Vertex[V]:
        ...

    def path_to(self, destination: Vertex[V]) -> List[Vertex[V]]:
        ...

    def distance_to(self, destination: Vertex[V]) -> float:
        ...


@dataclass(frozen=True)
class SearchResult(Generic[V]):
    """Distances and predecessor links computed by one search run.

    ``distances`` covers every vertex the search knew about, unreachable ones
    holding ``math.inf``. ``predecessors`` only holds vertices that were
    reached through an edge, so the start vertex never has an entry. Both
    mappings are exposed as read-only proxies. Queries never raise: a vertex
    the search has never seen is simply unreachable.
    """

    start: Vertex[V]
    distances: Mapping[Vertex[V], float]
    predecessors: Mapping[Vertex[V], Vertex[V]]
    order: Tuple[Vertex[V], ...] = ()

    @classmethod
    def freeze(
        cls,
        start: Vertex[V],
        distances: Dict[Vertex[V], float],
        predecessors: Dict[Vertex[V], Vertex[V]],
    ) -> "SearchResult[V]":
        """Wrap the mutable search state; the dictionaries must not be reused."""

        return cls(
            start=start,
            distances=MappingProxyType(distances),
            predecessors=MappingProxyType(predecessors),
            order=tuple(distances),
        )

    def distance_to(self, destination: Vertex[V]) -> float:
        """Return the shortest distance to *destination* or ``math.inf``."""

        return self.distances.get(destination, math.inf)

    def is_reachable(self, destination: Vertex[V]) -> bool:
        return not math.isinf(self.distance_to(destination))

    def path_to(self, destination: Vertex[V]) -> List[Vertex[V]]:
        """Reconstruct the path from ``start`` to *destination* inclusive.

        Returns ``[start]`` for the start vertex and an empty list when
        *destination* is unreachable.
        """

        if destination is self.start:
            return [self.start]
        if destination not in self.predecessors:
            return []
        path: List[Vertex[V]] = [destination]
        cursor = destination
        while cursor is not self.start:
            cursor = self.predecessors[cursor]
            path.append(cursor)
        path.reverse()
        return path

    def reachable(self) -> List[Vertex[V]]:
        """Return reachable vertices in graph insertion order."""

        return [vertex for vertex in self.order if self.is_reachable(vertex)]

    def as_dict(self) -> Dict[str, Any]:
        """Return a serialisable snapshot of the shortest path tree.

        Payloads are emitted as-is; ``None`` marks unreachable distances and
        paths so the snapshot stays JSON friendly.
        """

        vertices: List[Dict[str, Any]] = []
        for vertex in self.order:
            distance = self.distances[vertex]
            reachable = not math.isinf(distance)
            vertices.append(
                {
                    "vertex": vertex.payload,
                    "distance": distance if reachable else None,
                    "path": (
                        [step.payload for step in self.path_to(vertex)]
                        if reachable
                        else None
                    ),
                }
            )
        return {"source": self.start.payload, "vertices": vertices}
