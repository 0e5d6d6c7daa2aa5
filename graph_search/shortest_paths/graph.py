"""Weighted adjacency-map graph supporting directed and undirected modes.

``Graph`` is the single source of truth for traversal. It maps every vertex to
an insertion-ordered ``neighbour -> weight`` dictionary and keeps the
following invariants:

* **Implicit insertion** - adding an edge inserts missing endpoints first.
* **Latest write wins** - re-adding an edge between the same ordered pair
  replaces its weight; parallel edges are never stored.
* **Symmetry** - in undirected mode both directions are written by the same
  call with the same weight, and weight validation happens before any state
  is touched so a rejected call never leaves one direction updated.
* **Stable ordering** - vertices keep their first-insertion index, which the
  searches use as a deterministic priority-queue tie-break.

Every edge mutation is mirrored into the endpoint's
:attr:`Vertex.adjacent_vertices` cache.

Mutating a graph while a search over it is being constructed is a
precondition violation and is not guarded against.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Dict, Generic, Iterator, Tuple, TypeVar

from .errors import EdgeNotFoundError, GraphValidationError, VertexNotFoundError
from .vertex import Vertex

__all__ = ["DEFAULT_WEIGHT", "Graph", "validate_weight"]

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_WEIGHT = 1.0


def validate_weight(weight: object) -> float:
    """Return *weight* as ``float`` or raise :class:`GraphValidationError`.

    Booleans, non-numeric values, ``NaN`` and negative numbers are rejected
    because the shortest path searches assume non-negative edge weights.
    """

    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise GraphValidationError(f"Edge weights must be numeric, got {weight!r}")
    value = float(weight)
    if math.isnan(value):
        raise GraphValidationError("Edge weights must not be NaN")
    if value < 0:
        raise GraphValidationError(f"Edge weights must be non-negative, got {value}")
    return value


class Graph(Generic[V]):
    """Mutable weighted graph keyed by vertex identity."""

    __slots__ = ("_directed", "_adjacency", "_index")

    def __init__(self, directed: bool = False) -> None:
        self._directed = bool(directed)
        self._adjacency: Dict[Vertex[V], Dict[Vertex[V], float]] = {}
        self._index: Dict[Vertex[V], int] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_vertex(self, vertex: Vertex[V]) -> None:
        """Insert *vertex* with no edges; no-op when already present."""

        if vertex in self._adjacency:
            return
        self._index[vertex] = len(self._adjacency)
        self._adjacency[vertex] = {}
        logger.debug("Added vertex %s (index %d)", vertex, self._index[vertex])

    def add_edge(
        self,
        source: Vertex[V],
        destination: Vertex[V],
        weight: float = DEFAULT_WEIGHT,
    ) -> None:
        """Set or replace the edge ``source -> destination``.

        Missing endpoints are inserted first. Undirected graphs also write the
        mirror edge ``destination -> source`` with the identical weight.
        """

        value = validate_weight(weight)
        self.add_vertex(source)
        self.add_vertex(destination)
        self._write_edge(source, destination, value)
        if not self._directed:
            self._write_edge(destination, source, value)

    def set_weight(
        self, source: Vertex[V], destination: Vertex[V], new_weight: float
    ) -> None:
        """Update the weight of an existing edge in place.

        Raises
        ------
        VertexNotFoundError
            If either endpoint is absent from the graph.
        EdgeNotFoundError
            If there is no edge ``source -> destination``.
        GraphValidationError
            If *new_weight* is not a non-negative number.
        """

        self._require_edge(source, destination)
        value = validate_weight(new_weight)
        self._write_edge(source, destination, value)
        if not self._directed:
            self._write_edge(destination, source, value)

    def _write_edge(self, source: Vertex[V], destination: Vertex[V], weight: float) -> None:
        previous = self._adjacency[source].get(destination)
        self._adjacency[source][destination] = weight
        source.add_adjacent_vertex(destination, weight)
        if previous is not None and previous != weight:
            logger.debug(
                "Replaced weight %s -> %s: %s -> %s", source, destination, previous, weight
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def vertices(self) -> Tuple[Vertex[V], ...]:
        """Return every vertex in first-insertion order."""

        return tuple(self._adjacency)

    def adjacency_of(self, vertex: Vertex[V]) -> Dict[Vertex[V], float]:
        """Return a copy of the ``neighbour -> weight`` mapping of *vertex*."""

        self._require_vertex(vertex)
        return dict(self._adjacency[vertex])

    def neighbors(self, vertex: Vertex[V]) -> Iterator[Tuple[Vertex[V], float]]:
        """Iterate ``(neighbour, weight)`` pairs without copying.

        Absent vertices have no neighbours.
        """

        return iter(self._adjacency.get(vertex, {}).items())

    def weight(self, source: Vertex[V], destination: Vertex[V]) -> float:
        """Return the weight of ``source -> destination``."""

        self._require_edge(source, destination)
        return self._adjacency[source][destination]

    def has_edge(self, source: Vertex[V], destination: Vertex[V]) -> bool:
        return destination in self._adjacency.get(source, {})

    def edges(self) -> Iterator[Tuple[Vertex[V], Vertex[V], float]]:
        """Iterate ``(source, destination, weight)`` triples.

        Undirected edges are reported once, from the endpoint inserted first.
        """

        for source, neighbours in self._adjacency.items():
            for destination, weight in neighbours.items():
                if (
                    not self._directed
                    and self._index[destination] < self._index[source]
                ):
                    continue
                yield source, destination, weight

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def index_of(self, vertex: Vertex[V]) -> int:
        """Return the first-insertion index of *vertex*."""

        try:
            return self._index[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, vertices={len(self)}, edges={self.edge_count})"

    def _require_vertex(self, vertex: Vertex[V]) -> None:
        if vertex not in self._adjacency:
            raise VertexNotFoundError(vertex)

    def _require_edge(self, source: Vertex[V], destination: Vertex[V]) -> None:
        self._require_vertex(source)
        self._require_vertex(destination)
        if destination not in self._adjacency[source]:
            raise EdgeNotFoundError(source, destination)
