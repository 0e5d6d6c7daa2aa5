"""Identity-bearing graph vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Generic, Mapping, TypeVar

__all__ = ["Vertex"]

V = TypeVar("V")


@dataclass(frozen=True, eq=False)
class Vertex(Generic[V]):
    """A graph node carrying an immutable ``payload``.

    Vertices compare and hash by identity: two instances wrapping equal
    payloads are distinct nodes. Each vertex keeps a local mirror of its
    outgoing edges which :class:`~graph_search.shortest_paths.graph.Graph`
    maintains on every edge mutation. The graph's adjacency map stays the
    authoritative source for traversal.
    """

    payload: V
    _adjacent: Dict["Vertex[V]", float] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def adjacent_vertices(self) -> Mapping["Vertex[V]", float]:
        """Read-only view of the cached ``neighbour -> weight`` entries."""

        return MappingProxyType(self._adjacent)

    def add_adjacent_vertex(self, destination: "Vertex[V]", weight: float) -> None:
        """Store or overwrite the cached edge to *destination*."""

        self._adjacent[destination] = weight

    def __str__(self) -> str:
        return str(self.payload)
