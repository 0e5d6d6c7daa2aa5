"""Exception hierarchy shared by the graph model and its consumers."""

from __future__ import annotations

__all__ = [
    "EdgeNotFoundError",
    "GraphError",
    "GraphValidationError",
    "VertexNotFoundError",
]


class GraphError(Exception):
    """Base class for graph related failures."""


class VertexNotFoundError(GraphError, LookupError):
    """Raised when an operation references a vertex absent from the graph."""

    def __init__(self, vertex: object) -> None:
        super().__init__(f"Vertex not in graph: {vertex!r}")
        self.vertex = vertex


class EdgeNotFoundError(GraphError, LookupError):
    """Raised when an operation references an edge absent from the graph."""

    def __init__(self, source: object, destination: object) -> None:
        super().__init__(f"Edge not found: {source!r} -> {destination!r}")
        self.source = source
        self.destination = destination


class GraphValidationError(GraphError, ValueError):
    """Raised when weights or graph descriptions violate structural constraints."""
