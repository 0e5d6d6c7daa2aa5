"""YAML graph descriptions.

A description names vertices by string and lists weighted edges::

    directed: true
    source: Astana
    target: Semey
    edges:
      - [Astana, Karaganda, 100]
      - {from: Astana, to: Kokshetau, weight: 90}
      - [Pavlodar, Semey]          # weight defaults to 1.0

Edges are either ``[from, to]`` / ``[from, to, weight]`` sequences or
mappings with ``from``, ``to`` and an optional ``weight``. ``directed``
defaults to ``false``; ``source`` and ``target`` are optional hints for the
command line tool. Malformed documents raise
:class:`~graph_search.shortest_paths.errors.GraphValidationError`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

from .errors import GraphValidationError
from .graph import DEFAULT_WEIGHT, Graph, validate_weight
from .vertex import Vertex

__all__ = [
    "EdgeSpec",
    "GraphConfig",
    "build_graph",
    "default_graph_config",
    "load_graph_config",
    "parse_graph_config",
]

logger = logging.getLogger(__name__)

EdgeSpec = Tuple[str, str, float]


@dataclass(frozen=True)
class GraphConfig:
    """Validated, name-based description of a graph."""

    edges: Tuple[EdgeSpec, ...]
    directed: bool = False
    vertices: Tuple[str, ...] = ()
    source: Optional[str] = None
    target: Optional[str] = None

    def names(self) -> List[str]:
        """Return every vertex name in first-mention order."""

        seen: Dict[str, None] = dict.fromkeys(self.vertices)
        for source, destination, _ in self.edges:
            seen.setdefault(source)
            seen.setdefault(destination)
        return list(seen)


def _parse_name(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise GraphValidationError(f"{label} must be a non-empty string, got {value!r}")
    return value.strip()


def _parse_edge(entry: Any, position: int) -> EdgeSpec:
    if isinstance(entry, Mapping):
        unknown = set(entry) - {"from", "to", "weight"}
        if unknown:
            raise GraphValidationError(
                f"Edge #{position} has unknown keys: {sorted(map(str, unknown))}"
            )
        if "from" not in entry or "to" not in entry:
            raise GraphValidationError(f"Edge #{position} requires 'from' and 'to'")
        source, destination = entry["from"], entry["to"]
        weight = entry.get("weight", DEFAULT_WEIGHT)
    elif isinstance(entry, Sequence) and not isinstance(entry, str) and len(entry) in (2, 3):
        source, destination = entry[0], entry[1]
        weight = entry[2] if len(entry) == 3 else DEFAULT_WEIGHT
    else:
        raise GraphValidationError(
            f"Edge #{position} must be [from, to, weight?] or a mapping, got {entry!r}"
        )
    try:
        value = validate_weight(weight)
    except GraphValidationError as exc:
        raise GraphValidationError(f"Edge #{position}: {exc}") from exc
    return (
        _parse_name(source, f"Edge #{position} 'from'"),
        _parse_name(destination, f"Edge #{position} 'to'"),
        value,
    )


def parse_graph_config(document: Any) -> GraphConfig:
    """Validate an already-decoded document and return a :class:`GraphConfig`."""

    if not isinstance(document, Mapping):
        raise GraphValidationError("Graph description must be a mapping")
    unknown = set(document) - {"directed", "vertices", "edges", "source", "target"}
    if unknown:
        raise GraphValidationError(f"Unknown graph keys: {sorted(map(str, unknown))}")

    directed = document.get("directed", False)
    if not isinstance(directed, bool):
        raise GraphValidationError("'directed' must be a boolean")

    raw_vertices = document.get("vertices") or []
    if not isinstance(raw_vertices, list):
        raise GraphValidationError("'vertices' must be a list of names")
    vertices = tuple(_parse_name(name, "Vertex name") for name in raw_vertices)

    raw_edges = document.get("edges") or []
    if not isinstance(raw_edges, list):
        raise GraphValidationError("'edges' must be a list")
    edges = tuple(_parse_edge(entry, position) for position, entry in enumerate(raw_edges, 1))

    source = document.get("source")
    target = document.get("target")
    config = GraphConfig(
        edges=edges,
        directed=directed,
        vertices=vertices,
        source=None if source is None else _parse_name(source, "'source'"),
        target=None if target is None else _parse_name(target, "'target'"),
    )
    names = set(config.names())
    for label, name in (("source", config.source), ("target", config.target)):
        if name is not None and name not in names:
            raise GraphValidationError(f"{label} {name!r} does not name a vertex")
    return config


def load_graph_config(path: Path) -> GraphConfig:
    """Read and validate the YAML graph description stored at *path*."""

    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            document = yaml.safe_load(handle)
        except UnicodeDecodeError as exc:
            raise GraphValidationError(f"{path} is not valid UTF-8: {exc}") from exc
        except yaml.YAMLError as exc:
            raise GraphValidationError(f"{path} is not valid YAML: {exc}") from exc
    config = parse_graph_config(document)
    logger.info(
        "Loaded %s graph with %d edges from %s",
        "directed" if config.directed else "undirected",
        len(config.edges),
        path,
    )
    return config


def build_graph(
    config: GraphConfig, *, directed: Optional[bool] = None
) -> Tuple[Graph[str], Dict[str, Vertex[str]]]:
    """Materialise *config* into a graph and a ``name -> Vertex`` lookup.

    *directed* overrides the mode recorded in the description.
    """

    graph: Graph[str] = Graph(config.directed if directed is None else directed)
    vertices = {name: Vertex(name) for name in config.names()}
    for vertex in vertices.values():
        graph.add_vertex(vertex)
    for source, destination, weight in config.edges:
        graph.add_edge(vertices[source], vertices[destination], weight)
    return graph, vertices


def default_graph_config() -> GraphConfig:
    """Return the built-in intercity road network used by the demo."""

    edges: Tuple[EdgeSpec, ...] = (
        ("Astana", "Karaganda", 100.0),
        ("Karaganda", "Balkash", 150.0),
        ("Balkash", "Almaty", 200.0),
        ("Balkash", "Taraz", 180.0),
        ("Almaty", "Taraz", 120.0),
        ("Almaty", "Taldykorgan", 250.0),
        ("Taldykorgan", "Semey", 170.0),
        ("Astana", "Pavlodar", 110.0),
        ("Pavlodar", "Semey", 160.0),
        ("Astana", "Kokshetau", 90.0),
    )
    return GraphConfig(edges=edges, directed=True, source="Astana", target="Semey")
