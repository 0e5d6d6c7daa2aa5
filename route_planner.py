"""Command line route planner over a weighted graph.

Prints the structure of a graph followed by the breadth-first (fewest hops)
and Dijkstra (lowest total weight) routes between two vertices. Without
``--config`` the built-in intercity road network is used, routing from Astana
to Semey. A YAML description (see ``graph_search.shortest_paths.config``) can
be supplied instead, and ``--source`` / ``--target`` / ``--directed`` override
whatever the description records.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from graph_search.shortest_paths import (
    QUEUE_STRATEGIES,
    BreadthFirstSearch,
    DijkstraSearch,
    GraphConfig,
    GraphError,
    Vertex,
    build_graph,
    default_graph_config,
    format_graph,
    format_hop_report,
    format_search_report,
    load_graph_config,
)

logger = logging.getLogger(__name__)


def _resolve(vertices: Dict[str, Vertex[str]], name: Optional[str], label: str) -> Vertex[str]:
    if name is None:
        raise GraphError(f"No {label} vertex given; use --{label}")
    try:
        return vertices[name]
    except KeyError:
        raise GraphError(f"Unknown {label} vertex {name!r}") from None


def plan(
    config: GraphConfig,
    *,
    source: Optional[str] = None,
    target: Optional[str] = None,
    directed: Optional[bool] = None,
    algorithm: str = "both",
    queue: str = "indexed",
    unit: str = "",
) -> List[str]:
    """Build the graph described by *config* and return the report lines."""

    graph, vertices = build_graph(config, directed=directed)
    start = _resolve(vertices, source or config.source, "source")
    destination = _resolve(vertices, target or config.target, "target")
    logger.info("Planning %s -> %s over %r", start, destination, graph)

    lines = ["=== Graph Structure ===", *format_graph(graph)]
    if algorithm in ("bfs", "both"):
        bfs = BreadthFirstSearch(graph, start)
        lines.append("")
        lines.append(f"=== BFS from {start} to {destination} ===")
        lines.extend(format_hop_report(bfs, destination))
    if algorithm in ("dijkstra", "both"):
        search = DijkstraSearch(graph, start, queue=queue)
        lines.append("")
        lines.append(f"=== Dijkstra from {start} to {destination} ===")
        lines.extend(format_search_report(graph, search, destination, unit=unit))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML graph description. Defaults to the built-in road network.",
    )
    parser.add_argument("--source", default=None, help="Name of the start vertex.")
    parser.add_argument("--target", default=None, help="Name of the destination vertex.")
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--directed",
        dest="directed",
        action="store_true",
        default=None,
        help="Treat edges as one-way regardless of the description.",
    )
    direction.add_argument(
        "--undirected",
        dest="directed",
        action="store_false",
        help="Treat edges as two-way regardless of the description.",
    )
    parser.add_argument(
        "--algorithm",
        default="both",
        choices=["bfs", "dijkstra", "both"],
        help="Which searches to report.",
    )
    parser.add_argument(
        "--queue",
        default="indexed",
        choices=sorted(QUEUE_STRATEGIES),
        help="Priority queue strategy used by Dijkstra.",
    )
    parser.add_argument(
        "--unit",
        default=None,
        help="Unit appended to total distances (default: 'km' for the built-in network).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        if args.config is None:
            config = default_graph_config()
            unit = "km" if args.unit is None else args.unit
        else:
            config = load_graph_config(args.config)
            unit = args.unit or ""
        lines = plan(
            config,
            source=args.source,
            target=args.target,
            directed=args.directed,
            algorithm=args.algorithm,
            queue=args.queue,
            unit=unit,
        )
    except (GraphError, OSError) as exc:
        logger.error("Route planning failed: %s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
