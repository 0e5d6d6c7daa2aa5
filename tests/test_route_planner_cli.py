"""Tests for the ``route_planner`` command line tool."""

from __future__ import annotations

from pathlib import Path
import logging

import pytest

import route_planner


def test_cli_outputs_demo_report(capsys) -> None:
    assert route_planner.main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[:10] == [
        "=== Graph Structure ===",
        "Astana -> Karaganda (100.0) Pavlodar (110.0) Kokshetau (90.0)",
        "Karaganda -> Balkash (150.0)",
        "Balkash -> Almaty (200.0) Taraz (180.0)",
        "Almaty -> Taraz (120.0) Taldykorgan (250.0)",
        "Taraz ->",
        "Taldykorgan -> Semey (170.0)",
        "Semey ->",
        "Pavlodar -> Semey (160.0)",
        "Kokshetau ->",
    ]
    assert lines[10:] == [
        "",
        "=== BFS from Astana to Semey ===",
        "BFS path: Astana -> Pavlodar -> Semey",
        "Edge count: 2",
        "",
        "=== Dijkstra from Astana to Semey ===",
        "Dijkstra path: Astana -> Pavlodar -> Semey",
        "Total distance: 270.0 km",
        "Path details: Astana -> Pavlodar (110.0) | Pavlodar -> Semey (160.0)",
    ]


@pytest.mark.parametrize("queue", ["indexed", "lazy"])
def test_cli_directed_graph_cannot_route_backwards(capsys, queue: str) -> None:
    code = route_planner.main(
        ["--source", "Semey", "--target", "Astana", "--algorithm", "dijkstra", "--queue", queue]
    )
    assert code == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Dijkstra path: No path found."


def test_cli_undirected_override_routes_backwards(capsys) -> None:
    code = route_planner.main(
        ["--undirected", "--source", "Semey", "--target", "Astana", "--algorithm", "dijkstra"]
    )
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == [
        "Dijkstra path: Semey -> Pavlodar -> Astana",
        "Total distance: 270.0 km",
        "Path details: Semey -> Pavlodar (160.0) | Pavlodar -> Astana (110.0)",
    ]


def test_cli_reads_yaml_config(tmp_path: Path, capsys) -> None:
    path = tmp_path / "graph.yaml"
    path.write_text(
        "source: A\ntarget: C\nedges:\n  - [A, B, 100]\n  - [B, C, 150]\n  - [A, D, 90]\n",
        encoding="utf-8",
    )

    assert route_planner.main(["--config", str(path), "--algorithm", "dijkstra"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == [
        "Dijkstra path: A -> B -> C",
        "Total distance: 250.0",
        "Path details: A -> B (100.0) | B -> C (150.0)",
    ]


def test_cli_reports_unknown_vertex(capsys, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        code = route_planner.main(["--source", "Atlantis"])

    assert code == 1
    assert capsys.readouterr().out == ""
    assert any("Unknown source vertex 'Atlantis'" in record.message for record in caplog.records)


def test_cli_reports_missing_config(tmp_path: Path) -> None:
    assert route_planner.main(["--config", str(tmp_path / "missing.yaml")]) == 1


def test_cli_reports_config_that_is_not_utf8(
    tmp_path: Path, capsys, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "graph.yaml"
    path.write_bytes(b"edges:\n  - [A\xff, B, 1]\n")

    with caplog.at_level(logging.ERROR):
        assert route_planner.main(["--config", str(path)]) == 1

    assert capsys.readouterr().out == ""
    assert any("is not valid UTF-8" in record.message for record in caplog.records)
