import math

import pytest

from stylemap.config import MapOptions
from stylemap.features import build_nodes
from stylemap.graph import build_edges
from stylemap.layout import MARGIN, force_layout, initial_positions
from stylemap.normalize import PerformanceRecord, load_sample_records


def _record(name: str, games: int) -> PerformanceRecord:
    return PerformanceRecord(name, games, 50.0, 5.0, 4.0, 6.0, 180.0)


def test_initial_positions_on_circle() -> None:
    points = initial_positions(4, 960, 560)
    assert points[0].x == pytest.approx(480 + 240)
    assert points[0].y == pytest.approx(280)
    for p in points:
        assert math.hypot(p.x - 480, p.y - 280) == pytest.approx(240)


def test_positions_stay_inside_canvas() -> None:
    nodes = build_nodes(load_sample_records(), MapOptions())
    force_layout(nodes, build_edges(nodes), 960, 560)
    for n in nodes:
        assert MARGIN <= n.position.x <= 960 - MARGIN
        assert MARGIN <= n.position.y <= 560 - MARGIN


def test_small_canvas_still_clamped() -> None:
    nodes = build_nodes(load_sample_records(), MapOptions())
    force_layout(nodes, build_edges(nodes), 300, 200)
    for n in nodes:
        assert MARGIN <= n.position.x <= 300 - MARGIN
        assert MARGIN <= n.position.y <= 200 - MARGIN


def test_heavier_node_moves_less() -> None:
    nodes = build_nodes([_record("Garen", 100), _record("Lulu", 10)], MapOptions())
    start = initial_positions(2, 960, 560)
    force_layout(nodes, [], 960, 560)
    heavy_shift = math.hypot(nodes[0].position.x - start[0].x, nodes[0].position.y - start[0].y)
    light_shift = math.hypot(nodes[1].position.x - start[1].x, nodes[1].position.y - start[1].y)
    assert light_shift > heavy_shift


def test_single_node_keeps_initial_position() -> None:
    nodes = build_nodes([_record("Ahri", 10)], MapOptions())
    force_layout(nodes, [], 960, 560)
    assert nodes[0].position.x == pytest.approx(720)
    assert nodes[0].position.y == pytest.approx(280)


def test_layout_is_reproducible() -> None:
    first = build_nodes(load_sample_records(), MapOptions())
    second = build_nodes(load_sample_records(), MapOptions())
    force_layout(first, build_edges(first), 960, 560)
    force_layout(second, build_edges(second), 960, 560)
    assert [(n.position.x, n.position.y) for n in first] == [
        (n.position.x, n.position.y) for n in second
    ]
