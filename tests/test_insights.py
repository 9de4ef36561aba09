import pytest

from stylemap.clusters import Cluster
from stylemap.config import MapOptions
from stylemap.features import Point, build_nodes
from stylemap.insights import (
    MapInsights,
    build_cluster_payload,
    build_coach_summary,
    center_role,
    compute_centroid,
    diversity_index,
    experimentation_rate,
    find_outliers,
    mark_off_meta,
)
from stylemap.normalize import PerformanceRecord


def _nodes(*specs):
    records = [PerformanceRecord(name, games, 50.0, 5.0, 4.0, 6.0, 180.0) for name, games, _ in specs]
    nodes = build_nodes(records, MapOptions(min_games=0))
    for node, (_, _, pos) in zip(nodes, specs):
        node.position = Point(*pos)
    return nodes


def _cluster(theme: str, share: float, role: str = "Mid", members=("Ahri",)) -> Cluster:
    return Cluster(
        id=f"cluster-{theme}",
        theme=theme,
        members=tuple(members),
        role=role,
        win_rate=51.234,
        game_share=share,
        color="#6366f1",
        total_games=10,
    )


def test_centroid_is_games_weighted() -> None:
    nodes = _nodes(("Ahri", 30, (100, 100)), ("Lux", 10, (500, 300)))
    c = compute_centroid(nodes)
    assert c.x == pytest.approx(200)
    assert c.y == pytest.approx(150)


def test_outliers_use_point_nine_sigma() -> None:
    nodes = _nodes(
        ("Ahri", 10, (100, 100)),
        ("Lux", 10, (100, 100)),
        ("Zed", 10, (100, 100)),
        ("Lulu", 10, (100, 100)),
        ("Teemo", 10, (800, 500)),
    )
    centroid = compute_centroid(nodes)
    outliers = find_outliers(nodes, centroid)
    assert [n.id for n in outliers] == ["Teemo"]
    assert experimentation_rate(nodes, outliers) == pytest.approx(0.2)


def test_no_outliers_when_all_equidistant() -> None:
    nodes = _nodes(("Ahri", 10, (100, 100)), ("Lux", 10, (300, 100)))
    assert find_outliers(nodes, compute_centroid(nodes)) == []


def test_diversity_index_bounds() -> None:
    even = _nodes(("Ahri", 10, (0, 0)), ("Lux", 10, (0, 0)))
    skewed = _nodes(("Ahri", 90, (0, 0)), ("Lux", 10, (0, 0)))
    single = _nodes(("Ahri", 10, (0, 0)))
    assert diversity_index(even) == pytest.approx(1.0)
    assert 0.0 < diversity_index(skewed) < 1.0
    assert diversity_index(single) == 0.0
    assert diversity_index([]) == 0.0


def test_center_role_from_nearest_node() -> None:
    nodes = _nodes(("Lulu", 10, (100, 100)), ("Garen", 10, (400, 400)), ("Jinx", 10, (700, 700)))
    assert center_role(nodes, Point(390, 410)) == "Top"
    assert center_role([], Point(0, 0)) == "Mid"


def test_cluster_payload_keeps_top_four() -> None:
    clusters = [_cluster(f"T{i}", 0.2) for i in range(5)]
    nodes = _nodes(("Teemo", 10, (0, 0)))
    payload = build_cluster_payload(clusters, nodes)
    assert [c["theme"] for c in payload["clusters"]] == ["T0", "T1", "T2", "T3"]
    assert payload["clusters"][0]["win_rate"] == 51.23
    assert payload["outliers"] == ["Teemo"]


def test_coach_summary_broad_curiosity() -> None:
    clusters = [_cluster("Control Mages", 0.6), _cluster("Enchanter Enchanters", 0.4, role="Support")]
    insights = MapInsights(0.6, 0.8, 0.25, 1, "Mid")
    outliers = _nodes(("Teemo", 10, (0, 0)))
    text = build_coach_summary(clusters, insights, outliers)
    assert text.startswith("Your style orbits around Control Mages (60% of your games).")
    assert "Enchanter Enchanters" in text and "Support flavor" in text
    assert "Diversity index at 80% shows broad curiosity." in text
    assert "Experimentation rate of 25%" in text
    assert "Teemo" in text


def test_coach_summary_comfort_zone() -> None:
    insights = MapInsights(1.0, 0.55, 0.0, 0, "Mid")
    text = build_coach_summary([_cluster("Control Mages", 1.0)], insights, [])
    assert "a honed comfort zone" in text
    assert "Experimentation" not in text
    assert "pivot" not in text


def test_off_meta_flags_only_the_outlier_copy() -> None:
    nodes = _nodes(("Teemo", 10, (100, 100)), ("Teemo", 10, (800, 500)), ("Ahri", 10, (120, 100)))
    mark_off_meta(nodes, [nodes[1]])
    assert [n.off_meta for n in nodes] == [False, True, False]
