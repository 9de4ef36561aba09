import math

import pytest

from stylemap.champions import StaticProfile, get_static_profile
from stylemap.config import MapOptions
from stylemap.features import build_nodes
from stylemap.graph import (
    SIMILARITY_THRESHOLD,
    Edge,
    build_edges,
    cosine_similarity,
    filter_edges,
    shared_traits,
)
from stylemap.normalize import load_sample_records


def test_cosine_similarity_basics() -> None:
    assert cosine_similarity([1, 0], [1, 0]) == pytest.approx(1.0)
    assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)
    assert cosine_similarity([1, 0], [-1, 0]) == pytest.approx(-1.0)


def test_zero_vector_similarity_is_exactly_zero() -> None:
    assert cosine_similarity([0, 0, 0], [1, 2, 3]) == 0.0
    assert cosine_similarity([1, 2, 3], [0, 0, 0]) == 0.0


def test_similarity_symmetric_and_bounded_on_sample_pool() -> None:
    nodes = build_nodes(load_sample_records(), MapOptions())
    for a in nodes:
        for b in nodes:
            ab = cosine_similarity(a.vector, b.vector)
            assert ab == cosine_similarity(b.vector, a.vector)
            assert math.isfinite(ab)
            assert -1.0 <= ab <= 1.0


def test_edges_only_above_threshold() -> None:
    nodes = build_nodes(load_sample_records(), MapOptions())
    edges = build_edges(nodes)
    assert edges
    ids = [n.id for n in nodes]
    for e in edges:
        assert e.similarity > SIMILARITY_THRESHOLD
        assert ids.index(e.source) < ids.index(e.target)
        assert len(e.shared_traits) <= 3


def test_shared_traits_priority_and_cap() -> None:
    ahri = get_static_profile("Ahri")
    syndra = get_static_profile("Syndra")
    assert shared_traits(ahri, syndra) == ("Mid", "Magic damage", "Mana users")


def test_shared_traits_range_labels() -> None:
    base = dict(complexity=5, tags=(), play_pattern="Burst")
    ranged_a = StaticProfile(role="Top", range="Ranged", resource="Mana", damage_type="Magic", **base)
    ranged_b = StaticProfile(role="Bot", range="Ranged", resource="Fury", damage_type="Physical", **base)
    melee_a = StaticProfile(role="Top", range="Melee", resource="Mana", damage_type="Magic", **base)
    melee_b = StaticProfile(role="Bot", range="Melee", resource="Fury", damage_type="Physical", **base)
    assert shared_traits(ranged_a, ranged_b) == ("Artillery", "Burst")
    assert shared_traits(melee_a, melee_b) == ("Melee core", "Burst")


def test_shared_traits_takes_at_most_two_tags() -> None:
    a = StaticProfile("Top", "Melee", "Mana", "Magic", 5, ("A", "B", "C"), "Burst")
    b = StaticProfile("Bot", "Ranged", "Fury", "Physical", 5, ("C", "B", "A"), "Control")
    assert shared_traits(a, b) == ("A", "B")


def test_filter_edges_is_display_only() -> None:
    edges = [Edge("a", "b", 0.45, ()), Edge("a", "c", 0.8, ())]
    assert [e.target for e in filter_edges(edges, 0.6)] == ["c"]
    assert len(edges) == 2
