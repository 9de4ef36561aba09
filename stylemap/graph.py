from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .champions import StaticProfile
from .features import MapNode

SIMILARITY_THRESHOLD = 0.4
MAX_SHARED_TRAITS = 3
MAX_SHARED_TAGS = 2


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    similarity: float
    shared_traits: Tuple[str, ...]


def _magnitude(vec: Sequence[float]) -> float:
    return math.sqrt(sum(v * v for v in vec))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    mag_a = _magnitude(a)
    mag_b = _magnitude(b)
    # degenerate vectors are dissimilar to everything
    if mag_a == 0 or mag_b == 0:
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    # rounding can push identical vectors a hair past 1
    return max(-1.0, min(1.0, dot / (mag_a * mag_b)))


def shared_traits(a: StaticProfile, b: StaticProfile) -> Tuple[str, ...]:
    traits: List[str] = []
    if a.role == b.role:
        traits.append(a.role)
    if a.damage_type == b.damage_type:
        traits.append(f"{a.damage_type} damage")
    if a.resource == b.resource:
        traits.append(f"{a.resource} users")
    if a.range == b.range:
        traits.append("Artillery" if a.is_ranged else "Melee core")
    if a.play_pattern == b.play_pattern:
        traits.append(a.play_pattern)
    common_tags = [t for t in a.tags if t in b.tags]
    traits.extend(common_tags[:MAX_SHARED_TAGS])
    return tuple(traits[:MAX_SHARED_TRAITS])


def build_edges(nodes: Sequence[MapNode]) -> List[Edge]:
    edges: List[Edge] = []
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            sim = cosine_similarity(nodes[i].vector, nodes[j].vector)
            if sim <= SIMILARITY_THRESHOLD:
                continue
            edges.append(
                Edge(
                    source=nodes[i].id,
                    target=nodes[j].id,
                    similarity=sim,
                    shared_traits=shared_traits(nodes[i].profile, nodes[j].profile),
                )
            )
    return edges


def filter_edges(edges: Sequence[Edge], threshold: float) -> List[Edge]:
    """Display-side filter; never feeds back into layout or clustering."""
    return [e for e in edges if e.similarity >= threshold]
