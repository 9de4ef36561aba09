from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from .clusters import Cluster
from .features import MapNode, Point

OUTLIER_SIGMA = 0.9
BROAD_DIVERSITY_PCT = 55
PAYLOAD_CLUSTERS = 4
SUMMARY_OUTLIERS = 3


@dataclass(frozen=True)
class MapInsights:
    dominant_cluster_share: float
    diversity_index: float
    experimentation_rate: float
    outlier_count: int
    center_role: str
    cluster_cohesion: float = 0.0


def _pct(value: float) -> int:
    # half-up, so 0.555 -> 56 rather than banker's rounding
    return int(math.floor(value * 100 + 0.5))


def compute_centroid(nodes: Sequence[MapNode]) -> Point:
    total = sum(node.games for node in nodes) or 1
    x = sum(node.position.x * node.games for node in nodes) / total
    y = sum(node.position.y * node.games for node in nodes) / total
    return Point(x, y)


def _distance(node: MapNode, centroid: Point) -> float:
    return math.hypot(node.position.x - centroid.x, node.position.y - centroid.y)


def find_outliers(nodes: Sequence[MapNode], centroid: Point) -> List[MapNode]:
    if not nodes:
        return []
    distances = [_distance(node, centroid) for node in nodes]
    mean = sum(distances) / len(distances)
    std = math.sqrt(sum((d - mean) ** 2 for d in distances) / len(distances))
    cutoff = mean + OUTLIER_SIGMA * std
    return [node for node, d in zip(nodes, distances) if d > cutoff]


def mark_off_meta(nodes: Sequence[MapNode], outliers: Sequence[MapNode]) -> None:
    # by identity, so a duplicate name elsewhere in the pool is not flagged
    flagged = {id(node) for node in outliers}
    for node in nodes:
        node.off_meta = id(node) in flagged


def diversity_index(nodes: Sequence[MapNode]) -> float:
    """Entropy of the game share per champion, scaled to [0, 1]."""
    total = sum(node.games for node in nodes)
    if total <= 0 or len(nodes) <= 1:
        return 0.0
    probs = [node.games / total for node in nodes if node.games > 0]
    ent = -sum(p * math.log2(p) for p in probs)
    return max(0.0, min(1.0, ent / math.log2(len(nodes))))


def experimentation_rate(nodes: Sequence[MapNode], outliers: Sequence[MapNode]) -> float:
    total = sum(node.games for node in nodes) or 1
    return sum(node.games for node in outliers) / total


def center_role(nodes: Sequence[MapNode], centroid: Point) -> str:
    if not nodes:
        return "Mid"
    closest = min(nodes, key=lambda node: _distance(node, centroid))
    return closest.profile.role


def build_cluster_payload(clusters: Sequence[Cluster], outliers: Sequence[MapNode]) -> Dict[str, Any]:
    return {
        "clusters": [
            {
                "theme": c.theme,
                "champions": list(c.members),
                "win_rate": round(c.win_rate, 2),
            }
            for c in clusters[:PAYLOAD_CLUSTERS]
        ],
        "outliers": [node.name for node in outliers],
    }


def build_coach_summary(
    clusters: Sequence[Cluster],
    insights: MapInsights,
    outliers: Sequence[MapNode],
) -> str:
    if not clusters:
        return "We need at least one cluster to explain your style."
    primary = clusters[0]
    dominant = _pct(insights.dominant_cluster_share)
    diversity = _pct(insights.diversity_index)
    experimentation = _pct(insights.experimentation_rate)

    parts: List[str] = [f"Your style orbits around {primary.theme} ({dominant}% of your games)."]
    if len(clusters) > 1:
        secondary = clusters[1]
        parts.append(
            f"You pivot into {secondary.theme} when drafts demand it, "
            f"adding a {secondary.role} flavor to your pool."
        )
    label = "broad curiosity" if diversity > BROAD_DIVERSITY_PCT else "a honed comfort zone"
    parts.append(f"Diversity index at {diversity}% shows {label}.")
    if experimentation > 0:
        parts.append(f"Experimentation rate of {experimentation}% keeps your opponents guessing.")
    if outliers:
        names = ", ".join(node.name for node in outliers[:SUMMARY_OUTLIERS])
        parts.append(f"Off-meta probes like {names} form your experiment zone for when you need chaos.")
    return " ".join(parts)
