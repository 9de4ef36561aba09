from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from sklearn.metrics import silhouette_score

from .champions import role_color
from .features import MapNode

KMEANS_ITERATIONS = 30
MIN_CLUSTERS = 2
MAX_CLUSTERS = 4


@dataclass(frozen=True)
class Cluster:
    id: str
    theme: str
    members: Tuple[str, ...]
    role: str
    win_rate: float
    game_share: float
    color: str
    total_games: int


def choose_cluster_count(n: int) -> int:
    return min(MAX_CLUSTERS, max(MIN_CLUSTERS, int(round(n / 3))))


def _euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def kmeans(
    vectors: Sequence[Sequence[float]], k: int, iterations: int = KMEANS_ITERATIONS
) -> List[int]:
    """Plain Lloyd iterations seeded with the first ``k`` vectors.

    Runs every iteration even once assignments settle. A centroid that loses
    all of its members keeps its previous value.
    """
    if not vectors:
        return []
    centers = [list(v) for v in vectors[:k]]
    dim = len(vectors[0])
    labels = [0] * len(vectors)
    for _ in range(iterations):
        for i, v in enumerate(vectors):
            best = 0
            best_dist = math.inf
            for c, center in enumerate(centers):
                d = _euclidean(v, center)
                if d < best_dist:
                    best_dist = d
                    best = c
            labels[i] = best

        sums = [[0.0] * dim for _ in centers]
        counts = [0] * len(centers)
        for v, lab in zip(vectors, labels):
            row = sums[lab]
            for d in range(dim):
                row[d] += v[d]
            counts[lab] += 1
        for c in range(len(centers)):
            if counts[c] == 0:
                continue
            centers[c] = [s / counts[c] for s in sums[c]]
    return labels


def _ranked(weights: Dict[str, float]) -> List[str]:
    # stable: ties keep first-seen order
    return [key for key, _ in sorted(weights.items(), key=lambda x: x[1], reverse=True)]


def _dominant_role(nodes: Sequence[MapNode]) -> str:
    roles: Dict[str, float] = {}
    for node in nodes:
        roles[node.profile.role] = roles.get(node.profile.role, 0.0) + node.games
    ranked = _ranked(roles)
    return ranked[0] if ranked else "Mid"


def describe_cluster(nodes: Sequence[MapNode]) -> str:
    tags: Dict[str, float] = {}
    patterns: Dict[str, float] = {}
    for node in nodes:
        for tag in node.profile.tags:
            tags[tag] = tags.get(tag, 0.0) + node.games
        pattern = node.profile.play_pattern
        patterns[pattern] = patterns.get(pattern, 0.0) + node.games

    ranked_tags = _ranked(tags)
    ranked_patterns = _ranked(patterns)
    tag = ranked_tags[0] if ranked_tags else ""
    pattern = ranked_patterns[0] if ranked_patterns else ""

    if tag and pattern:
        return f"{pattern} {tag}s"
    if tag:
        return f"{tag} Specialists"
    return f"{_dominant_role(nodes)} Cohort"


def extract_clusters(nodes: Sequence[MapNode]) -> List[Cluster]:
    """Partition ``nodes`` with k-means and summarise each group.

    Sets ``cluster_id`` on every node. Clusters come back ordered by total
    games, largest first.
    """
    if not nodes:
        return []

    k = choose_cluster_count(len(nodes))
    labels = kmeans([node.vector for node in nodes], k)

    groups: Dict[int, List[MapNode]] = defaultdict(list)
    for node, label in zip(nodes, labels):
        node.cluster_id = f"cluster-{label}"
        groups[label].append(node)

    grand_total = sum(node.games for node in nodes)
    summaries: List[Cluster] = []
    for label, members in groups.items():
        total = sum(m.games for m in members)
        win_rate = sum(m.win_rate * m.games for m in members) / (total or 1)
        role = _dominant_role(members)
        summaries.append(
            Cluster(
                id=f"cluster-{label}",
                theme=describe_cluster(members),
                members=tuple(m.id for m in members),
                role=role,
                win_rate=win_rate,
                game_share=(total / grand_total) if grand_total else len(members) / len(nodes),
                color=role_color(role),
                total_games=total,
            )
        )

    summaries.sort(key=lambda c: c.total_games, reverse=True)
    return summaries


def cluster_cohesion(nodes: Sequence[MapNode]) -> float:
    """Silhouette score of the current partition, or 0.0 when undefined."""
    labels = [node.cluster_id for node in nodes]
    distinct = len(set(labels))
    if distinct < 2 or distinct >= len(nodes):
        return 0.0
    return float(silhouette_score([list(node.vector) for node in nodes], labels))
