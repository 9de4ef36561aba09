"""Force-directed placement of map nodes.

Nodes start on a circle and are pushed apart by pairwise repulsion while
similarity edges act as springs toward a fixed rest length. Heavier nodes
(more games) move less. The simulation always runs the full iteration budget,
so the result is reproducible for a given input order but will differ if the
input is reordered.
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence

from .features import MapNode, Point
from .graph import Edge

ITERATIONS = 220
REPULSION = 3600.0
ATTRACTION = 0.05
REST_LENGTH = 120.0
DAMPING = 0.9
MARGIN = 40.0
MIN_DISTANCE = 0.001


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def initial_positions(n: int, width: float, height: float) -> List[Point]:
    cx = width / 2
    cy = height / 2
    radius = width / 4
    out: List[Point] = []
    for idx in range(n):
        angle = (idx / n) * math.pi * 2
        out.append(Point(cx + math.cos(angle) * radius, cy + math.sin(angle) * radius))
    return out


def force_layout(
    nodes: Sequence[MapNode],
    edges: Sequence[Edge],
    width: float,
    height: float,
    iterations: int = ITERATIONS,
) -> None:
    """Position ``nodes`` in place within ``[MARGIN, size - MARGIN]``."""
    n = len(nodes)
    if n == 0:
        return

    for node, start in zip(nodes, initial_positions(n, width, height)):
        node.position = start

    index: Dict[str, int] = {}
    for i, node in enumerate(nodes):
        index.setdefault(node.id, i)
    springs = [
        (index[e.source], index[e.target], e.similarity)
        for e in edges
        if e.source in index and e.target in index
    ]

    vx = [0.0] * n
    vy = [0.0] * n
    weights = [node.weight for node in nodes]

    for _ in range(iterations):
        for a in range(n):
            pa = nodes[a].position
            for b in range(a + 1, n):
                pb = nodes[b].position
                dx = pa.x - pb.x
                dy = pa.y - pb.y
                dist = max(math.sqrt(dx * dx + dy * dy), MIN_DISTANCE)
                force = REPULSION * (nodes[a].games + nodes[b].games) / (dist * dist)
                fx = force * dx / dist
                fy = force * dy / dist
                vx[a] += fx / weights[a]
                vy[a] += fy / weights[a]
                vx[b] -= fx / weights[b]
                vy[b] -= fy / weights[b]

        for s, t, similarity in springs:
            ps = nodes[s].position
            pt = nodes[t].position
            dx = pt.x - ps.x
            dy = pt.y - ps.y
            dist = max(math.sqrt(dx * dx + dy * dy), MIN_DISTANCE)
            desire = (dist - REST_LENGTH) * ATTRACTION * similarity
            fx = desire * dx / dist
            fy = desire * dy / dist
            vx[s] += fx / weights[s]
            vy[s] += fy / weights[s]
            vx[t] -= fx / weights[t]
            vy[t] -= fy / weights[t]

        for i, node in enumerate(nodes):
            pos = node.position
            pos.x = _clamp(pos.x + vx[i], MARGIN, width - MARGIN)
            pos.y = _clamp(pos.y + vy[i], MARGIN, height - MARGIN)
            vx[i] *= DAMPING
            vy[i] *= DAMPING
