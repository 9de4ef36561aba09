from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .champions import DAMAGE_TYPES, RESOURCE_TYPES, ROLE_ORDER, StaticProfile, get_static_profile
from .config import DEFAULT_GAME_DURATION, MapOptions
from .normalize import PerformanceRecord

VECTOR_SIZE = len(ROLE_ORDER) + 1 + len(RESOURCE_TYPES) + len(DAMAGE_TYPES) + 4

# Scale divisors for the numeric tail of the vector
COMPLEXITY_SCALE = 10.0
AGGRESSION_SCALE = 10.0
GAME_LENGTH_SCALE = 40.0
WIN_RATE_Z_SCALE = 3.0


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class MapNode:
    id: str
    name: str
    games: int
    win_rate: float
    avg_kda: float
    cs_per_min: float
    damage_share: float
    profile: StaticProfile
    aggression_score: float
    average_game_length: float
    win_rate_z: float
    vector: Tuple[float, ...]
    position: Point = field(default_factory=Point)
    cluster_id: Optional[str] = None
    off_meta: bool = False

    @property
    def weight(self) -> float:
        return float(max(1, self.games))


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def compute_aggression_score(kills: float, deaths: float, assists: float) -> float:
    raw = ((kills * 2 + assists) / max(1.0, deaths)) * 1.25
    return _clamp(raw, 0.0, 10.0)


def z_score(value: float, mean: float, std: float) -> float:
    if not std:
        return 0.0
    return (value - mean) / std


def _one_hot(value: str, categories: Sequence[str]) -> List[float]:
    return [1.0 if value == c else 0.0 for c in categories]


def make_feature_vector(
    record: PerformanceRecord,
    profile: StaticProfile,
    game_length: float,
    win_rate_z: float,
) -> Tuple[float, ...]:
    aggression = compute_aggression_score(record.avg_kills, record.avg_deaths, record.avg_assists)
    vec: List[float] = []
    vec.extend(_one_hot(profile.role, ROLE_ORDER))
    vec.append(1.0 if profile.is_ranged else 0.0)
    vec.extend(_one_hot(profile.resource, RESOURCE_TYPES))
    vec.extend(_one_hot(profile.damage_type, DAMAGE_TYPES))
    vec.append(profile.complexity / COMPLEXITY_SCALE)
    vec.append(aggression / AGGRESSION_SCALE)
    vec.append(game_length / GAME_LENGTH_SCALE)
    vec.append(win_rate_z / WIN_RATE_Z_SCALE)
    return tuple(vec)


def _population_stats(values: Sequence[float]) -> Tuple[float, float]:
    n = len(values) or 1
    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    return mean, math.sqrt(variance)


def build_nodes(records: Sequence[PerformanceRecord], options: MapOptions) -> List[MapNode]:
    filtered = [r for r in records if r.games >= options.min_games]
    if not filtered:
        return []

    game_length = options.average_game_duration or DEFAULT_GAME_DURATION
    total_damage = sum(r.avg_damage or 0.0 for r in filtered) or 1.0
    mean, std = _population_stats([r.win_rate for r in filtered])

    nodes: List[MapNode] = []
    for r in filtered:
        profile = get_static_profile(r.name)
        win_rate_z = z_score(r.win_rate, mean, std)
        nodes.append(
            MapNode(
                id=r.name,
                name=r.name,
                games=r.games,
                win_rate=r.win_rate,
                avg_kda=(r.avg_kills + r.avg_assists) / max(1.0, r.avg_deaths),
                cs_per_min=r.avg_cs / max(1.0, game_length),
                damage_share=(r.avg_damage or 0.0) / total_damage,
                profile=profile,
                aggression_score=compute_aggression_score(r.avg_kills, r.avg_deaths, r.avg_assists),
                average_game_length=game_length,
                win_rate_z=win_rate_z,
                vector=make_feature_vector(r, profile, game_length, win_rate_z),
            )
        )
    return nodes
