from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class PerformanceRecord:
    name: str
    games: int
    win_rate: float  # 0-100
    avg_kills: float
    avg_deaths: float
    avg_assists: float
    avg_cs: float
    avg_damage: Optional[float] = None


def _safe_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _safe_float(value: Any) -> float:
    try:
        return float(value or 0.0)
    except (TypeError, ValueError):
        return 0.0


def _first(item: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        val = item.get(key)
        if val is not None:
            return val
    return None


def _get_name(item: Dict[str, Any]) -> Optional[str]:
    for key in ("championName", "champion_name", "name", "champion", "character"):
        val = item.get(key)
        if val:
            if isinstance(val, dict):
                return val.get("name") or val.get("id")
            return str(val)
    return None


def record_from_dict(item: Dict[str, Any]) -> Optional[PerformanceRecord]:
    name = _get_name(item)
    if not name:
        return None
    damage = _first(item, "avgDamage", "avg_damage")
    return PerformanceRecord(
        name=name,
        games=_safe_int(_first(item, "games", "gamesPlayed", "games_played")),
        win_rate=_safe_float(_first(item, "winRate", "win_rate")),
        avg_kills=_safe_float(_first(item, "avgKills", "avg_kills")),
        avg_deaths=_safe_float(_first(item, "avgDeaths", "avg_deaths")),
        avg_assists=_safe_float(_first(item, "avgAssists", "avg_assists")),
        avg_cs=_safe_float(_first(item, "avgCS", "avgCs", "avg_cs")),
        avg_damage=_safe_float(damage) if damage is not None else None,
    )


def records_from_json(items: Iterable[Dict[str, Any]]) -> List[PerformanceRecord]:
    out: List[PerformanceRecord] = []
    for item in items or []:
        if not isinstance(item, dict):
            continue
        record = record_from_dict(item)
        if record is not None:
            out.append(record)
    return out


def records_to_json(records: Iterable[PerformanceRecord]) -> List[Dict[str, Any]]:
    return [
        {
            "championName": r.name,
            "games": r.games,
            "winRate": r.win_rate,
            "avgKills": r.avg_kills,
            "avgDeaths": r.avg_deaths,
            "avgAssists": r.avg_assists,
            "avgCS": r.avg_cs,
            "avgDamage": r.avg_damage,
        }
        for r in records
    ]


def records_from_player_stats(player: Dict[str, Any]) -> Tuple[List[PerformanceRecord], Optional[float]]:
    """Split a player stats payload into champion records and game duration.

    The duration is ``None`` when the payload does not carry a usable one.
    """
    records = records_from_json(player.get("topChampions") or player.get("top_champions") or [])
    duration = _safe_float(_first(player, "avgGameDuration", "avg_game_duration"))
    return records, (duration or None)


def load_sample_records() -> List[PerformanceRecord]:
    path = Path(__file__).with_name("sample_champions.json")
    return records_from_json(json.loads(path.read_text(encoding="utf-8")))
