from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


DEFAULT_GAME_DURATION = 31.0
DEFAULT_MIN_GAMES = 4
DEFAULT_WIDTH = 960.0
DEFAULT_HEIGHT = 560.0

DEFAULT_DATA_DIR = ".data/players"


@dataclass(frozen=True)
class MapOptions:
    average_game_duration: float = DEFAULT_GAME_DURATION
    min_games: int = DEFAULT_MIN_GAMES
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT

    def merged(
        self,
        average_game_duration: Optional[float] = None,
        min_games: Optional[int] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> "MapOptions":
        out = self
        if average_game_duration is not None:
            # a zero duration means "unknown" upstream
            out = replace(out, average_game_duration=float(average_game_duration or DEFAULT_GAME_DURATION))
        if min_games is not None:
            out = replace(out, min_games=int(min_games))
        if width is not None:
            out = replace(out, width=float(width))
        if height is not None:
            out = replace(out, height=float(height))
        return out


def _env_number(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def options_from_env() -> MapOptions:
    return MapOptions(
        average_game_duration=_env_number("STYLEMAP_GAME_DURATION", DEFAULT_GAME_DURATION)
        or DEFAULT_GAME_DURATION,
        min_games=int(_env_number("STYLEMAP_MIN_GAMES", DEFAULT_MIN_GAMES)),
        width=_env_number("STYLEMAP_WIDTH", DEFAULT_WIDTH),
        height=_env_number("STYLEMAP_HEIGHT", DEFAULT_HEIGHT),
    )


def data_dir_from_env() -> Path:
    return Path(os.environ.get("STYLEMAP_DATA_DIR", DEFAULT_DATA_DIR))
