"""REST API routes for champion style maps."""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from stylemap.config import MapOptions, options_from_env
from stylemap.normalize import PerformanceRecord, load_sample_records

from ..transformers.map_transformer import transform_map_to_frontend
from ...application.use_cases.build_style_map import (
    BuildStyleMapRequest,
    BuildStyleMapResult,
    BuildStyleMapUseCase,
)
from ...infrastructure.adapters.file_performance_adapter import FilePerformanceAdapter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["style-map"])

_STATUS_BY_CODE = {
    "PLAYER_NOT_FOUND": 404,
    "INVALID_REQUEST": 400,
}


class ChampionRecordIn(BaseModel):
    """Aggregated performance on one champion."""

    champion_name: str = Field(..., alias="championName", min_length=1)
    games: int = Field(..., ge=0, description="Games played")
    win_rate: float = Field(..., alias="winRate", ge=0, le=100, description="Win rate (0-100)")
    avg_kills: float = Field(0.0, alias="avgKills", ge=0)
    avg_deaths: float = Field(0.0, alias="avgDeaths", ge=0)
    avg_assists: float = Field(0.0, alias="avgAssists", ge=0)
    avg_cs: float = Field(0.0, alias="avgCS", ge=0)
    avg_damage: Optional[float] = Field(default=None, alias="avgDamage", ge=0)

    class Config:
        populate_by_name = True

    def to_record(self) -> PerformanceRecord:
        return PerformanceRecord(
            name=self.champion_name,
            games=self.games,
            win_rate=self.win_rate,
            avg_kills=self.avg_kills,
            avg_deaths=self.avg_deaths,
            avg_assists=self.avg_assists,
            avg_cs=self.avg_cs,
            avg_damage=self.avg_damage,
        )


class MapOptionsIn(BaseModel):
    """Optional overrides for the map build."""

    average_game_duration: Optional[float] = Field(default=None, alias="averageGameDuration", gt=0)
    min_games: Optional[int] = Field(default=None, alias="minGames", ge=0)
    width: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)

    class Config:
        populate_by_name = True

    def apply(self, base: MapOptions) -> MapOptions:
        return base.merged(
            average_game_duration=self.average_game_duration,
            min_games=self.min_games,
            width=self.width,
            height=self.height,
        )


class StyleMapRequest(BaseModel):
    """Request body for building a style map."""

    records: List[ChampionRecordIn] = Field(default_factory=list)
    options: Optional[MapOptionsIn] = None


def _raise_for(result: BuildStyleMapResult, details: dict) -> None:
    code = result.error_code or "INTERNAL_ERROR"
    raise HTTPException(
        status_code=_STATUS_BY_CODE.get(code, 500),
        detail={
            "error": {
                "code": code,
                "message": result.error or "Failed to build style map",
                "details": details,
            }
        },
    )


async def _run(
    request: BuildStyleMapRequest,
    use_case: BuildStyleMapUseCase,
    link_threshold: Optional[float],
    details: dict,
) -> dict:
    try:
        result = await use_case.execute(request)
    except Exception as e:
        logger.error(f"Error building style map: {e}")
        raise HTTPException(
            status_code=500,
            detail={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": f"Error building style map: {str(e)}",
                    "details": details,
                }
            },
        )

    if not result.success or result.result is None:
        _raise_for(result, details)

    return transform_map_to_frontend(result.result, result.metadata, link_threshold)


@router.post("/style-map")
async def build_map(
    body: StyleMapRequest,
    link_threshold: Optional[float] = Query(None, alias="linkThreshold", ge=0, le=1),
):
    """Build a style map from posted champion records.

    Args:
        body: Champion records and optional option overrides
        link_threshold: Optional display filter on link similarity

    Returns:
        Style map in frontend format
    """
    options = options_from_env()
    if body.options:
        options = body.options.apply(options)
    request = BuildStyleMapRequest(
        records=[r.to_record() for r in body.records],
        options=options,
    )
    logger.info(f"Building style map for {len(request.records)} posted champions")
    return await _run(request, BuildStyleMapUseCase(), link_threshold, {})


@router.get("/players/{player_id}/style-map")
async def get_player_map(
    player_id: str,
    min_games: Optional[int] = Query(None, alias="minGames", ge=0),
    link_threshold: Optional[float] = Query(None, alias="linkThreshold", ge=0, le=1),
):
    """Build a style map from a player's stored history.

    Args:
        player_id: Player identifier
        min_games: Override for the minimum games filter
        link_threshold: Optional display filter on link similarity

    Returns:
        Style map in frontend format
    """
    use_case = BuildStyleMapUseCase(FilePerformanceAdapter())
    request = BuildStyleMapRequest(
        player_id=player_id,
        options=options_from_env().merged(min_games=min_games),
    )
    logger.info(f"Building style map for player {player_id}")
    return await _run(request, use_case, link_threshold, {"playerId": player_id})


@router.get("/style-map/sample")
async def get_sample_map(
    link_threshold: Optional[float] = Query(None, alias="linkThreshold", ge=0, le=1),
):
    """Build the style map of the bundled demo champion pool."""
    request = BuildStyleMapRequest(records=load_sample_records(), options=options_from_env())
    return await _run(request, BuildStyleMapUseCase(), link_threshold, {"sample": True})
