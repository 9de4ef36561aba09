"""Use case for building champion style maps."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Dict, List

from stylemap.config import MapOptions
from stylemap.engine import MapResult, build_style_map
from stylemap.normalize import PerformanceRecord, records_from_player_stats

from ..ports.performance_source import PerformanceSourcePort

logger = logging.getLogger(__name__)

# Thread pool for the CPU-bound layout and clustering work
_executor = ThreadPoolExecutor(max_workers=4)


@dataclass
class BuildStyleMapRequest:
    """Request to build a style map.

    Either ``records`` are given directly or ``player_id`` is resolved
    through the performance source.
    """

    records: List[PerformanceRecord] = field(default_factory=list)
    player_id: str | None = None
    options: MapOptions = field(default_factory=MapOptions)


@dataclass
class BuildStyleMapResult:
    """Result of style map generation."""

    success: bool
    result: MapResult | None = None
    error: str | None = None
    error_code: str | None = None
    metadata: Dict[str, Any] | None = None


class BuildStyleMapUseCase:
    """Use case for building a champion style map.

    This orchestrates the process of:
    1. Loading performance records (when a player id is given)
    2. Running the style map engine off the event loop
    3. Packaging metadata for the response
    """

    def __init__(self, performance_source: PerformanceSourcePort | None = None):
        self._performance_source = performance_source

    async def execute(self, request: BuildStyleMapRequest) -> BuildStyleMapResult:
        """Execute the style map use case.

        Args:
            request: Style map request

        Returns:
            Style map result
        """
        loop = asyncio.get_event_loop()
        records = request.records
        options = request.options

        try:
            if request.player_id is not None:
                if self._performance_source is None:
                    return BuildStyleMapResult(
                        success=False,
                        error="No performance source configured.",
                        error_code="INTERNAL_ERROR",
                    )
                player = await loop.run_in_executor(
                    _executor,
                    partial(self._performance_source.load_player_stats, request.player_id),
                )
                records, duration = records_from_player_stats(player)
                options = options.merged(average_game_duration=duration)

            build_func = partial(build_style_map, records, options)
            result = await loop.run_in_executor(_executor, build_func)

        except FileNotFoundError as e:
            logger.info(f"No stored history for player {request.player_id}: {e}")
            return BuildStyleMapResult(success=False, error=str(e), error_code="PLAYER_NOT_FOUND")
        except ValueError as e:
            logger.error(f"Invalid performance data: {e}")
            return BuildStyleMapResult(success=False, error=str(e), error_code="INVALID_REQUEST")

        metadata = {
            "player_id": request.player_id,
            "champions_received": len(records),
            "champions_mapped": len(result.nodes),
            "min_games": options.min_games,
            "average_game_duration": options.average_game_duration,
        }
        return BuildStyleMapResult(success=True, result=result, metadata=metadata)
