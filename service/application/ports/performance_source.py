"""Port (interface) for the champion performance source."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class PerformanceSourcePort(ABC):
    """Port for loading a player's per-champion performance history."""

    @abstractmethod
    def load_player_stats(self, player_id: str) -> Dict[str, Any]:
        """Load the stats payload for a player.

        Args:
            player_id: Player identifier (e.g. a Riot ID or puuid)

        Returns:
            Player stats dictionary with ``topChampions`` and optionally
            ``avgGameDuration``

        Raises:
            FileNotFoundError: If the player has no stored history
            ValueError: If the stored payload is malformed
        """
        ...
