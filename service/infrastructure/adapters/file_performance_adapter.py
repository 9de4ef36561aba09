"""Adapter reading stored player stats from JSON files."""

import json
import re
from pathlib import Path
from typing import Any, Dict

from stylemap.config import data_dir_from_env

from ...application.ports.performance_source import PerformanceSourcePort

_SAFE_ID = re.compile(r"[^A-Za-z0-9_\-#]")


class FilePerformanceAdapter(PerformanceSourcePort):
    """Performance source backed by ``<data_dir>/<player_id>.json`` files."""

    def __init__(self, data_dir: Path | None = None):
        """Initialize with a data directory.

        Args:
            data_dir: Directory of player JSON files. If None, uses
                ``STYLEMAP_DATA_DIR``.
        """
        self._data_dir = Path(data_dir) if data_dir is not None else data_dir_from_env()

    def _path_for(self, player_id: str) -> Path:
        safe = _SAFE_ID.sub("_", player_id)
        return self._data_dir / f"{safe}.json"

    def load_player_stats(self, player_id: str) -> Dict[str, Any]:
        path = self._path_for(player_id)
        if not path.exists():
            raise FileNotFoundError(f"No stored history for player '{player_id}'")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed stats file for player '{player_id}': {e}") from e
        if isinstance(data, list):
            return {"topChampions": data}
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected stats payload for player '{player_id}'")
        return data
