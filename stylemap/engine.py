from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .clusters import Cluster, cluster_cohesion, extract_clusters
from .config import MapOptions
from .features import MapNode, Point, build_nodes
from .graph import Edge, build_edges
from .insights import (
    MapInsights,
    build_cluster_payload,
    build_coach_summary,
    center_role,
    compute_centroid,
    diversity_index,
    experimentation_rate,
    find_outliers,
    mark_off_meta,
)
from .layout import force_layout
from .normalize import PerformanceRecord, records_from_player_stats

logger = logging.getLogger(__name__)


@dataclass
class MapResult:
    nodes: List[MapNode]
    edges: List[Edge]
    centroid: Point
    outliers: List[MapNode]
    clusters: List[Cluster]
    insights: MapInsights
    cluster_payload: Dict[str, Any] = field(default_factory=dict)
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def empty_result(options: MapOptions) -> MapResult:
    return MapResult(
        nodes=[],
        edges=[],
        centroid=Point(options.width / 2, options.height / 2),
        outliers=[],
        clusters=[],
        insights=MapInsights(
            dominant_cluster_share=0.0,
            diversity_index=0.0,
            experimentation_rate=0.0,
            outlier_count=0,
            center_role="Mid",
        ),
        cluster_payload={"clusters": [], "outliers": []},
        summary=(
            "We need more data to map your style: play at least "
            f"{options.min_games} games on a few champions to unlock it."
        ),
    )


def build_style_map(
    records: Sequence[PerformanceRecord],
    options: Optional[MapOptions] = None,
) -> MapResult:
    """Build the champion style map for one player's pool.

    records -> feature vectors -> similarity graph -> layout -> clusters ->
    insights. Deterministic for a given record order and options.
    """
    options = options or MapOptions()
    nodes = build_nodes(records, options)
    logger.debug(f"style map: {len(nodes)} of {len(records)} champions meet min_games={options.min_games}")
    if not nodes:
        return empty_result(options)

    edges = build_edges(nodes)
    force_layout(nodes, edges, options.width, options.height)

    centroid = compute_centroid(nodes)
    outliers = find_outliers(nodes, centroid)
    mark_off_meta(nodes, outliers)

    clusters = extract_clusters(nodes)
    logger.debug(f"style map: {len(edges)} edges, {len(clusters)} clusters, {len(outliers)} outliers")

    insights = MapInsights(
        dominant_cluster_share=clusters[0].game_share if clusters else 0.0,
        diversity_index=diversity_index(nodes),
        experimentation_rate=experimentation_rate(nodes, outliers),
        outlier_count=len(outliers),
        center_role=center_role(nodes, centroid),
        cluster_cohesion=cluster_cohesion(nodes),
    )

    return MapResult(
        nodes=nodes,
        edges=edges,
        centroid=centroid,
        outliers=outliers,
        clusters=clusters,
        insights=insights,
        cluster_payload=build_cluster_payload(clusters, outliers),
        summary=build_coach_summary(clusters, insights, outliers),
    )


def build_style_map_from_player(
    player: Dict[str, Any],
    options: Optional[MapOptions] = None,
) -> MapResult:
    records, duration = records_from_player_stats(player)
    options = (options or MapOptions()).merged(average_game_duration=duration)
    return build_style_map(records, options)
