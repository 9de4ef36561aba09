"""Transform engine map results to the frontend expected format."""

import logging
from typing import Any, Dict, List

from stylemap.champions import role_color
from stylemap.engine import MapResult
from stylemap.features import MapNode
from stylemap.graph import filter_edges

logger = logging.getLogger(__name__)


def _to_camel_case(snake_str: str) -> str:
    """Convert snake_case to camelCase."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def _camelize(value: Any) -> Any:
    """Recursively camelCase dictionary keys."""
    if isinstance(value, dict):
        return {_to_camel_case(str(k)): _camelize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_camelize(v) for v in value]
    return value


def _transform_node(node: MapNode) -> Dict[str, Any]:
    profile = node.profile
    return {
        "id": node.id,
        "name": node.name,
        "games": node.games,
        "winRate": node.win_rate,
        "avgKDA": node.avg_kda,
        "avgCSPerMin": node.cs_per_min,
        "damageShare": node.damage_share,
        "aggressionScore": node.aggression_score,
        "position": {"x": node.position.x, "y": node.position.y},
        "clusterId": node.cluster_id,
        "offMeta": node.off_meta,
        "color": role_color(profile.role),
        "metadata": {
            "role": profile.role,
            "range": profile.range,
            "resource": profile.resource,
            "damageType": profile.damage_type,
            "complexity": profile.complexity,
            "tags": list(profile.tags),
            "playPattern": profile.play_pattern,
        },
    }


def transform_map_to_frontend(
    result: MapResult,
    meta: Dict[str, Any] | None = None,
    link_threshold: float | None = None,
) -> Dict[str, Any]:
    """Transform an engine map result to the frontend format.

    Args:
        result: Map result from the style map engine
        meta: Request metadata
        link_threshold: Optional display filter on edge similarity

    Returns:
        Frontend-compatible style map
    """
    edges = result.edges
    if link_threshold is not None:
        edges = filter_edges(edges, link_threshold)
        logger.info(f"Filtered links {len(result.edges)} -> {len(edges)} at threshold {link_threshold}")

    links: List[Dict[str, Any]] = [
        {
            "source": e.source,
            "target": e.target,
            "similarity": e.similarity,
            "sharedTraits": list(e.shared_traits),
        }
        for e in edges
    ]
    clusters = [
        {
            "id": c.id,
            "theme": c.theme,
            "champions": list(c.members),
            "role": c.role,
            "winRate": c.win_rate,
            "gameShare": c.game_share,
            "color": c.color,
        }
        for c in result.clusters
    ]

    return {
        "nodes": [_transform_node(n) for n in result.nodes],
        "links": links,
        "centroid": {"x": result.centroid.x, "y": result.centroid.y},
        "outliers": [n.id for n in result.outliers],
        "clusters": clusters,
        "insights": _camelize(
            {
                "dominant_cluster_share": result.insights.dominant_cluster_share,
                "diversity_index": result.insights.diversity_index,
                "experimentation_rate": result.insights.experimentation_rate,
                "outlier_count": result.insights.outlier_count,
                "center_role": result.insights.center_role,
                "cluster_cohesion": result.insights.cluster_cohesion,
            }
        ),
        "clusterPayload": _camelize(result.cluster_payload),
        "coachSummary": result.summary,
        "meta": _camelize(meta or {}),
    }
