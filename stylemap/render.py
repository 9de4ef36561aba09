from __future__ import annotations

from typing import Any, Dict


def render_text(result: Dict[str, Any]) -> str:
    insights = result.get("insights", {})
    clusters = result.get("clusters", [])
    nodes = result.get("nodes", [])
    outliers = result.get("outliers", [])

    lines = []
    lines.append("CHAMPION STYLE MAP")
    lines.append(f"Champions mapped: {len(nodes)} | Links: {len(result.get('edges', []))}")
    lines.append(
        f"Diversity: {insights.get('diversity_index', 0):.2f} | "
        f"Experimentation: {insights.get('experimentation_rate', 0):.2f} | "
        f"Center role: {insights.get('center_role')}"
    )
    lines.append("")

    lines.append("Clusters")
    for c in clusters:
        lines.append(
            f"- {c.get('theme')} ({c.get('role')}): share {c.get('game_share', 0):.2f} | "
            f"winrate {c.get('win_rate', 0):.1f}"
        )
        lines.append("  champions: " + ", ".join(c.get("members") or []))

    if outliers:
        lines.append("")
        lines.append("Off-meta picks: " + ", ".join(o.get("name") or "" for o in outliers))

    lines.append("")
    lines.append(result.get("summary") or "")
    return "\n".join(lines)
