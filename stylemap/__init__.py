"""Champion style map engine package."""

__all__ = [
    "config",
    "champions",
    "normalize",
    "features",
    "graph",
    "layout",
    "clusters",
    "insights",
    "engine",
    "render",
]
