"""Application ports (interfaces)."""

from .performance_source import PerformanceSourcePort

__all__ = [
    "PerformanceSourcePort",
]
