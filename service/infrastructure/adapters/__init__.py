"""Infrastructure adapters."""

from .file_performance_adapter import FilePerformanceAdapter

__all__ = [
    "FilePerformanceAdapter",
]
