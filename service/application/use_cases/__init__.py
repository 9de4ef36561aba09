"""Application use cases."""

from .build_style_map import (
    BuildStyleMapRequest,
    BuildStyleMapResult,
    BuildStyleMapUseCase,
)

__all__ = [
    "BuildStyleMapRequest",
    "BuildStyleMapResult",
    "BuildStyleMapUseCase",
]
