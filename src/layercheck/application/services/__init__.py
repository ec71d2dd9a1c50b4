"""Application services."""

from layercheck.application.services.checker import LayerChecker

__all__ = [
    "LayerChecker",
]
