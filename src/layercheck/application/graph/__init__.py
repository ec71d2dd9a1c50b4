"""Import graph construction."""

from layercheck.application.graph.builder import DependencyGraph, ImportGraphBuilder

__all__ = [
    "DependencyGraph",
    "ImportGraphBuilder",
]
