"""Layer classification."""

from layercheck.application.classification.classifier import Classification, LayerClassifier

__all__ = [
    "Classification",
    "LayerClassifier",
]
