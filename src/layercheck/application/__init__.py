"""Application layer for layer analysis.

Components:
- classification: Unit -> layer by path patterns
- graph: Raw imports -> layer and external dependency sets
- evaluation: First-match allow/deny rule evaluation
- reporters: Output formatting (PlainText, JSON, rich Console)
- services: Main facade (LayerChecker)
"""

from layercheck.application.classification import Classification, LayerClassifier
from layercheck.application.evaluation import Evaluation, RuleEvaluator
from layercheck.application.graph import DependencyGraph, ImportGraphBuilder
from layercheck.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from layercheck.application.services import LayerChecker

__all__ = [
    # Classification
    "Classification",
    "LayerClassifier",
    # Graph
    "DependencyGraph",
    "ImportGraphBuilder",
    # Evaluation
    "Evaluation",
    "RuleEvaluator",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    # Services
    "LayerChecker",
]
