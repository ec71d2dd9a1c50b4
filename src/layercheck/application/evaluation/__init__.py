"""Dependency rule evaluation."""

from layercheck.application.evaluation.evaluator import Evaluation, RuleEvaluator

__all__ = [
    "Evaluation",
    "RuleEvaluator",
]
