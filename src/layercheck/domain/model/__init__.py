"""Domain model: immutable value objects and aggregates."""

from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.check_stats import CheckStats
from layercheck.domain.model.configuration import DependencyRule, LayerConfig
from layercheck.domain.model.diagnostic import Diagnostic
from layercheck.domain.model.enums import DiagnosticKind, DiagnosticLevel, EdgeKind
from layercheck.domain.model.layer import (
    LAYER_ROOT,
    LAYER_UNKNOWN,
    RESERVED_LAYERS,
    LayerDefinition,
)
from layercheck.domain.model.scan_result import ScanIssue, ScanResult
from layercheck.domain.model.unit import SourceUnit, Unit
from layercheck.domain.model.verdict import Verdict

__all__ = [
    # Enums
    "DiagnosticLevel",
    "DiagnosticKind",
    "EdgeKind",
    # Layers
    "LAYER_ROOT",
    "LAYER_UNKNOWN",
    "RESERVED_LAYERS",
    "LayerDefinition",
    # Configuration
    "DependencyRule",
    "LayerConfig",
    # Units
    "SourceUnit",
    "Unit",
    "ScanIssue",
    "ScanResult",
    # Results
    "Diagnostic",
    "Verdict",
    "CheckStats",
    "CheckResult",
]
