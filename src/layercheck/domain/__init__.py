"""layercheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, functools
"""

from layercheck.domain.exceptions import (
    ConfigError,
    InvalidPatternError,
    LayerCheckError,
    ModuleResolutionError,
    ParsingError,
    ScanError,
)
from layercheck.domain.model import (
    LAYER_ROOT,
    LAYER_UNKNOWN,
    CheckResult,
    CheckStats,
    DependencyRule,
    Diagnostic,
    DiagnosticKind,
    DiagnosticLevel,
    EdgeKind,
    LayerConfig,
    LayerDefinition,
    ScanIssue,
    ScanResult,
    SourceUnit,
    Unit,
    Verdict,
)
from layercheck.domain.patterns import CompiledGlob, compile_glob, glob_match, rule_match
from layercheck.domain.ports import ReporterProtocol, SourceUnitsPort

__all__ = [
    # Exceptions
    "LayerCheckError",
    "ConfigError",
    "InvalidPatternError",
    "ParsingError",
    "ModuleResolutionError",
    "ScanError",
    # Patterns
    "CompiledGlob",
    "compile_glob",
    "glob_match",
    "rule_match",
    # Model
    "LAYER_ROOT",
    "LAYER_UNKNOWN",
    "DiagnosticLevel",
    "DiagnosticKind",
    "EdgeKind",
    "LayerDefinition",
    "DependencyRule",
    "LayerConfig",
    "SourceUnit",
    "Unit",
    "ScanIssue",
    "ScanResult",
    "Diagnostic",
    "Verdict",
    "CheckStats",
    "CheckResult",
    # Ports
    "SourceUnitsPort",
    "ReporterProtocol",
]
