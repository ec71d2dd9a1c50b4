"""Domain enumerations."""

from enum import Enum, auto


class DiagnosticLevel(Enum):
    """Diagnostic severity."""

    DEBUG = "debug"  # trace, shown only in verbose output
    WARN = "warn"  # non-fatal problem, analysis continues


class DiagnosticKind(Enum):
    """What a diagnostic reports."""

    CLASSIFIED = auto()  # unit matched a declared layer
    UNCLASSIFIED = auto()  # unit fell back to unknown
    UNKNOWN_IMPORT = auto()  # unit imports an unknown-layer unit
    LAYER_EDGE = auto()  # layer dependency evaluated


class EdgeKind(Enum):
    """Kind of dependency edge."""

    LAYER = "layer"
    EXTERNAL = "external"
