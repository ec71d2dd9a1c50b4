"""Check statistics for layer analysis results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from a layer check.

    Immutable value object tracking analysis metrics.

    Attributes:
        units_analyzed: Number of classified units
        edges_evaluated: Number of layer and external edges evaluated
        rules_loaded: Number of dependency rules in the rule table
        analysis_time_ms: Total analysis time in milliseconds
    """

    units_analyzed: int
    edges_evaluated: int
    rules_loaded: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.units_analyzed < 0:
            raise ValueError(f"units_analyzed must be >= 0, got {self.units_analyzed}")
        if self.edges_evaluated < 0:
            raise ValueError(f"edges_evaluated must be >= 0, got {self.edges_evaluated}")
        if self.rules_loaded < 0:
            raise ValueError(f"rules_loaded must be >= 0, got {self.rules_loaded}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            units_analyzed=0,
            edges_evaluated=0,
            rules_loaded=0,
            analysis_time_ms=0.0,
        )
