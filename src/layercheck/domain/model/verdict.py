"""Verdict for a single evaluated dependency edge."""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.configuration import DependencyRule
from layercheck.domain.model.enums import EdgeKind


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of evaluating one edge against the rule table.

    Immutable value object with FAIL-FIRST validation.
    rule is the governing (first matching) rule, None when no rule
    matched; an ungoverned edge is implicitly allowed.

    Attributes:
        kind: LAYER or EXTERNAL edge
        unit: Importing unit path
        layer: Importing unit layer
        target: Dependency layer (LAYER) or external import path (EXTERNAL)
        rule: Governing rule, or None
        rule_index: Position of the governing rule in the rule table
    """

    kind: EdgeKind
    unit: str
    layer: str
    target: str
    rule: DependencyRule | None = None
    rule_index: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.unit:
            raise ValueError("unit must not be empty")
        if not self.layer:
            raise ValueError("layer must not be empty")
        if not self.target:
            raise ValueError("target must not be empty")
        if (self.rule is None) != (self.rule_index is None):
            raise ValueError("rule and rule_index must be set together")
        if self.rule_index is not None and self.rule_index < 0:
            raise ValueError(f"rule_index must be >= 0, got {self.rule_index}")

    @property
    def governed(self) -> bool:
        """True if some rule matched this edge."""
        return self.rule is not None

    @property
    def allowed(self) -> bool:
        """True if ungoverned or governed by an allow rule."""
        return self.rule is None or self.rule.allow

    @property
    def is_violation(self) -> bool:
        return not self.allowed

    @property
    def label(self) -> str:
        """Violation label, e.g. "LAYER VIOLATION"."""
        return f"{self.kind.name} VIOLATION"

    def __str__(self) -> str:
        """Format as "<LABEL>: unit (layer) -> target"."""
        edge = f"{self.unit} ({self.layer}) -> {self.target}"
        if self.is_violation:
            return f"{self.label}: {edge}"
        return f"{self.kind.value} ok: {edge}"
