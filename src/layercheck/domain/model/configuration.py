"""Checker configuration: layers, dependency rules, excluded directories."""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.layer import LayerDefinition
from layercheck.domain.patterns import rule_match


@dataclass(frozen=True, slots=True)
class DependencyRule:
    """Ordered allow/deny rule for a dependency edge.

    Patterns use the rule dialect (exact, or prefix before the first *).
    See layercheck.domain.patterns.rule_match.

    Attributes:
        source: Pattern for the importing unit's layer (config key "from")
        target: Pattern for the dependency layer or external import ("to")
        allow: Whether a matching edge is permitted
    """

    source: str
    target: str
    allow: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("rule source must not be empty")
        if not self.target:
            raise ValueError("rule target must not be empty")
        if not isinstance(self.allow, bool):
            raise TypeError("allow must be bool")

    def matches(self, layer: str, candidate: str) -> bool:
        """Check if rule governs edge layer -> candidate."""
        return rule_match(layer, self.source) and rule_match(candidate, self.target)

    def __str__(self) -> str:
        verb = "allow" if self.allow else "deny"
        return f"{verb} {self.source} -> {self.target}"


@dataclass(frozen=True, slots=True)
class LayerConfig:
    """Complete checker configuration.

    Immutable configuration object with FAIL-FIRST validation.
    Order of layers and rules is significant and preserved exactly.

    Attributes:
        layers: Declared layers, in classification order
        dependency_rules: Rules, first match wins
        exclude_dirs: Glob patterns for directories pruned before scanning
    """

    layers: tuple[LayerDefinition, ...] = ()
    dependency_rules: tuple[DependencyRule, ...] = ()
    exclude_dirs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        names = [layer.name for layer in self.layers]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate layer names: {duplicates}")
        if any(not p for p in self.exclude_dirs):
            raise ValueError("exclude_dirs must not contain empty patterns")

    @property
    def layer_names(self) -> tuple[str, ...]:
        """Declared layer names in declaration order."""
        return tuple(layer.name for layer in self.layers)
