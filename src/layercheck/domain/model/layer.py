"""Layer definition and reserved layer names."""

from dataclasses import dataclass

LAYER_ROOT = "root"
"""Unit at a module root that matches no declared layer."""

LAYER_UNKNOWN = "unknown"
"""Any other unit that matches no declared layer."""

RESERVED_LAYERS = frozenset({LAYER_ROOT, LAYER_UNKNOWN})


@dataclass(frozen=True, slots=True)
class LayerDefinition:
    """Declared architectural layer.

    Immutable value object with FAIL-FIRST validation.
    Layers are flat: no nesting, no hierarchy.

    Attributes:
        name: Layer name (must not be a reserved name)
        patterns: Glob patterns tested against module-relative unit paths,
            in declaration order
    """

    name: str
    patterns: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("layer name must not be empty")
        if self.name in RESERVED_LAYERS:
            raise ValueError(f"layer name '{self.name}' is reserved")
        if not isinstance(self.patterns, tuple):
            raise TypeError("patterns must be a tuple")
        if any(not p for p in self.patterns):
            raise ValueError(f"layer '{self.name}' has an empty pattern")
