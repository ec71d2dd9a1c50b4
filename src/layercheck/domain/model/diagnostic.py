"""Diagnostic records emitted during classification and evaluation."""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.enums import DiagnosticKind, DiagnosticLevel

_REQUIRED_TARGET = frozenset({DiagnosticKind.UNKNOWN_IMPORT, DiagnosticKind.LAYER_EDGE})
_REQUIRED_LAYER = frozenset({DiagnosticKind.CLASSIFIED, DiagnosticKind.LAYER_EDGE})


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Non-fatal diagnostic.

    Immutable value object with FAIL-FIRST validation.
    Reporters decide whether and how to render it.

    Attributes:
        level: DEBUG or WARN
        kind: What is being reported
        unit: Unit the diagnostic is about
        layer: Unit layer (CLASSIFIED, LAYER_EDGE)
        target: Imported unit (UNKNOWN_IMPORT) or dependency layer (LAYER_EDGE)
    """

    level: DiagnosticLevel
    kind: DiagnosticKind
    unit: str
    layer: str | None = None
    target: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.unit:
            raise ValueError("unit must not be empty")
        if self.kind in _REQUIRED_LAYER and not self.layer:
            raise ValueError(f"{self.kind.name} diagnostic requires layer")
        if self.kind in _REQUIRED_TARGET and not self.target:
            raise ValueError(f"{self.kind.name} diagnostic requires target")

    @classmethod
    def classified(cls, unit: str, layer: str) -> Diagnostic:
        return cls(DiagnosticLevel.DEBUG, DiagnosticKind.CLASSIFIED, unit, layer=layer)

    @classmethod
    def unclassified(cls, unit: str) -> Diagnostic:
        return cls(DiagnosticLevel.WARN, DiagnosticKind.UNCLASSIFIED, unit)

    @classmethod
    def unknown_import(cls, unit: str, imported: str) -> Diagnostic:
        return cls(DiagnosticLevel.WARN, DiagnosticKind.UNKNOWN_IMPORT, unit, target=imported)

    @classmethod
    def layer_edge(cls, unit: str, layer: str, dependency: str) -> Diagnostic:
        return cls(
            DiagnosticLevel.DEBUG,
            DiagnosticKind.LAYER_EDGE,
            unit,
            layer=layer,
            target=dependency,
        )

    @property
    def message(self) -> str:
        """Message text without level prefix."""
        match self.kind:
            case DiagnosticKind.CLASSIFIED:
                return f"pkg `{self.unit}` is in layer `{self.layer}`"
            case DiagnosticKind.UNCLASSIFIED:
                return f"pkg `{self.unit}` is in layer `UNKNOWN`"
            case DiagnosticKind.UNKNOWN_IMPORT:
                return f"pkg `{self.unit}` imports UNKNOWN `{self.target}`"
            case DiagnosticKind.LAYER_EDGE:
                return f"layer deps: {self.unit} ({self.layer}) -> {self.target}"

    @property
    def is_warning(self) -> bool:
        return self.level is DiagnosticLevel.WARN

    def __str__(self) -> str:
        """Format as "[level] message"."""
        return f"[{self.level.value}] {self.message}"
