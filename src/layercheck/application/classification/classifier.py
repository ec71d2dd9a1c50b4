"""Layer classification by module-relative path.

Classification is a pure function of path shape: no code is inspected.
Cost is O(units x patterns).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.model.diagnostic import Diagnostic
from layercheck.domain.model.layer import LAYER_ROOT, LAYER_UNKNOWN
from layercheck.domain.model.unit import Unit
from layercheck.domain.patterns import CompiledGlob, compile_glob

if TYPE_CHECKING:
    from layercheck.domain.model.layer import LayerDefinition
    from layercheck.domain.model.unit import SourceUnit


@dataclass(frozen=True, slots=True)
class Classification:
    """Classified units plus the diagnostics emitted while classifying.

    Attributes:
        units: Units in path order
        diagnostics: One CLASSIFIED or UNCLASSIFIED per non-root unit
    """

    units: tuple[Unit, ...]
    diagnostics: tuple[Diagnostic, ...]


class LayerClassifier:
    """Maps units to declared layers.

    Layers are visited in declaration order and the first layer with a
    matching pattern wins, so a unit matching two layers always lands in
    the one declared first.

    Example:
        classifier = LayerClassifier(config.layers)
        classifier.classify("example.com/m/domain", "domain")  # "domain"
    """

    def __init__(self, layers: Iterable[LayerDefinition]) -> None:
        """Compile layer patterns.

        Args:
            layers: Declared layers in classification order

        Raises:
            InvalidPatternError: If any pattern is malformed
        """
        self._layers: tuple[tuple[str, tuple[CompiledGlob, ...]], ...] = tuple(
            (layer.name, tuple(compile_glob(p) for p in layer.patterns)) for layer in layers
        )

    @property
    def layer_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._layers)

    def resolve(self, relative_path: str) -> str | None:
        """Find the declared layer for a module-relative path.

        Returns:
            Name of the first declared layer with a matching pattern,
            None if no declared layer matches
        """
        for name, patterns in self._layers:
            for pattern in patterns:
                if pattern.match(relative_path):
                    return name
        return None

    def classify(self, unit_path: str, relative_path: str) -> str:
        """Assign a layer, falling back to root or unknown.

        Args:
            unit_path: Module-qualified unit identity (diagnostics only)
            relative_path: Path relative to the module root, "" for root

        Returns:
            Declared layer name, LAYER_ROOT or LAYER_UNKNOWN
        """
        layer = self.resolve(relative_path)
        if layer is not None:
            return layer
        if relative_path == "":
            return LAYER_ROOT
        return LAYER_UNKNOWN

    def classify_units(self, sources: Iterable[SourceUnit]) -> Classification:
        """Classify scanner output.

        Units are processed in path order so diagnostics are stable
        across runs.

        Args:
            sources: Units discovered by a scanner

        Returns:
            Classification with units and diagnostics
        """
        units: list[Unit] = []
        diagnostics: list[Diagnostic] = []

        for source in sorted(sources, key=lambda s: s.path):
            layer = self.classify(source.path, source.relative_path)
            if layer == LAYER_UNKNOWN:
                diagnostics.append(Diagnostic.unclassified(source.path))
            elif layer != LAYER_ROOT:
                diagnostics.append(Diagnostic.classified(source.path, layer))
            units.append(Unit.from_source(source, layer))

        return Classification(units=tuple(units), diagnostics=tuple(diagnostics))
