"""Import graph builder: raw imports -> layer and external dependency sets."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from layercheck.domain.model.diagnostic import Diagnostic
from layercheck.domain.model.layer import LAYER_UNKNOWN

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from layercheck.domain.model.unit import Unit


@dataclass(frozen=True, slots=True)
class DependencyGraph:
    """Units annotated with dependency sets.

    Attributes:
        units: Units in path order, layer_deps/external_deps filled in
        diagnostics: One UNKNOWN_IMPORT warning per distinct
            (importer, unknown-layer unit) pair
    """

    units: tuple[Unit, ...]
    diagnostics: tuple[Diagnostic, ...]

    def by_path(self) -> Mapping[str, Unit]:
        """Immutable mapping unit path -> unit."""
        return MappingProxyType({u.path: u for u in self.units})


class ImportGraphBuilder:
    """Partitions imports into internal and external dependencies.

    An import is internal if it starts with any discovered module prefix,
    external otherwise. Internal imports are resolved by exact unit path;
    internal imports of units the scan never observed (outside the root,
    excluded) are dropped without an edge or a diagnostic.

    Stateless: one instance can build any number of graphs.
    """

    def build(self, units: Iterable[Unit]) -> DependencyGraph:
        """Fill layer_deps and external_deps of every unit.

        Requires the complete unit table: internal imports resolve only
        against units passed in the same call.

        Args:
            units: Classified units with raw imports

        Returns:
            DependencyGraph with annotated units in path order
        """
        ordered = sorted(units, key=lambda u: u.path)
        table = {u.path: u for u in ordered}
        prefixes = tuple(sorted({u.module for u in ordered}))

        built: list[Unit] = []
        diagnostics: list[Diagnostic] = []

        for unit in ordered:
            # dicts as insertion-ordered sets
            layer_deps: dict[str, None] = {}
            external_deps: dict[str, None] = {}
            unknown_targets: dict[str, None] = {}

            for imported in unit.imports:
                if not _is_internal(imported, prefixes):
                    external_deps[imported] = None
                    continue

                target = table.get(imported)
                if target is None:
                    continue

                layer_deps[target.layer] = None
                if target.layer == LAYER_UNKNOWN and imported not in unknown_targets:
                    unknown_targets[imported] = None
                    diagnostics.append(Diagnostic.unknown_import(unit.path, target.path))

            built.append(
                replace(
                    unit,
                    layer_deps=tuple(layer_deps),
                    external_deps=tuple(external_deps),
                )
            )

        return DependencyGraph(units=tuple(built), diagnostics=tuple(diagnostics))


def _is_internal(imported: str, prefixes: tuple[str, ...]) -> bool:
    """Textual prefix test against every known module prefix."""
    return any(imported.startswith(prefix) for prefix in prefixes)
