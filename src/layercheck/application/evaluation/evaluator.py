"""Dependency rule evaluator.

Checks every layer edge and every external edge of every unit against
the ordered rule table. The first rule whose from-pattern matches the
unit's layer and whose to-pattern matches the dependency governs the
edge. No matching rule means the edge is implicitly allowed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from layercheck.domain.model.diagnostic import Diagnostic
from layercheck.domain.model.enums import EdgeKind
from layercheck.domain.model.verdict import Verdict

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import DependencyRule, LayerConfig
    from layercheck.domain.model.unit import Unit


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Verdicts plus trace diagnostics.

    Attributes:
        verdicts: One verdict per edge (allowed or not), in evaluation order
        diagnostics: One LAYER_EDGE trace per layer edge
    """

    verdicts: tuple[Verdict, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def violations(self) -> tuple[Verdict, ...]:
        return tuple(v for v in self.verdicts if v.is_violation)


class RuleEvaluator:
    """First-match allow/deny evaluation.

    Declaration order is the only precedence: rules are never re-sorted
    by specificity, so a broad early rule shadows a narrow later one.

    Example:
        evaluator = RuleEvaluator(config.dependency_rules)
        evaluation = evaluator.evaluate(graph.units)
        for verdict in evaluation.violations:
            print(verdict)
    """

    def __init__(self, rules: Sequence[DependencyRule]) -> None:
        self._rules = tuple(rules)

    @classmethod
    def from_config(cls, config: LayerConfig) -> Self:
        return cls(config.dependency_rules)

    @property
    def rules(self) -> tuple[DependencyRule, ...]:
        return self._rules

    def governing_rule(self, layer: str, candidate: str) -> tuple[int, DependencyRule] | None:
        """Find the first rule governing edge layer -> candidate.

        Args:
            layer: Importing unit's layer
            candidate: Dependency layer or external import path

        Returns:
            (index, rule) of the first match, None if no rule matches
        """
        for index, rule in enumerate(self._rules):
            if rule.matches(layer, candidate):
                return index, rule
        return None

    def check_edge(self, unit: Unit, kind: EdgeKind, candidate: str) -> Verdict:
        """Evaluate one edge of unit."""
        governing = self.governing_rule(unit.layer, candidate)
        if governing is None:
            return Verdict(kind=kind, unit=unit.path, layer=unit.layer, target=candidate)

        index, rule = governing
        return Verdict(
            kind=kind,
            unit=unit.path,
            layer=unit.layer,
            target=candidate,
            rule=rule,
            rule_index=index,
        )

    def evaluate(self, units: Iterable[Unit]) -> Evaluation:
        """Evaluate all edges of all units.

        Layer edges of a unit are evaluated before its external edges.
        Edges are independent: one unit may produce several violations.

        Args:
            units: Units with dependency sets filled in

        Returns:
            Evaluation with verdicts and LAYER_EDGE traces
        """
        verdicts: list[Verdict] = []
        diagnostics: list[Diagnostic] = []

        for unit in units:
            for layer in unit.layer_deps:
                verdicts.append(self.check_edge(unit, EdgeKind.LAYER, layer))
                diagnostics.append(Diagnostic.layer_edge(unit.path, unit.layer, layer))

            for external in unit.external_deps:
                verdicts.append(self.check_edge(unit, EdgeKind.EXTERNAL, external))

        return Evaluation(verdicts=tuple(verdicts), diagnostics=tuple(diagnostics))
