"""Check result aggregate for layer analysis."""

from __future__ import annotations

from dataclasses import dataclass

from layercheck.domain.model.check_stats import CheckStats
from layercheck.domain.model.diagnostic import Diagnostic
from layercheck.domain.model.enums import EdgeKind
from layercheck.domain.model.scan_result import ScanIssue
from layercheck.domain.model.unit import Unit
from layercheck.domain.model.verdict import Verdict


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a layer check.

    Immutable aggregate containing all analysis results.
    Used by ReporterProtocol.report() method.

    Attributes:
        units: Classified units with dependency sets, in path order
        verdicts: One verdict per evaluated edge, in evaluation order
        diagnostics: Classification, graph and evaluation diagnostics,
            in emission order
        issues: Files skipped by the scanner
        stats: Analysis statistics
    """

    units: tuple[Unit, ...]
    verdicts: tuple[Verdict, ...]
    diagnostics: tuple[Diagnostic, ...]
    issues: tuple[ScanIssue, ...]
    stats: CheckStats

    @property
    def violations(self) -> tuple[Verdict, ...]:
        """Verdicts governed by a deny rule."""
        return tuple(v for v in self.verdicts if v.is_violation)

    @property
    def layer_violations(self) -> tuple[Verdict, ...]:
        return tuple(v for v in self.violations if v.kind is EdgeKind.LAYER)

    @property
    def external_violations(self) -> tuple[Verdict, ...]:
        return tuple(v for v in self.violations if v.kind is EdgeKind.EXTERNAL)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.is_warning)

    @property
    def passed(self) -> bool:
        """Check if analysis passed (no violations)."""
        return not self.violations

    @property
    def has_issues(self) -> bool:
        """True if the scanner skipped any file."""
        return bool(self.issues)

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    def unit(self, path: str) -> Unit | None:
        """Get unit by path. Returns None if not found."""
        for unit in self.units:
            if unit.path == path:
                return unit
        return None

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no violations)."""
        return cls(
            units=(),
            verdicts=(),
            diagnostics=(),
            issues=(),
            stats=CheckStats.empty(),
        )
