"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.diagnostic import Diagnostic
    from layercheck.domain.model.verdict import Verdict


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration.
    All diagnostics are included; consumers filter by level.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        return {
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "layer_violation_count": len(result.layer_violations),
                "external_violation_count": len(result.external_violations),
                "warning_count": len(result.warnings),
                "error_count": len(result.issues),
            },
            "violations": [self._verdict_to_dict(v) for v in result.violations],
            "issues": [{"path": str(i.path), "reason": i.reason} for i in result.issues],
            "diagnostics": [self._diagnostic_to_dict(d) for d in result.diagnostics],
            "units": [
                {
                    "path": u.path,
                    "module": u.module,
                    "layer": u.layer,
                    "layer_deps": list(u.layer_deps),
                    "external_deps": list(u.external_deps),
                }
                for u in result.units
            ],
            "stats": {
                "units_analyzed": result.stats.units_analyzed,
                "edges_evaluated": result.stats.edges_evaluated,
                "rules_loaded": result.stats.rules_loaded,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _verdict_to_dict(self, verdict: Verdict) -> dict[str, object]:
        rule = verdict.rule
        return {
            "kind": verdict.kind.value,
            "unit": verdict.unit,
            "layer": verdict.layer,
            "target": verdict.target,
            "rule": None
            if rule is None
            else {
                "index": verdict.rule_index,
                "from": rule.source,
                "to": rule.target,
                "allow": rule.allow,
            },
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        return {
            "level": diagnostic.level.value,
            "kind": diagnostic.kind.name,
            "unit": diagnostic.unit,
            "layer": diagnostic.layer,
            "target": diagnostic.target,
            "message": diagnostic.message,
        }
