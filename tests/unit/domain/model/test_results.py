"""Tests for diagnostic, verdict, check stats and check result models."""

from pathlib import Path

import pytest

from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.check_stats import CheckStats
from layercheck.domain.model.diagnostic import Diagnostic
from layercheck.domain.model.enums import DiagnosticKind, DiagnosticLevel, EdgeKind
from layercheck.domain.model.scan_result import ScanIssue
from layercheck.domain.model.verdict import Verdict
from tests.factories import make_rule, make_unit


class TestDiagnostic:
    """Tests for Diagnostic factories and formatting."""

    def test_classified_format(self) -> None:
        d = Diagnostic.classified("m/domain", "domain")
        assert d.level is DiagnosticLevel.DEBUG
        assert str(d) == "[debug] pkg `m/domain` is in layer `domain`"

    def test_unclassified_format(self) -> None:
        d = Diagnostic.unclassified("m/misc")
        assert d.is_warning
        assert str(d) == "[warn] pkg `m/misc` is in layer `UNKNOWN`"

    def test_unknown_import_format(self) -> None:
        d = Diagnostic.unknown_import("m/app", "m/misc")
        assert str(d) == "[warn] pkg `m/app` imports UNKNOWN `m/misc`"

    def test_layer_edge_format(self) -> None:
        d = Diagnostic.layer_edge("m/domain", "domain", "infrastructure")
        assert str(d) == "[debug] layer deps: m/domain (domain) -> infrastructure"
        assert d.message == "layer deps: m/domain (domain) -> infrastructure"

    def test_missing_target_raises(self) -> None:
        with pytest.raises(ValueError, match="target"):
            Diagnostic(DiagnosticLevel.WARN, DiagnosticKind.UNKNOWN_IMPORT, "m/a")

    def test_missing_layer_raises(self) -> None:
        with pytest.raises(ValueError, match="layer"):
            Diagnostic(DiagnosticLevel.DEBUG, DiagnosticKind.CLASSIFIED, "m/a")

    def test_empty_unit_raises(self) -> None:
        with pytest.raises(ValueError, match="unit"):
            Diagnostic.unclassified("")


class TestVerdict:
    """Tests for Verdict."""

    def test_ungoverned_is_allowed(self) -> None:
        v = Verdict(kind=EdgeKind.LAYER, unit="m/a", layer="a", target="b")
        assert not v.governed
        assert v.allowed
        assert not v.is_violation

    def test_deny_rule_is_violation(self) -> None:
        v = Verdict(
            kind=EdgeKind.LAYER,
            unit="m/domain",
            layer="domain",
            target="infrastructure",
            rule=make_rule("domain", "*", False),
            rule_index=1,
        )
        assert v.is_violation
        assert str(v) == "LAYER VIOLATION: m/domain (domain) -> infrastructure"

    def test_external_violation_format(self) -> None:
        v = Verdict(
            kind=EdgeKind.EXTERNAL,
            unit="m/domain",
            layer="domain",
            target="cloud.google.com/go/firestore",
            rule=make_rule("*", "cloud.google.com/go/firestore", False),
            rule_index=0,
        )
        assert str(v) == "EXTERNAL VIOLATION: m/domain (domain) -> cloud.google.com/go/firestore"

    def test_allow_rule_not_violation(self) -> None:
        v = Verdict(
            kind=EdgeKind.LAYER,
            unit="m/a",
            layer="a",
            target="a",
            rule=make_rule("a", "a", True),
            rule_index=0,
        )
        assert v.governed
        assert v.allowed
        assert str(v) == "layer ok: m/a (a) -> a"

    def test_rule_without_index_raises(self) -> None:
        with pytest.raises(ValueError, match="together"):
            Verdict(
                kind=EdgeKind.LAYER,
                unit="m/a",
                layer="a",
                target="b",
                rule=make_rule("a", "b", False),
            )

    def test_negative_index_raises(self) -> None:
        with pytest.raises(ValueError, match="rule_index"):
            Verdict(
                kind=EdgeKind.LAYER,
                unit="m/a",
                layer="a",
                target="b",
                rule=make_rule("a", "b", False),
                rule_index=-1,
            )


class TestCheckStats:
    """Tests for CheckStats."""

    def test_empty(self) -> None:
        stats = CheckStats.empty()
        assert stats.units_analyzed == 0
        assert stats.analysis_time_ms == 0.0

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="units_analyzed"):
            CheckStats(units_analyzed=-1, edges_evaluated=0, rules_loaded=0, analysis_time_ms=0)


class TestCheckResult:
    """Tests for CheckResult."""

    def _result(self) -> CheckResult:
        deny = make_rule("domain", "*", False)
        allow = make_rule("domain", "domain", True)
        return CheckResult(
            units=(make_unit("example.com/m/domain", "domain"),),
            verdicts=(
                Verdict(EdgeKind.LAYER, "m/domain", "domain", "domain", allow, 0),
                Verdict(EdgeKind.LAYER, "m/domain", "domain", "infra", deny, 1),
                Verdict(EdgeKind.EXTERNAL, "m/domain", "domain", "x.io/y", deny, 1),
                Verdict(EdgeKind.EXTERNAL, "m/domain", "domain", "fmt"),
            ),
            diagnostics=(
                Diagnostic.classified("m/domain", "domain"),
                Diagnostic.unclassified("m/misc"),
            ),
            issues=(ScanIssue(Path("bad.go"), "broken"),),
            stats=CheckStats.empty(),
        )

    def test_empty_passes(self) -> None:
        result = CheckResult.empty()
        assert result.passed
        assert result.violation_count == 0
        assert not result.has_issues

    def test_violation_partitions(self) -> None:
        result = self._result()
        assert result.violation_count == 2
        assert [v.target for v in result.layer_violations] == ["infra"]
        assert [v.target for v in result.external_violations] == ["x.io/y"]
        assert not result.passed

    def test_warnings(self) -> None:
        assert [d.unit for d in self._result().warnings] == ["m/misc"]

    def test_has_issues(self) -> None:
        assert self._result().has_issues

    def test_unit_lookup(self) -> None:
        result = self._result()
        assert result.unit("example.com/m/domain") is not None
        assert result.unit("example.com/m/none") is None
