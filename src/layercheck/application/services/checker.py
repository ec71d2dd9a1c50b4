"""Main facade for layer checking.

LayerChecker is the primary entry point for running layer analysis.
Composition-based: accepts a source scanner and an optional reporter.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from layercheck.application.classification import LayerClassifier
from layercheck.application.evaluation import RuleEvaluator
from layercheck.application.graph import ImportGraphBuilder
from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.check_stats import CheckStats

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.configuration import LayerConfig
    from layercheck.domain.ports.reporter import ReporterProtocol
    from layercheck.domain.ports.source_units import SourceUnitsPort


class LayerChecker:
    """Main facade for layer checking.

    Pipeline: scan -> classify -> build dependency graph -> evaluate.
    The whole unit table is built before any rule is evaluated.
    The scanner is injected as SourceUnitsPort.

    Example:
        config = load_config(Path("layers.yaml"))
        checker = LayerChecker(config, GoSourceWalker.from_config(config))
        result = checker.check(Path("."))
        for violation in result.violations:
            print(violation)
    """

    def __init__(
        self,
        config: LayerConfig,
        source: SourceUnitsPort,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            config: Layers and dependency rules
            source: Scanner producing source units
            reporter: Optional reporter for output

        Raises:
            InvalidPatternError: If a layer pattern is malformed
        """
        self._config = config
        self._source = source
        self._reporter = reporter
        self._classifier = LayerClassifier(config.layers)
        self._builder = ImportGraphBuilder()
        self._evaluator = RuleEvaluator.from_config(config)

    def check(self, root: Path) -> CheckResult:
        """Run layer check and return result.

        Reports result if reporter is configured.

        Args:
            root: Project root directory

        Returns:
            CheckResult with verdicts, diagnostics, issues and stats

        Raises:
            ScanError: If root cannot be scanned
            ParsingError: On the first bad file, if the scanner fails fast
        """
        start_time = time.perf_counter()

        scan = self._source.scan(root)
        classification = self._classifier.classify_units(scan.units)
        graph = self._builder.build(classification.units)
        evaluation = self._evaluator.evaluate(graph.units)

        stats = CheckStats(
            units_analyzed=len(graph.units),
            edges_evaluated=len(evaluation.verdicts),
            rules_loaded=len(self._evaluator.rules),
            analysis_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        result = CheckResult(
            units=graph.units,
            verdicts=evaluation.verdicts,
            diagnostics=(
                classification.diagnostics + graph.diagnostics + evaluation.diagnostics
            ),
            issues=scan.issues,
            stats=stats,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    @property
    def config(self) -> LayerConfig:
        return self._config
