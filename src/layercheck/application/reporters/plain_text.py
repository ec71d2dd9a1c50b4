"""Plain text reporter.

Line-oriented output, one diagnostic or violation per line:

    [debug] pkg `example.com/m/domain` is in layer `domain`
    [warn] pkg `example.com/m/misc` is in layer `UNKNOWN`
    [warn] pkg `example.com/m/app` imports UNKNOWN `example.com/m/misc`
    [debug] layer deps: example.com/m/domain (domain) -> infrastructure
    LAYER VIOLATION: example.com/m/domain (domain) -> infrastructure
    EXTERNAL VIOLATION: example.com/m/domain (domain) -> cloud.google.com/go/firestore
    [error] /src/m/broken.go: expected 'package', got end of file
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Line-oriented plain text reporter.

    Outputs to stdout by default, can be configured for any TextIO.
    Debug diagnostics are written only when verbose.
    """

    def __init__(self, output: TextIO | None = None, *, verbose: bool = False) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            verbose: Include [debug] diagnostics
        """
        super().__init__(output)
        self._verbose = verbose

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text lines.

        Args:
            result: Complete check result
        """
        for diagnostic in result.diagnostics:
            if self._verbose or diagnostic.is_warning:
                self._write(str(diagnostic))

        for violation in result.violations:
            self._write(str(violation))

        for issue in result.issues:
            self._write(f"[error] {issue}")

        self._report_footer(result)

    def _report_footer(self, result: CheckResult) -> None:
        stats = result.stats
        status = "PASSED" if result.passed else "FAILED"
        self._write(
            f"Result: {status} ({stats.units_analyzed} packages, "
            f"{stats.edges_evaluated} edges, {result.violation_count} violations, "
            f"{len(result.issues)} errors)"
        )
