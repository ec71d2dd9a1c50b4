"""Reporter port.

LayerChecker hands every finished CheckResult to an optional reporter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Receives the result of each LayerChecker.check() call.

    Stream reporters (PlainTextReporter, JSONReporter) satisfy it.
    The return value is ignored, so ConsoleReporter fits too.
    """

    def report(self, result: CheckResult) -> object:
        """Consume one check result.

        Args:
            result: Units, verdicts, diagnostics, scan issues and stats
        """
        ...
