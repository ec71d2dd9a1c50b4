"""Stream reporter base.

PlainTextReporter and JSONReporter write a CheckResult to a text stream
and share the stream handling here. ConsoleReporter renders to a string
instead and does not derive from it.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Reporter that writes to a text stream (default: sys.stdout)."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Write result to the output stream."""

    def _write(self, text: str = "") -> None:
        """Write one line to output."""
        print(text, file=self._output)
