"""Source units port.

Adapters implement this Protocol to feed a source tree into the checker.
One adapter per language: it finds module boundaries, walks the tree and
extracts raw import strings. Nothing beyond import lists is parsed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.scan_result import ScanResult


class SourceUnitsPort(Protocol):
    """Contract for source scanners.

    Example:
        class FixedSource:
            def __init__(self, result: ScanResult) -> None:
                self._result = result

            def scan(self, root: Path) -> ScanResult:
                return self._result
    """

    def scan(self, root: Path) -> ScanResult:
        """Discover units under root.

        Args:
            root: Project root directory

        Returns:
            Discovered units and per-file issues

        Raises:
            ScanError: If root cannot be scanned at all
            ParsingError: On the first bad file, if the adapter fails fast
        """
        ...
