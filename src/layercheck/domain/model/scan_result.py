"""Scanner output: discovered units plus per-file problems."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from layercheck.domain.model.unit import SourceUnit


@dataclass(frozen=True, slots=True)
class ScanIssue:
    """File the scanner could not process.

    Attributes:
        path: Offending file
        reason: Why it was skipped
    """

    path: Path
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of scanning a source tree.

    Attributes:
        units: Discovered units in discovery order
        issues: Files that failed to parse or resolve, in discovery order
    """

    units: tuple[SourceUnit, ...] = ()
    issues: tuple[ScanIssue, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        paths = [u.path for u in self.units]
        if len(set(paths)) != len(paths):
            raise ValueError("unit paths must be unique")

    @property
    def ok(self) -> bool:
        """True if every file was processed."""
        return not self.issues
