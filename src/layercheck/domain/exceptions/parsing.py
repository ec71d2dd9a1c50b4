"""Source scanning exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.domain.exceptions.base import LayerCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(LayerCheckError):
    """Error while reading or parsing a source or module file.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class ModuleResolutionError(ParsingError):
    """No module boundary file found above a source file.

    Attributes:
        path: Source file whose module could not be resolved
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path, "go.mod not found")


class ScanError(LayerCheckError):
    """Source tree cannot be scanned at all.

    Attributes:
        root: Scan root
        reason: Why the scan could not start
    """

    def __init__(self, root: Path, reason: str) -> None:
        if root is None:
            raise TypeError("root must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.root = root
        self.reason = reason
        super().__init__(f"Cannot scan {root}: {reason}")
