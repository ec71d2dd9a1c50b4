"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.domain.exceptions.base import LayerCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(LayerCheckError):
    """Configuration file cannot be read or is malformed.

    Always fatal: no analysis runs against a broken configuration.

    Attributes:
        path: Configuration file
        reason: Why the configuration was rejected
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class InvalidPatternError(LayerCheckError, ValueError):
    """Glob pattern cannot be compiled.

    Inherits ValueError for semantic correctness (bad argument value).

    Attributes:
        pattern: Offending pattern
        reason: Why it is invalid
    """

    def __init__(self, pattern: str, reason: str) -> None:
        if pattern is None:
            raise TypeError("pattern must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")
