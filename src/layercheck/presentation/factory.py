"""Checker composition for Go source trees.

Wires the Go walker into LayerChecker, so the application layer
only sees SourceUnitsPort.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.services import LayerChecker
from layercheck.infrastructure.golang import GoSourceWalker

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import LayerConfig
    from layercheck.domain.ports.reporter import ReporterProtocol


def create_go_checker(
    config: LayerConfig,
    *,
    fail_fast: bool = False,
    reporter: ReporterProtocol | None = None,
) -> LayerChecker:
    """Create checker for a Go source tree.

    Args:
        config: Layers, rules and exclude_dirs
        fail_fast: Abort on the first unparsable file
        reporter: Optional reporter

    Returns:
        LayerChecker scanning with GoSourceWalker

    Example:
        checker = create_go_checker(load_config(Path("layers.yaml")))
        result = checker.check(Path("."))
    """
    return LayerChecker(
        config,
        GoSourceWalker.from_config(config, fail_fast=fail_fast),
        reporter=reporter,
    )
