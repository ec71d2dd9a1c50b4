"""Go source tree walker.

Implements SourceUnitsPort for Go projects: one unit per directory
containing .go files, identified as "<module path>/<dir relative to go.mod>"
(the module path alone for the module root directory).
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Self

from layercheck.domain.exceptions.parsing import ParsingError, ScanError
from layercheck.domain.model.scan_result import ScanIssue, ScanResult
from layercheck.domain.model.unit import SourceUnit
from layercheck.domain.patterns import compile_glob, glob_match_any
from layercheck.infrastructure.golang.gomod import ModuleLocator
from layercheck.infrastructure.golang.imports import read_imports

if TYPE_CHECKING:
    from layercheck.domain.model.configuration import LayerConfig

GO_SUFFIX = ".go"


@dataclass(slots=True)
class _PendingUnit:
    """Unit under construction. Imports accumulate file by file."""

    path: str
    module: str
    module_root: Path
    relative_path: str
    imports: list[str] = field(default_factory=list)

    def freeze(self) -> SourceUnit:
        return SourceUnit(
            path=self.path,
            module=self.module,
            module_root=self.module_root,
            relative_path=self.relative_path,
            imports=tuple(self.imports),
        )


class GoSourceWalker:
    """Walks a Go source tree and extracts per-package import lists.

    Directories are visited top-down in sorted order, symlinks are not
    followed. A directory below the root whose root-relative path matches
    an exclude pattern is pruned with everything under it.

    Per-file errors (missing go.mod, unreadable or malformed file) are
    collected as ScanIssue and the walk continues. With fail_fast=True
    the first error is raised instead and nothing is returned.
    """

    def __init__(self, exclude_dirs: Iterable[str] = (), *, fail_fast: bool = False) -> None:
        """Initialize walker.

        Args:
            exclude_dirs: Glob patterns for directories to prune
            fail_fast: Raise on the first per-file error

        Raises:
            InvalidPatternError: If an exclude pattern is malformed
        """
        self._exclude = tuple(compile_glob(p) for p in exclude_dirs)
        self._fail_fast = fail_fast

    @classmethod
    def from_config(cls, config: LayerConfig, *, fail_fast: bool = False) -> Self:
        return cls(config.exclude_dirs, fail_fast=fail_fast)

    def scan(self, root: Path) -> ScanResult:
        """Discover Go packages under root.

        Args:
            root: Project root directory

        Returns:
            Units in discovery order plus per-file issues

        Raises:
            ScanError: If root is not a directory
            ParsingError: On the first per-file error, if fail_fast
        """
        if not root.is_dir():
            raise ScanError(root, "not a directory")

        root = root.resolve()
        locator = ModuleLocator()
        pending: dict[str, _PendingUnit] = {}
        issues: list[ScanIssue] = []

        def on_walk_error(error: OSError) -> None:
            path = Path(error.filename) if error.filename else root
            reason = error.strerror or str(error)
            if self._fail_fast:
                raise ParsingError(path, reason) from error
            issues.append(ScanIssue(path, reason))

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_walk_error):
            directory = Path(dirpath)
            dirnames[:] = sorted(d for d in dirnames if not self._is_excluded(directory / d, root))

            for filename in sorted(filenames):
                if not filename.endswith(GO_SUFFIX):
                    continue
                file_path = directory / filename
                try:
                    self._collect(file_path, locator, pending)
                except ParsingError as e:
                    if self._fail_fast:
                        raise
                    issues.append(ScanIssue(file_path, e.reason))

        return ScanResult(
            units=tuple(unit.freeze() for unit in pending.values()),
            issues=tuple(issues),
        )

    def _is_excluded(self, directory: Path, root: Path) -> bool:
        relative = directory.relative_to(root).as_posix()
        return glob_match_any(relative, self._exclude)

    def _collect(
        self,
        file_path: Path,
        locator: ModuleLocator,
        pending: dict[str, _PendingUnit],
    ) -> None:
        """Parse one file and add its imports to its unit."""
        module = locator.find(file_path.parent)
        imports = read_imports(file_path)

        relative = file_path.parent.relative_to(module.root).as_posix()
        if relative == ".":
            relative = ""
        unit_path = f"{module.path}/{relative}" if relative else module.path

        unit = pending.get(unit_path)
        if unit is None:
            unit = _PendingUnit(
                path=unit_path,
                module=module.path,
                module_root=module.root,
                relative_path=relative,
            )
            pending[unit_path] = unit
        unit.imports.extend(imports)
