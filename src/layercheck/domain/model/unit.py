"""Source units (packages) before and after classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """Package as observed by a source scanner, before classification.

    Attributes:
        path: Module-qualified identity, e.g. "example.com/m/domain".
            Globally unique within one run.
        module: Module prefix declared by the owning module boundary file
        module_root: Directory containing the module boundary file
        relative_path: Slash-separated path relative to module_root,
            "" for the module root itself
        imports: Raw import strings in discovery order, duplicates kept
    """

    path: str
    module: str
    module_root: Path
    relative_path: str
    imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("unit path must not be empty")
        if not self.module:
            raise ValueError("unit module must not be empty")
        if self.module_root is None:
            raise TypeError("module_root must not be None")
        if self.relative_path.startswith("/") or self.relative_path == ".":
            raise ValueError(f"relative_path must be relative, got '{self.relative_path}'")

    @property
    def is_module_root(self) -> bool:
        """True if unit sits in its module's root directory."""
        return self.relative_path == ""


@dataclass(frozen=True, slots=True)
class Unit:
    """Classified package.

    Exactly one layer, assigned once. layer_deps and external_deps are
    de-duplicated in first-seen order and disjoint by construction:
    an import resolves either to an observed unit or to an external path.

    Attributes:
        path: Module-qualified identity
        module: Owning module prefix
        relative_path: Path relative to the module root ("" for root)
        layer: Assigned layer name
        imports: Raw import strings in discovery order
        layer_deps: Distinct layers this unit depends on
        external_deps: Distinct external import paths
    """

    path: str
    module: str
    relative_path: str
    layer: str
    imports: tuple[str, ...] = ()
    layer_deps: tuple[str, ...] = ()
    external_deps: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("unit path must not be empty")
        if not self.module:
            raise ValueError("unit module must not be empty")
        if not self.layer:
            raise ValueError("unit layer must not be empty")
        if len(set(self.layer_deps)) != len(self.layer_deps):
            raise ValueError("layer_deps must not contain duplicates")
        if len(set(self.external_deps)) != len(self.external_deps):
            raise ValueError("external_deps must not contain duplicates")

    @classmethod
    def from_source(cls, source: SourceUnit, layer: str) -> Unit:
        """Create unit with empty dependency sets from scanner output."""
        return cls(
            path=source.path,
            module=source.module,
            relative_path=source.relative_path,
            layer=layer,
            imports=source.imports,
        )
