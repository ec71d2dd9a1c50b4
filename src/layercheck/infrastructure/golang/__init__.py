"""Go source tree adapter: go.mod resolution, import extraction, walking."""

from layercheck.infrastructure.golang.gomod import (
    GoModule,
    ModuleLocator,
    find_nearest_module,
    parse_module_path,
)
from layercheck.infrastructure.golang.imports import parse_imports, read_imports
from layercheck.infrastructure.golang.walker import GoSourceWalker

__all__ = [
    "GoModule",
    "ModuleLocator",
    "find_nearest_module",
    "parse_module_path",
    "parse_imports",
    "read_imports",
    "GoSourceWalker",
]
