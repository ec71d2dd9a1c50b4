"""go.mod discovery and module path extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from layercheck.domain.exceptions.parsing import ModuleResolutionError, ParsingError

GO_MOD = "go.mod"

# module example.com/m | module "example.com/m" | module (\n example.com/m \n)
_MODULE_LINE = re.compile(r"^\s*module\s+(?P<path>\S+)\s*$")
_MODULE_BLOCK = re.compile(r"^\s*module\s*\(\s*$")


@dataclass(frozen=True, slots=True)
class GoModule:
    """Module boundary.

    Attributes:
        root: Directory containing go.mod
        path: Declared module path (the module prefix)
    """

    root: Path
    path: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("module path must not be empty")


def parse_module_path(text: str, path: Path) -> str:
    """Extract the module path from go.mod content.

    Args:
        text: go.mod file content
        path: go.mod location (error messages only)

    Returns:
        Module path without quotes

    Raises:
        ParsingError: If no valid module directive is present
    """
    in_block = False
    for raw_line in text.splitlines():
        line = _strip_comment(raw_line)
        if not line.strip():
            continue

        if in_block:
            if line.strip() == ")":
                break
            return _unquote(line.strip(), path)

        if _MODULE_BLOCK.match(line):
            in_block = True
            continue

        match = _MODULE_LINE.match(line)
        if match:
            return _unquote(match.group("path"), path)

    raise ParsingError(path, "no module directive")


class ModuleLocator:
    """Finds the nearest go.mod above a directory.

    Memoises results per directory: files in the same directory, and
    sibling directories sharing an ancestor, resolve once per walk.
    """

    def __init__(self) -> None:
        self._cache: dict[Path, GoModule] = {}

    def find(self, directory: Path) -> GoModule:
        """Find the module owning directory.

        Args:
            directory: Directory containing a source file

        Returns:
            Nearest enclosing GoModule

        Raises:
            ModuleResolutionError: If no go.mod exists up to the filesystem root
            ParsingError: If the nearest go.mod cannot be read or parsed
        """
        visited: list[Path] = []
        current = directory

        while True:
            cached = self._cache.get(current)
            if cached is not None:
                module = cached
                break

            visited.append(current)
            candidate = current / GO_MOD
            if candidate.is_file():
                module = GoModule(root=current, path=_read_module_path(candidate))
                break

            parent = current.parent
            if parent == current:
                raise ModuleResolutionError(directory)
            current = parent

        for seen in visited:
            self._cache[seen] = module
        return module


def find_nearest_module(directory: Path) -> GoModule:
    """Find the module owning directory, without memoisation."""
    return ModuleLocator().find(directory)


def _read_module_path(go_mod: Path) -> str:
    try:
        text = go_mod.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParsingError(go_mod, f"cannot read go.mod: {e}") from e
    return parse_module_path(text, go_mod)


def _strip_comment(line: str) -> str:
    index = line.find("//")
    return line if index < 0 else line[:index]


def _unquote(value: str, path: Path) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"`":
        value = value[1:-1]
    if not value or any(c in value for c in "\"`"):
        raise ParsingError(path, f"invalid module path: {value!r}")
    return value
