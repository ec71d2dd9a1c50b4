"""Imports-only parser for Go source files.

Reads the package clause and the import declarations that follow it,
then stops at the first other top-level token. The rest of the file is
never tokenized, so it does not need to be valid Go.

Accepted import forms:
    import "fmt"
    import f "fmt"
    import . "fmt"
    import _ "embed"
    import ( "fmt"; "os" )
    import `raw/path`
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.parsing import ParsingError

if TYPE_CHECKING:
    from pathlib import Path

_TOKEN = re.compile(
    r"""
      (?P<skip>[ \t\r\n]+|//[^\n]*|/\*.*?\*/)
    | (?P<string>"(?:[^"\\\n]|\\.)*")
    | (?P<raw>`[^`]*`)
    | (?P<ident>[^\W\d]\w*)
    | (?P<punct>[();.])
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class _Token:
    kind: str  # string, raw, ident, punct, invalid, eof
    value: str
    offset: int


class _Tokens:
    """Lazy token stream: the file is tokenized only as far as it is read."""

    def __init__(self, source: str) -> None:
        self._iter = self._scan(source)

    @staticmethod
    def _scan(source: str) -> Iterator[_Token]:
        pos = 0
        while pos < len(source):
            match = _TOKEN.match(source, pos)
            if match is None:
                yield _Token("invalid", source[pos], pos)
                return
            pos = match.end()
            kind = match.lastgroup
            if kind == "skip" or kind is None:
                continue
            yield _Token(kind, match.group(), match.start())
        yield _Token("eof", "", pos)

    def next(self) -> _Token:
        return next(self._iter, _Token("eof", "", -1))

    def next_skipping_semicolons(self) -> _Token:
        token = self.next()
        while token.kind == "punct" and token.value == ";":
            token = self.next()
        return token


def parse_imports(source: str, path: Path) -> tuple[str, ...]:
    """Extract import paths from a Go source file.

    Args:
        source: File content
        path: File location (error messages only)

    Returns:
        Import paths in declaration order, duplicates kept

    Raises:
        ParsingError: If the package clause or an import declaration
            is malformed
    """
    tokens = _Tokens(source.removeprefix("\ufeff"))

    keyword = tokens.next()
    if keyword.kind != "ident" or keyword.value != "package":
        raise ParsingError(path, _describe("expected 'package'", keyword))
    name = tokens.next()
    if name.kind != "ident":
        raise ParsingError(path, _describe("expected package name", name))

    imports: list[str] = []
    while True:
        token = tokens.next_skipping_semicolons()
        if token.kind != "ident" or token.value != "import":
            break

        token = tokens.next()
        if token.kind == "punct" and token.value == "(":
            while True:
                token = tokens.next_skipping_semicolons()
                if token.kind == "punct" and token.value == ")":
                    break
                imports.append(_parse_spec(token, tokens, path))
        else:
            imports.append(_parse_spec(token, tokens, path))

    return tuple(imports)


def read_imports(path: Path) -> tuple[str, ...]:
    """Read a Go file and extract its import paths.

    Raises:
        ParsingError: If the file cannot be read or parsed
    """
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ParsingError(path, "file not found") from e
    except PermissionError as e:
        raise ParsingError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise ParsingError(path, f"encoding error: {e}") from e
    except OSError as e:
        raise ParsingError(path, f"cannot read file: {e}") from e

    return parse_imports(source, path)


def _parse_spec(token: _Token, tokens: _Tokens, path: Path) -> str:
    """ImportSpec = [ "." | "_" | identifier ] ImportPath."""
    if token.kind == "ident" or (token.kind == "punct" and token.value == "."):
        token = tokens.next()

    if token.kind == "string":
        value = token.value[1:-1]
        if "\\" in value:
            raise ParsingError(path, f"escape sequence in import path {token.value}")
    elif token.kind == "raw":
        value = token.value[1:-1]
    else:
        raise ParsingError(path, _describe("expected import path", token))

    if not value:
        raise ParsingError(path, "empty import path")
    return value


def _describe(expected: str, token: _Token) -> str:
    if token.kind == "eof":
        return f"{expected}, got end of file"
    return f"{expected}, got {token.value!r} at offset {token.offset}"
