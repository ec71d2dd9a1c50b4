"""Pattern matching for layer, exclude and rule patterns.

Two dialects:

Glob dialect (layer paths, exclude_dirs), matched against slash-separated
relative paths, anchored and case-sensitive:
    *       any run of characters inside one segment
    **      as a whole segment: zero or more segments
    ?       one character (not /)
    [abc]   character class, [!abc] / [^abc] negated
    {a,b}   alternatives
    \\x     literal x

Special cases:
    a/**    matches a AND everything below it
    **/a    matches a AND a under any prefix
    a/**/b  matches a/b, a/x/b, a/x/y/b

Rule dialect (dependency_rules from/to):
    no *    exact equality
    with *  prefix test against the text before the first *;
            everything after the first * is ignored
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from layercheck.domain.exceptions.config import InvalidPatternError

_GLOBSTAR = "**"


@dataclass(frozen=True, slots=True)
class CompiledGlob:
    """Compiled glob pattern.

    Attributes:
        original: Original pattern string
        regex: Compiled regex, matched against the whole candidate
    """

    original: str
    regex: re.Pattern[str]

    def match(self, candidate: str) -> bool:
        """Check if candidate path matches the whole pattern.

        Raises:
            TypeError: If candidate is None
        """
        if candidate is None:
            raise TypeError("candidate must not be None")
        return self.regex.fullmatch(candidate) is not None

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"CompiledGlob({self.original!r})"


@lru_cache(maxsize=512)
def compile_glob(pattern: str) -> CompiledGlob:
    """Compile glob pattern to regex.

    FAIL-FIRST: raises InvalidPatternError for malformed patterns.

    Args:
        pattern: Glob pattern string

    Returns:
        CompiledGlob with original and compiled regex

    Raises:
        InvalidPatternError: If pattern is empty or malformed
    """
    if not pattern:
        raise InvalidPatternError("", "pattern must not be empty")

    segments = _split_segments(pattern)
    last = len(segments) - 1
    parts: list[str] = []
    need_sep = False

    for index, segment in enumerate(segments):
        if segment == _GLOBSTAR:
            if index == last:
                # Trailing /** also matches the directory itself
                parts.append(r"(?:/.*)?" if need_sep else r".*")
            elif need_sep:
                # Middle /**/ collapses to a single separator
                parts.append(r"(?:/.*)?")
            else:
                # Leading **/ matches an empty prefix
                parts.append(r"(?:.*/)?")
            continue

        if need_sep:
            parts.append("/")
        parts.append(_translate(segment, pattern))
        need_sep = True

    try:
        regex = re.compile("".join(parts))
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e

    return CompiledGlob(original=pattern, regex=regex)


def glob_match(candidate: str, pattern: str) -> bool:
    """Match candidate path against a glob pattern.

    Args:
        candidate: Slash-separated relative path
        pattern: Glob pattern

    Returns:
        True if the whole candidate matches
    """
    return compile_glob(pattern).match(candidate)


def glob_match_any(candidate: str, patterns: tuple[CompiledGlob, ...]) -> bool:
    """Check if candidate matches any of the compiled patterns."""
    return any(p.match(candidate) for p in patterns)


def rule_match(candidate: str, pattern: str) -> bool:
    """Match candidate against a dependency-rule pattern.

    Not a glob: a pattern with a * only tests the prefix before the
    first *. "app*" matches "application"; "a*z" matches "abc" too.

    Args:
        candidate: Layer name or external import path
        pattern: Rule from/to pattern

    Returns:
        True if pattern equals candidate, or candidate starts with the
        text before the first *
    """
    if "*" in pattern:
        prefix = pattern.split("*", 1)[0]
        return candidate.startswith(prefix)
    return candidate == pattern


def _split_segments(pattern: str) -> list[str]:
    """Split pattern on / outside of classes, alternatives and escapes."""
    segments: list[str] = []
    current: list[str] = []
    depth = 0
    in_class = False
    i = 0

    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\" and i + 1 < len(pattern):
            current.append(pattern[i : i + 2])
            i += 2
            continue
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "{":
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
        elif ch == "/" and depth == 0:
            segments.append("".join(current))
            current = []
            i += 1
            continue
        current.append(ch)
        i += 1

    segments.append("".join(current))
    return segments


def _translate(text: str, pattern: str) -> str:
    """Translate one non-globstar segment (or alternative) to regex."""
    out: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch == "\\":
            if i + 1 >= n:
                raise InvalidPatternError(pattern, "trailing escape")
            out.append(re.escape(text[i + 1]))
            i += 2
        elif ch == "*":
            # ** inside a segment behaves like *
            while i < n and text[i] == "*":
                i += 1
            out.append(r"[^/]*")
        elif ch == "?":
            out.append(r"[^/]")
            i += 1
        elif ch == "[":
            i = _translate_class(text, i, pattern, out)
        elif ch == "{":
            i = _translate_alternatives(text, i, pattern, out)
        else:
            out.append(re.escape(ch))
            i += 1

    return "".join(out)


def _translate_class(text: str, start: int, pattern: str, out: list[str]) -> int:
    """Translate [...] starting at text[start]. Returns index after ]."""
    i = start + 1
    negated = i < len(text) and text[i] in "!^"
    if negated:
        i += 1

    body: list[str] = []
    while i < len(text) and text[i] != "]":
        ch = text[i]
        if ch == "\\":
            if i + 1 >= len(text):
                raise InvalidPatternError(pattern, "trailing escape")
            body.append(re.escape(text[i + 1]))
            i += 2
            continue
        body.append("\\" + ch if ch in "[^\\" else ch)
        i += 1

    if i >= len(text):
        raise InvalidPatternError(pattern, "unterminated character class")
    if not body:
        raise InvalidPatternError(pattern, "empty character class")

    content = "".join(body)
    out.append(f"[^/{content}]" if negated else f"[{content}]")
    return i + 1


def _translate_alternatives(text: str, start: int, pattern: str, out: list[str]) -> int:
    """Translate {a,b} starting at text[start]. Returns index after }."""
    alternatives: list[str] = []
    current: list[str] = []
    depth = 0
    i = start + 1

    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            current.append(text[i : i + 2])
            i += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                alternatives.append("".join(current))
                translated = "|".join(_translate(alt, pattern) for alt in alternatives)
                out.append(f"(?:{translated})")
                return i + 1
            depth -= 1
        elif ch == "," and depth == 0:
            alternatives.append("".join(current))
            current = []
            i += 1
            continue
        current.append(ch)
        i += 1

    raise InvalidPatternError(pattern, "unterminated alternatives")
