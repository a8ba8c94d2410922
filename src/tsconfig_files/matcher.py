"""
Glob matching for tsconfig patterns using pathspec.

tsconfig globs are anchored at the project root, unlike gitignore patterns, so
they get their own `pathspec` pattern class. The syntax is fixed:

- `*` matches any run of characters within one path segment
- `?` matches a single character within one path segment
- `**` as a whole segment matches zero or more segments
- `[abc]`, `[a-z]` and `[!abc]` are character classes
- `\\x` matches `x` literally

Braces, a leading `!`, and extended-glob groups like `+(a|b)` have no special
meaning. Wildcards match dot-files.
"""

from __future__ import annotations

import os
import re

import pathspec
from pathspec.pattern import RegexPattern

from tsconfig_files.types import Matcher

_GLOBSTAR = "**"


class TsconfigGlobPattern(RegexPattern):
    """A single tsconfig glob, matched against a `/`-separated relative path."""

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> tuple[str, bool]:
        """Translate a glob into an anchored regular expression."""
        if pattern.startswith("./"):
            pattern = pattern[2:]

        segments: list[str] = []
        for segment in pattern.split("/"):
            # Consecutive globstars are equivalent to one.
            if segment == _GLOBSTAR and segments and segments[-1] == _GLOBSTAR:
                continue
            segments.append(segment)

        parts: list[str] = ["^"]
        separator = ""
        last = len(segments) - 1
        for i, segment in enumerate(segments):
            if segment == _GLOBSTAR:
                if i == last:
                    parts.append(".*" if i == 0 else "(?:/.*)?")
                else:
                    parts.append("(?:.*/)?" if i == 0 else "/(?:.*/)?")
                separator = ""
            else:
                parts.append(separator + _translate_segment(segment))
                separator = "/"
        parts.append(r"\Z")
        return "".join(parts), True


def _translate_segment(segment: str) -> str:
    """Translate one path segment (no `/`) into a regex fragment."""
    out: list[str] = []
    i = 0
    n = len(segment)
    while i < n:
        c = segment[i]
        i += 1
        if c == "\\":
            if i < n:
                out.append(re.escape(segment[i]))
                i += 1
            else:
                out.append(re.escape(c))
        elif c == "*":
            while i < n and segment[i] == "*":
                i += 1
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[":
            end = _find_class_end(segment, i)
            if end < 0:
                out.append(re.escape(c))
            else:
                out.append(_translate_class(segment[i:end]))
                i = end + 1
        else:
            out.append(re.escape(c))
    return "".join(out)


def _find_class_end(segment: str, start: int) -> int:
    """Index of the `]` closing a class opened just before `start`, or -1."""
    j = start
    if j < len(segment) and segment[j] in "!^":
        j += 1
    # A `]` right after the opening bracket is a literal member.
    if j < len(segment) and segment[j] == "]":
        j += 1
    while j < len(segment) and segment[j] != "]":
        j += 1
    return j if j < len(segment) else -1


def _translate_class(body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    body = body.replace("\\", "\\\\")
    body = re.sub(r"([&~|\[\]])", r"\\\1", body)
    if negate:
        return f"[^/{body}]"
    return f"[{body}]"


def compile_pattern(pattern: str) -> Matcher:
    """
    Compile one glob into a predicate over relative paths. Native path
    separators in the tested path are normalized to `/` before matching, and a
    path equal to the pattern text always matches.
    """
    spec = pathspec.PathSpec([TsconfigGlobPattern(pattern)])

    def matches(path: str) -> bool:
        # A path spelled exactly like the pattern matches, brackets and all.
        if path.replace(os.sep, "/") == pattern:
            return True
        return spec.match_file(path)

    return matches


def compile_patterns(patterns: tuple[str, ...] | list[str]) -> list[Matcher]:
    """Compile each pattern into its own matcher, preserving order."""
    return [compile_pattern(p) for p in patterns]
