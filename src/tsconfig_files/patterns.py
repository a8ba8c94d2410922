"""
Generation of include and exclude glob patterns from a `TsconfigJson`.

`files` entries name exact files, so their wildcard characters are escaped.
`include` and `exclude` entries are globs, and an entry that doesn't end in a
wildcard also covers everything beneath it: `src` becomes `src`, `src/**/*.d.ts`,
`src/**/*.ts` and `src/**/*.tsx`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from tsconfig_files.defaults import (
    DEFAULT_INCLUDE,
    EXCLUDE_EXTENSIONS,
    JS_EXTENSIONS,
    TS_EXTENSIONS,
)
from tsconfig_files.types import PatternSet, TsconfigJson

_WILDCARD_RE = re.compile(r"([*?])")


def resolve_extensions(config: TsconfigJson) -> tuple[str, ...]:
    """File extensions in scope: TypeScript always, JavaScript with `allowJs`."""
    if config.allow_js:
        return TS_EXTENSIONS + JS_EXTENSIONS
    return TS_EXTENSIONS


def normalize_patterns(patterns: Iterable[str]) -> list[str]:
    """Convert every backslash separator to a forward slash."""
    return [p.replace("\\", "/") for p in patterns]


def escape_patterns(patterns: Iterable[str]) -> list[str]:
    """Escape every `*` and `?` so the pattern only matches literally."""
    return [_WILDCARD_RE.sub(r"\\\1", p) for p in patterns]


def expand_globs(globs: Iterable[str], extensions: Sequence[str]) -> list[str]:
    """
    Expand config globs into match patterns.

    A glob ending in `*` is kept as is. Anything else is treated as a file or
    directory name: it matches itself, plus `<name>/**/*<ext>` for each extension.
    """
    expanded: list[str] = []
    for glob in globs:
        if glob.endswith("*"):
            expanded.append(glob)
            continue
        base = glob[:-1] if glob.endswith("/") else glob
        expanded.append(base)
        expanded.extend(f"{base}/**/*{ext}" for ext in extensions)
    return expanded


def generate_patterns(config: TsconfigJson) -> PatternSet:
    """
    Build the include and exclude patterns for a config.

    When both `files` and `include` are absent, every file with an in-scope
    extension is included (`**/*.ts` and so on). An explicit empty list does not
    trigger this.
    """
    extensions = resolve_extensions(config)

    exclude = expand_globs(normalize_patterns(config.exclude or []), EXCLUDE_EXTENSIONS)

    if config.files is None and config.include is None:
        include = [f"{DEFAULT_INCLUDE}{ext}" for ext in extensions]
    else:
        files = escape_patterns(normalize_patterns(config.files or []))
        include = files + expand_globs(normalize_patterns(config.include or []), extensions)

    return PatternSet(include=tuple(include), exclude=tuple(exclude))
