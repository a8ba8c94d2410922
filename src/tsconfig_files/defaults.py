"""
Default file names, extensions and patterns used when resolving a `tsconfig.json`.

Patterns use the same glob syntax as the `include`/`exclude` fields of the config.
"""

from __future__ import annotations

TSCONFIG_FILENAME: str = "tsconfig.json"

# Declaration files first, then plain sources, then JSX.
TS_EXTENSIONS: tuple[str, ...] = (".d.ts", ".ts", ".tsx")

# Added when `compilerOptions.allowJs` is set.
JS_EXTENSIONS: tuple[str, ...] = (".js", ".jsx")

# Used in place of `include` when neither `files` nor `include` is given.
# Each in-scope extension is appended, so only source files are selected.
DEFAULT_INCLUDE: str = "**/*"

# Excludes match the path itself plus everything beneath it.
EXCLUDE_EXTENSIONS: tuple[str, ...] = ("",)
