"""
Resolve the source files a `tsconfig.json` declares as in scope.

Follows the `files`, `include` and `exclude` fields and `compilerOptions.allowJs`.
Exclusions always win over inclusions, and a config with neither `files` nor
`include` selects every TypeScript file under its directory.

Usage::

    from tsconfig_files import get_files_from_tsconfig_sync

    files = get_files_from_tsconfig_sync("packages/app")

    # Or with a config you already have:
    from tsconfig_files import get_files_from_tsconfig_json_sync

    files = get_files_from_tsconfig_json_sync({"include": ["src"]}, "packages/app")
"""

from tsconfig_files.config import TsconfigNotFoundError, find_tsconfig, load_tsconfig
from tsconfig_files.defaults import TSCONFIG_FILENAME
from tsconfig_files.matcher import compile_pattern
from tsconfig_files.patterns import generate_patterns, resolve_extensions
from tsconfig_files.resolver import (
    get_files_from_tsconfig,
    get_files_from_tsconfig_json,
    get_files_from_tsconfig_json_sync,
    get_files_from_tsconfig_sync,
)
from tsconfig_files.types import PatternSet, TsconfigJson

__all__ = [
    "TSCONFIG_FILENAME",
    "PatternSet",
    "TsconfigJson",
    "TsconfigNotFoundError",
    "compile_pattern",
    "find_tsconfig",
    "generate_patterns",
    "get_files_from_tsconfig",
    "get_files_from_tsconfig_json",
    "get_files_from_tsconfig_json_sync",
    "get_files_from_tsconfig_sync",
    "load_tsconfig",
    "resolve_extensions",
]
