"""Data types for tsconfig file resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Matcher = Callable[[str], bool]
"""A compiled predicate testing one relative path against one pattern."""


@dataclass
class TsconfigJson:
    """
    The parts of a `tsconfig.json` that decide which files are in scope.

    Path fields are `None` when the key is absent from the config, which is
    different from an explicit empty list: only absence triggers the default
    `**/*` inclusion.
    """

    files: list[str] | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    allow_js: bool = False


@dataclass(frozen=True)
class PatternSet:
    """Include and exclude glob patterns, in the order they were generated."""

    include: tuple[str, ...]
    exclude: tuple[str, ...]
