"""
Resolution of the files a `tsconfig.json` puts in scope.

The four entry points form a matrix of sync/async and "locate the config" versus
"use this config". All of them compile a fresh set of matchers per call, walk the
root directory and return paths relative to it.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

from tsconfig_files.config import (
    TsconfigNotFoundError,
    find_tsconfig,
    load_tsconfig_data,
    parse_tsconfig_data,
)
from tsconfig_files.defaults import TSCONFIG_FILENAME
from tsconfig_files.matcher import compile_patterns
from tsconfig_files.patterns import generate_patterns
from tsconfig_files.types import Matcher, TsconfigJson

log = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


def walk_files(root: str | Path) -> Iterator[Path]:
    """
    Yield every file below `root`, top-down with names sorted at each level.
    Directories are descended into but never yielded. Errors such as a
    missing root or an unreadable directory are raised, not skipped.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        current = Path(dirpath)
        for filename in sorted(filenames):
            yield current / filename


def filter_files(
    root: str | Path,
    include: Sequence[Matcher],
    exclude: Sequence[Matcher],
) -> list[str]:
    """
    Walk `root` and return the relative paths of files matched by at least
    one include matcher and by no exclude matcher.
    """
    root = Path(root)
    result: list[str] = []
    for path in walk_files(root):
        rel = str(path.relative_to(root))
        if any(matches(rel) for matches in exclude):
            continue
        if not any(matches(rel) for matches in include):
            continue
        result.append(rel)
    log.debug("Matched %d files under %s", len(result), root)
    return result


def _compile(config: TsconfigJson | Mapping[str, Any]) -> tuple[list[Matcher], list[Matcher]]:
    """Build the include and exclude matchers for one resolution."""
    tsconfig = config if isinstance(config, TsconfigJson) else parse_tsconfig_data(config)
    patterns = generate_patterns(tsconfig)
    log.debug(
        "Generated %d include and %d exclude patterns",
        len(patterns.include),
        len(patterns.exclude),
    )
    return compile_patterns(patterns.include), compile_patterns(patterns.exclude)


def get_files_from_tsconfig_json_sync(
    config: TsconfigJson | Mapping[str, Any], cwd: str | Path
) -> list[str]:
    """
    Find the files selected by an already-parsed config, relative to `cwd`.

    `config` may be a `TsconfigJson` or the raw object from `json.load`.
    """
    include, exclude = _compile(config)
    return filter_files(cwd, include, exclude)


async def get_files_from_tsconfig_json(
    config: TsconfigJson | Mapping[str, Any], cwd: str | Path
) -> list[str]:
    """Async version of `get_files_from_tsconfig_json_sync`."""
    include, exclude = _compile(config)
    return await asyncio.to_thread(filter_files, cwd, include, exclude)


def get_files_from_tsconfig_sync(
    cwd: str | Path, *, config_name: str = TSCONFIG_FILENAME
) -> list[str]:
    """
    Find the nearest `config_name` at or above `cwd` and return the files it
    selects, relative to the directory containing it.

    Raises `TsconfigNotFoundError` if no config file exists up to the root.
    """
    config_path = find_tsconfig(cwd, config_name)
    if config_path is None:
        raise TsconfigNotFoundError(config_name, cwd)
    return get_files_from_tsconfig_json_sync(load_tsconfig_data(config_path), config_path.parent)


async def get_files_from_tsconfig(
    cwd: str | Path, *, config_name: str = TSCONFIG_FILENAME
) -> list[str]:
    """Async version of `get_files_from_tsconfig_sync`."""
    config_path = await asyncio.to_thread(find_tsconfig, cwd, config_name)
    if config_path is None:
        raise TsconfigNotFoundError(config_name, cwd)
    data = await asyncio.to_thread(load_tsconfig_data, config_path)
    return await get_files_from_tsconfig_json(data, config_path.parent)
