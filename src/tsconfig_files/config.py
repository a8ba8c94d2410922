"""
Locating and loading `tsconfig.json` files.

The search walks up from a starting directory to the filesystem root and stops
at the first directory containing the config file. The file is parsed as plain
JSON and mapped onto a `TsconfigJson`, keeping absent keys as `None` so the
pattern generator can tell "not configured" from "configured as empty".
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from tsconfig_files.defaults import TSCONFIG_FILENAME
from tsconfig_files.types import TsconfigJson

log = logging.getLogger(__name__)

_PATH_FIELDS = ("files", "include", "exclude")


class TsconfigNotFoundError(FileNotFoundError):
    """No config file exists in the start directory or any of its ancestors."""

    def __init__(self, config_name: str, start_dir: str | Path) -> None:
        super().__init__(f"Could not find {config_name} in {start_dir} or any parent directory")
        self.config_name = config_name
        self.start_dir = Path(start_dir)


def find_tsconfig(start_dir: str | Path, config_name: str = TSCONFIG_FILENAME) -> Path | None:
    """
    Walk up from `start_dir` looking for `config_name`. Returns the first
    found, or `None`.
    """
    current = Path(start_dir).resolve()
    while True:
        candidate = current / config_name
        if candidate.is_file():
            log.debug("Found %s at %s", config_name, candidate)
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_tsconfig_data(config_path: str | Path) -> Any:
    """
    Read and parse a config file as JSON. Decode errors propagate unchanged.
    """
    return json.loads(Path(config_path).read_text(encoding="utf-8"))


def parse_tsconfig_data(data: Any) -> TsconfigJson:
    """
    Map a parsed `tsconfig.json` object onto a `TsconfigJson`.

    Nothing is validated: path fields that aren't lists are treated as absent,
    non-string entries are dropped, and a `compilerOptions` that isn't an object
    contributes nothing.
    """
    if not isinstance(data, Mapping):
        return TsconfigJson()
    raw = cast(Mapping[str, Any], data)

    fields: dict[str, Any] = {}
    for name in _PATH_FIELDS:
        value = raw.get(name)
        if isinstance(value, list):
            fields[name] = [item for item in cast(list[Any], value) if isinstance(item, str)]

    compiler_options = raw.get("compilerOptions")
    if isinstance(compiler_options, Mapping):
        options = cast(Mapping[str, Any], compiler_options)
        fields["allow_js"] = bool(options.get("allowJs"))

    return TsconfigJson(**fields)


def load_tsconfig(config_path: str | Path) -> TsconfigJson:
    """Read, parse and map a config file in one step."""
    return parse_tsconfig_data(load_tsconfig_data(config_path))
