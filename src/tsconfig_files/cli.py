#!/usr/bin/env python3
"""
tsconfig-files: List the source files a tsconfig.json puts in scope

Common usage:
  tsconfig-files
  tsconfig-files packages/app
  tsconfig-files -p tsconfig.build.json
  tsconfig-files --config-name tsconfig.lib.json --absolute .

The nearest config file at or above the directory is used, and paths are printed
relative to the directory containing it.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from tsconfig_files.config import TsconfigNotFoundError, find_tsconfig, load_tsconfig
from tsconfig_files.defaults import TSCONFIG_FILENAME
from tsconfig_files.resolver import get_files_from_tsconfig_json_sync


@dataclass
class Options:
    """Command-line options for the tsconfig-files tool."""

    directory: str
    project: str | None
    config_name: str
    absolute: bool
    verbose: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=str,
        default=".",
        help="Directory to start searching for the config file from (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--project",
        type=str,
        default=None,
        metavar="PATH",
        help="Use this config file (or the config file in this directory) instead of "
        "searching; its directory is the search root",
    )
    parser.add_argument(
        "--config-name",
        type=str,
        default=TSCONFIG_FILENAME,
        dest="config_name",
        metavar="NAME",
        help="Config file name to search for (default: %(default)s)",
    )
    parser.add_argument(
        "--absolute",
        action="store_true",
        help="Print absolute paths instead of paths relative to the config directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    return Options(
        directory=opts.directory,
        project=opts.project,
        config_name=opts.config_name,
        absolute=opts.absolute,
        verbose=opts.verbose,
        version=opts.version,
    )


def _find_config(options: Options) -> Path:
    """Return the config file named by `--project`, or the nearest one found."""
    if options.project is not None:
        project = Path(options.project)
        if project.is_dir():
            project = project / options.config_name
        if not project.is_file():
            raise TsconfigNotFoundError(project.name, project.parent)
        return project.resolve()

    config_path = find_tsconfig(options.directory, options.config_name)
    if config_path is None:
        raise TsconfigNotFoundError(options.config_name, options.directory)
    return config_path


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the tsconfig-files CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 1 if no config file was found, 2 for other errors)
    """
    options = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("tsconfig-files")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config_path = _find_config(options)
        root = config_path.parent
        files = get_files_from_tsconfig_json_sync(load_tsconfig(config_path), root)
    except TsconfigNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        # Invalid JSON in the config, or an unreadable file or directory.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for f in files:
        print(root / f if options.absolute else f)
    return 0


if __name__ == "__main__":
    sys.exit(main())
