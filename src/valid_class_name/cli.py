"""Command-line entrypoint for checking class names against a project."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from valid_class_name.config import load_options
from valid_class_name.files import FileResolverCache
from valid_class_name.registry import RegistryCache, get_class_registry
from valid_class_name.validation import validate_class_names


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for the checker."""
    parser = argparse.ArgumentParser(prog="valid-class-name")
    subcommands = parser.add_subparsers(dest="command", required=True)
    check = subcommands.add_parser("check", help="validate class names for a project")
    check.add_argument("--cwd", required=False, default=".")
    check.add_argument("class_names", nargs="+", metavar="NAME")
    return parser


def run_check(cwd: Path, class_names: list[str], out_stream: TextIO) -> int:
    """Validate each name and write one JSON line per name; 1 when any is invalid."""
    options = load_options(cwd)
    cache = RegistryCache()
    registry = get_class_registry(options, cwd, cache=cache, file_cache=FileResolverCache())
    exit_code = 0
    try:
        for class_name in class_names:
            issues = validate_class_names(
                [class_name],
                registry,
                options.validation.ignore_patterns,
            )
            if issues:
                exit_code = 1
            payload = {
                "class_name": class_name,
                "valid": not issues,
                "issues": [issue.to_dict() for issue in issues],
            }
            out_stream.write(json.dumps(payload, sort_keys=True) + "\n")
        out_stream.flush()
    finally:
        cache.reset()
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the valid-class-name command."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    cwd = Path(args.cwd).resolve()
    try:
        return run_check(cwd, args.class_names, sys.stdout)
    except ValueError as error:
        parser.exit(2, f"valid-class-name: {error}\n")


if __name__ == "__main__":
    raise SystemExit(main())
