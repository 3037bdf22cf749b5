#!/usr/bin/env python
"""Scan C++ sources for function definitions that get a method separator.

Usage:
    python scripts/scan.py src/                       # List detected definitions
    python scripts/scan.py main.cpp --annotate        # Print annotated source
    python scripts/scan.py src/ --config methodsep.yaml --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from methodsep import MethodSeparatorFinder, SeparatorError, load_config


def print_marks(finder: MethodSeparatorFinder, path: Path) -> int:
    """Print one ``path:line: text`` row per detected definition."""
    result = finder.scan_file(path)
    for mark in result.marks:
        # Editors count lines from 1
        print(f"{path}:{mark.line_index + 1}: {mark.text}")
    return len(result.marks)


def print_annotated(finder: MethodSeparatorFinder, path: Path) -> None:
    """Print a file with separator rules inserted."""
    print(finder.annotate(finder.read_source(path)))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("paths", type=Path, nargs="+", help="Files or directories to scan")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--annotate", action="store_true", help="Print sources with separator rules")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
    except SeparatorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    finder = MethodSeparatorFinder(config)

    files = 0
    definitions = 0
    failures = 0
    for root in args.paths:
        try:
            paths = list(finder.iter_source_files(root))
        except SeparatorError as exc:
            failures += 1
            print(f"Error: {exc}", file=sys.stderr)
            continue

        for path in paths:
            files += 1
            try:
                if args.annotate:
                    print_annotated(finder, path)
                else:
                    definitions += print_marks(finder, path)
            except SeparatorError as exc:
                failures += 1
                print(f"Error: {exc}", file=sys.stderr)

    if not args.annotate:
        print(f"\n{definitions} definitions in {files} files", file=sys.stderr)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
