# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for running spec files.

    spec-harness [options] PATH [PATH ...]

Exit status is 0 when every example passed or is pending, 1 when any
example failed or errored, a hook outside an example failed, or a spec file
could not be loaded, and 2 for usage errors.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from spec_harness.core.run_config import FORMATS, get_run_config
from spec_harness.output.console import Console
from spec_harness.output.formatters import get_formatter
from spec_harness.output.json_reporter import JsonReporter
from spec_harness.output.reporter import MultiReporter
from spec_harness.runner.runner import SuiteRunner
from spec_harness.runner.spec_registry import SpecRegistry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run behavior-driven spec files",
        prog="spec-harness",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        metavar="PATH",
        help="Spec files or directories (default: current directory)",
    )
    parser.add_argument(
        "-format", "--format",
        dest="output_format",
        choices=FORMATS,
        help="Output format (default: nested, or $SPEC_HARNESS_FORMAT)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for property-test generators (default: $SPEC_HARNESS_SEED)",
    )
    parser.add_argument(
        "--pattern",
        help="Glob pattern to filter discovered spec files (e.g., 'stack_*')",
    )
    parser.add_argument(
        "--json",
        type=Path,
        metavar="FILE",
        help="Also write results to a JSON file",
    )
    parser.add_argument(
        "--nightly",
        action="store_true",
        help="Run 10x more property-test samples",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "-l", "--list-only",
        action="store_true",
        help="Only list spec files without running",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show tracebacks and debug logging",
    )
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Entry point for the spec-harness command."""
    parsed = build_parser().parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = get_run_config()
    overrides = {}
    if parsed.output_format:
        overrides['output_format'] = parsed.output_format
    if parsed.seed is not None:
        overrides['seed'] = parsed.seed
    if parsed.nightly:
        overrides['nightly'] = True
    if parsed.no_color:
        overrides['color'] = False
    config = dataclasses.replace(config, **overrides)

    console = Console(color=config.color)
    registry = SpecRegistry()
    specs = registry.discover(paths=parsed.paths or None, pattern=parsed.pattern)

    if not specs:
        console.warning("No spec files found.")
        return 0

    if parsed.list_only:
        console.spec_list_header(len(specs))
        for info in specs:
            console.spec_list_item(
                info.name,
                path=str(info.path),
                description=info.description,
                verbose=parsed.verbose,
            )
        return 0

    reporter = get_formatter(config.output_format, console=console, show_details=parsed.verbose)
    if parsed.json:
        reporter = MultiReporter([reporter, JsonReporter(parsed.json)])

    if config.seed is not None:
        console.dim(f"Randomized with seed {config.seed}")

    runner = SuiteRunner(reporter=reporter, config=config, registry=registry)
    summary = runner.run_files(specs)

    return 0 if summary.success else 1


if __name__ == "__main__":
    sys.exit(main())
