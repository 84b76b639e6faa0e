# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Suite runner: loads spec files and runs them as one report.
"""

import logging
import traceback
from pathlib import Path
from typing import Iterable, List, Optional

from spec_harness.core.engine import SpecRunner
from spec_harness.core.results import RunSummary
from spec_harness.core.run_config import RunConfig, apply_run_config
from spec_harness.output.reporter import Reporter
from spec_harness.runner.spec_registry import SpecFileInfo, SpecLoadError, SpecRegistry

logger = logging.getLogger(__name__)


class SuiteRunner:
    """Runner for a set of spec files sharing one reporter and summary."""

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        config: Optional[RunConfig] = None,
        registry: Optional[SpecRegistry] = None,
    ):
        """Initialize the suite runner.

        Args:
            reporter: Receives the event stream of every file.
            config: Run configuration to apply (reads the environment if None).
            registry: Registry used to discover and load files.
        """
        self.config = apply_run_config(config)
        self.registry = registry or SpecRegistry()
        self.spec_runner = SpecRunner(reporter=reporter)

    def run_files(self, specs: List[SpecFileInfo]) -> RunSummary:
        """Load and run every spec file, then emit the final summary.

        A file that fails to import is reported as a context error named
        after the file; the remaining files still run.
        """
        for info in specs:
            try:
                trees = self.registry.load(info)
            except SpecLoadError as e:
                self.spec_runner.record_context_error(
                    str(info.path),
                    0,
                    str(e),
                    ''.join(traceback.format_exception(type(e.cause), e.cause, e.cause.__traceback__)),
                )
                continue

            logger.debug("running %d spec tree(s) from %s", len(trees), info.path)
            self.spec_runner.run(trees, finish=False)

        return self.spec_runner.finish()

    def run_paths(
        self,
        paths: Optional[Iterable[Path]] = None,
        pattern: Optional[str] = None,
    ) -> RunSummary:
        """Discover spec files under ``paths`` and run them."""
        return self.run_files(self.registry.discover(paths=paths, pattern=pattern))


def run_spec_files(
    paths: Iterable[Path],
    reporter: Optional[Reporter] = None,
    pattern: Optional[str] = None,
    config: Optional[RunConfig] = None,
) -> RunSummary:
    """Convenience function to discover and run spec files.

    Args:
        paths: Spec files and/or directories.
        reporter: Reporter for the event stream.
        pattern: Glob pattern to filter discovered files.
        config: Run configuration (reads the environment if None).

    Returns:
        RunSummary for all files.
    """
    runner = SuiteRunner(reporter=reporter, config=config)
    return runner.run_paths(paths, pattern=pattern)
