# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Console output utilities for the spec-harness CLI.

Provides colored output and formatted run summaries.
"""

import sys
from typing import List, Optional


class Console:
    """
    Colored console output for spec results.

    Color is only used when enabled and the output is a terminal.
    """

    # ANSI color codes
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    GRAY = '\033[90m'

    def __init__(self, color: bool = True, file=None):
        """
        Initialize console output.

        Args:
            color: Whether to use colored output.
            file: Output file (defaults to sys.stdout).
        """
        self._file = file or sys.stdout
        self._use_color = color and self._supports_color()

    def _supports_color(self) -> bool:
        """Check if the output supports color."""
        if not hasattr(self._file, 'isatty'):
            return False
        return self._file.isatty()

    def colorize(self, text: str, color: str) -> str:
        """Apply color to text if color is enabled."""
        if self._use_color:
            return f"{color}{text}{self.RESET}"
        return text

    def print(self, message: str = '', end: str = '\n') -> None:
        """Print a message."""
        print(message, end=end, file=self._file, flush=True)

    def success(self, message: str) -> None:
        """Print a success message in green."""
        self.print(self.colorize(message, self.GREEN))

    def error(self, message: str) -> None:
        """Print an error message in red."""
        self.print(self.colorize(message, self.RED))

    def warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        self.print(self.colorize(message, self.YELLOW))

    def header(self, message: str) -> None:
        """Print a bold header."""
        self.print(self.colorize(message, self.BOLD))

    def dim(self, message: str) -> None:
        """Print a dimmed message."""
        self.print(self.colorize(message, self.GRAY))

    def divider(self, char: str = '=', width: int = 60) -> None:
        """Print a divider line."""
        self.print(char * width)

    def summary(
        self,
        total: int,
        passed: int,
        failed: int,
        pending: int,
        errored: int,
        context_errors: int,
        duration: float,
    ) -> None:
        """Print the run summary."""
        self.print()
        self.divider()
        self.header("SPEC SUMMARY")
        self.divider()

        self.print(f"Examples: {total}")
        self._count("Passed:  ", passed, self.GREEN)
        self._count("Failed:  ", failed, self.RED)
        self._count("Pending: ", pending, self.YELLOW)
        self._count("Errored: ", errored, self.RED)
        if context_errors:
            self._count("Hook errors:", context_errors, self.RED)
        self.print(f"Duration: {duration:.2f}s")
        self.print()

        if failed == 0 and errored == 0 and context_errors == 0:
            self.success("RESULT: PASSED")
        else:
            self.error("RESULT: FAILED")

    def _count(self, label: str, count: int, color: str) -> None:
        if count > 0:
            self.print(f"{label} {self.colorize(str(count), color)}")
        else:
            self.print(f"{label} {count}")

    def list_failures(
        self,
        failures: List[tuple],
        show_details: bool = False,
    ) -> None:
        """
        Print list of failed examples.

        Args:
            failures: List of (name, reason, location, details) tuples.
            show_details: Whether to show tracebacks.
        """
        if not failures:
            return

        self.print()
        self.error("FAILURES:")
        for i, (name, reason, location, details) in enumerate(failures, 1):
            self.print(f"  {i}) {name}")
            self.print(f"     {self.colorize(reason, self.RED)}")
            if location:
                self.dim(f"     # {location}")
            if show_details and details:
                for line in details.rstrip().splitlines():
                    self.dim(f"     {line}")

    def spec_list_header(self, count: int) -> None:
        """Print header for spec file listing."""
        self.print(f"Found {count} spec file(s):")

    def spec_list_item(
        self,
        name: str,
        path: Optional[str] = None,
        description: Optional[str] = None,
        verbose: bool = False,
    ) -> None:
        """Print a spec file in the list."""
        if verbose:
            self.print(f"  {name}")
            if path:
                self.dim(f"    Path: {path}")
            if description:
                self.dim(f"    Desc: {description}")
        else:
            desc = f" - {description}" if description else ""
            self.print(f"  {name}{desc}")
