# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Console formatters for spec runs.

- ``NestedFormatter``: prints the context tree, indenting two spaces per
  depth, with one line per example.
- ``ProgressFormatter``: prints one symbol per example
  (``.`` passed, ``F`` failed, ``*`` pending, ``E`` errored).

Both end with the list of failures and a run summary.
"""

from typing import Dict, List, Optional, Type

from spec_harness.core.results import ContextError, ExampleResult, ResultKind, RunSummary
from spec_harness.output.console import Console
from spec_harness.output.reporter import Reporter


class ConsoleFormatter(Reporter):
    """Shared failure bookkeeping and summary output."""

    def __init__(self, console: Optional[Console] = None, show_details: bool = False):
        self.console = console or Console()
        self.show_details = show_details
        self._path: List[str] = []
        self._failures: List[tuple] = []

    def context_entered(self, name, depth):
        del self._path[depth:]
        self._path.append(name)

    def context_exited(self, name, depth):
        del self._path[depth:]

    def _full_name(self, name: str) -> str:
        return ' '.join(self._path + [name])

    def example_finished(self, name, depth, result):
        if result.is_failure:
            self._failures.append((
                self._full_name(name),
                result.reason,
                result.location,
                result.traceback,
            ))

    def context_errored(self, name, depth, error):
        self._failures.append((
            ' '.join(self._path[:depth] + [name]),
            error.reason,
            None,
            error.traceback,
        ))

    def failure_number(self) -> int:
        return len(self._failures)

    def run_finished(self, summary: RunSummary):
        self.console.list_failures(self._failures, show_details=self.show_details)
        self.console.summary(
            total=summary.total,
            passed=summary.passed,
            failed=summary.failed,
            pending=summary.pending,
            errored=summary.errored,
            context_errors=len(summary.context_errors),
            duration=summary.duration,
        )


class NestedFormatter(ConsoleFormatter):
    """Indented tree output, one line per context and example."""

    INDENT = '  '

    def context_entered(self, name, depth):
        super().context_entered(name, depth)
        if depth == 0:
            self.console.print()
            self.console.header(name)
        else:
            self.console.print(f"{self.INDENT * depth}{name}")

    def example_finished(self, name, depth, result: ExampleResult):
        super().example_finished(name, depth, result)
        c = self.console
        indent = self.INDENT * depth
        if result.kind == ResultKind.PASSED:
            line = c.colorize(name, c.GREEN)
        elif result.kind == ResultKind.PENDING:
            line = c.colorize(f"{name} (PENDING)", c.YELLOW)
        elif result.kind == ResultKind.FAILED:
            line = c.colorize(f"{name} (FAILED - {self.failure_number()})", c.RED)
        else:
            line = c.colorize(f"{name} (ERROR - {self.failure_number()})", c.RED + c.BOLD)
        c.print(f"{indent}{line}")

    def context_errored(self, name, depth, error: ContextError):
        super().context_errored(name, depth, error)
        indent = self.INDENT * (depth + 1)
        self.console.error(f"{indent}{error.reason} (ERROR - {self.failure_number()})")


class ProgressFormatter(ConsoleFormatter):
    """One symbol per example on a single line."""

    SYMBOLS = {
        ResultKind.PASSED: ('.', Console.GREEN),
        ResultKind.FAILED: ('F', Console.RED),
        ResultKind.PENDING: ('*', Console.YELLOW),
        ResultKind.ERRORED: ('E', Console.RED),
    }

    def example_finished(self, name, depth, result: ExampleResult):
        super().example_finished(name, depth, result)
        symbol, color = self.SYMBOLS[result.kind]
        self.console.print(self.console.colorize(symbol, color), end='')

    def context_errored(self, name, depth, error):
        super().context_errored(name, depth, error)
        self.console.print(self.console.colorize('E', self.console.RED), end='')

    def run_finished(self, summary):
        self.console.print()
        super().run_finished(summary)


FORMATTERS: Dict[str, Type[ConsoleFormatter]] = {
    'nested': NestedFormatter,
    'progress': ProgressFormatter,
}


def get_formatter(name: str, console: Optional[Console] = None, **kwargs) -> ConsoleFormatter:
    """
    Build the formatter registered under ``name``.

    Raises:
        ValueError: If no formatter has that name.
    """
    formatter_cls = FORMATTERS.get(name)
    if formatter_cls is None:
        raise ValueError(
            f"unknown format {name!r}; choose from {', '.join(sorted(FORMATTERS))}"
        )
    return formatter_cls(console=console, **kwargs)
