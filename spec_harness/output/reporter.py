# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Reporter interface for the spec runner's event stream.

The runner calls these methods in strict traversal order:

    context_entered -> (example_started -> example_finished)* ...
        -> context_errored? -> context_exited -> ... -> run_finished

Every method is a no-op here, so reporters override only what they need.
"""

from typing import Any, List, Sequence, Tuple

from spec_harness.core.results import ContextError, ExampleResult, RunSummary


class Reporter:
    """Base class for result-stream consumers."""

    def context_entered(self, name: str, depth: int) -> None:
        pass

    def example_started(self, name: str, depth: int) -> None:
        pass

    def example_finished(self, name: str, depth: int, result: ExampleResult) -> None:
        pass

    def context_errored(self, name: str, depth: int, error: ContextError) -> None:
        pass

    def context_exited(self, name: str, depth: int) -> None:
        pass

    def run_finished(self, summary: RunSummary) -> None:
        pass


class RecordingReporter(Reporter):
    """
    Records every event as a tuple, in order.

    Useful for asserting on the event stream in tests::

        reporter = RecordingReporter()
        SpecRunner(reporter).run(spec)
        assert reporter.events[0] == ('context_entered', 'Stack', 0)
    """

    def __init__(self):
        self.events: List[Tuple[Any, ...]] = []

    def context_entered(self, name, depth):
        self.events.append(('context_entered', name, depth))

    def example_started(self, name, depth):
        self.events.append(('example_started', name, depth))

    def example_finished(self, name, depth, result):
        self.events.append(('example_finished', name, depth, result))

    def context_errored(self, name, depth, error):
        self.events.append(('context_errored', name, depth, error))

    def context_exited(self, name, depth):
        self.events.append(('context_exited', name, depth))

    def run_finished(self, summary):
        self.events.append(('run_finished', summary))

    def results(self) -> List[Tuple[str, ExampleResult]]:
        """(example name, result) pairs in run order."""
        return [(e[1], e[3]) for e in self.events if e[0] == 'example_finished']


class MultiReporter(Reporter):
    """Forwards every event to several reporters, in the given order."""

    def __init__(self, reporters: Sequence[Reporter]):
        self.reporters = list(reporters)

    def context_entered(self, name, depth):
        for r in self.reporters:
            r.context_entered(name, depth)

    def example_started(self, name, depth):
        for r in self.reporters:
            r.example_started(name, depth)

    def example_finished(self, name, depth, result):
        for r in self.reporters:
            r.example_finished(name, depth, result)

    def context_errored(self, name, depth, error):
        for r in self.reporters:
            r.context_errored(name, depth, error)

    def context_exited(self, name, depth):
        for r in self.reporters:
            r.context_exited(name, depth)

    def run_finished(self, summary):
        for r in self.reporters:
            r.run_finished(summary)
