# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Result types produced by the spec runner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ResultKind(Enum):
    """Outcome of running one example."""
    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"
    ERRORED = "errored"


@dataclass
class ExampleResult:
    """Result of a single example execution."""

    kind: ResultKind
    reason: str = ""
    """Failure message (Failed) or exception description (Errored)."""

    location: Optional[str] = None
    """``file:line`` of the failed expectation (Failed only)."""

    traceback: str = ""
    """Formatted traceback of the error (Errored only)."""

    duration: float = 0.0

    @classmethod
    def passed(cls, duration: float = 0.0) -> 'ExampleResult':
        return cls(ResultKind.PASSED, duration=duration)

    @classmethod
    def pending(cls, duration: float = 0.0) -> 'ExampleResult':
        return cls(ResultKind.PENDING, duration=duration)

    @classmethod
    def failed(
        cls,
        reason: str,
        location: Optional[str] = None,
        duration: float = 0.0,
    ) -> 'ExampleResult':
        return cls(ResultKind.FAILED, reason=reason, location=location, duration=duration)

    @classmethod
    def errored(
        cls,
        reason: str,
        traceback: str = "",
        duration: float = 0.0,
    ) -> 'ExampleResult':
        return cls(ResultKind.ERRORED, reason=reason, traceback=traceback, duration=duration)

    @property
    def is_failure(self) -> bool:
        """Failed or Errored: counts against the run."""
        return self.kind in (ResultKind.FAILED, ResultKind.ERRORED)

    def summary(self) -> str:
        """Return a one-line summary."""
        if self.location:
            return f"{self.kind.value}: {self.reason} ({self.location})"
        if self.reason:
            return f"{self.kind.value}: {self.reason}"
        return self.kind.value


@dataclass
class ExampleRecord:
    """An example's result together with where it sits in the tree."""

    name: str
    full_name: str
    depth: int
    result: ExampleResult


@dataclass
class ContextError:
    """A failure outside any example, e.g. in an after-all hook."""

    context: str
    depth: int
    reason: str
    traceback: str = ""


@dataclass
class RunSummary:
    """Counts per result kind, plus context-level errors."""

    passed: int = 0
    failed: int = 0
    pending: int = 0
    errored: int = 0
    context_errors: List[ContextError] = field(default_factory=list)
    records: List[ExampleRecord] = field(default_factory=list)
    duration: float = 0.0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.pending + self.errored

    @property
    def success(self) -> bool:
        """No example failed or errored, and no context hook failed."""
        return self.failed == 0 and self.errored == 0 and not self.context_errors

    def record(self, record: ExampleRecord) -> None:
        self.records.append(record)
        kind = record.result.kind
        if kind == ResultKind.PASSED:
            self.passed += 1
        elif kind == ResultKind.FAILED:
            self.failed += 1
        elif kind == ResultKind.PENDING:
            self.pending += 1
        else:
            self.errored += 1

