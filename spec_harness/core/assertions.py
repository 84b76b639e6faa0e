# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Expectations for example bodies.

Every expectation has a positive (``should``) and a negated (``should_not``)
form; the negated form inverts the outcome of the same check.  A violated
expectation raises ``AssertionFailure``, which the runner reports as a
failed example rather than an error.

Example:
    from spec_harness.core.assertions import expect

    expect(1 + 1).should.equal(2)
    expect(-1).should_not.be(lambda x: x >= 0)
    expect(lambda: 1 / 0).should.raise_exception(ZeroDivisionError)
    expect({'id': 3}).should.match(lambda d: 'id' in d)
"""

import operator
import sys
from typing import Any, Callable, Optional


class AssertionFailure(AssertionError):
    """
    An expectation that did not hold.

    Attributes:
        location: ``"file:line"`` of the expectation, if known.
    """

    def __init__(self, message: str, location: Optional[str] = None):
        self.message = message
        self.location = location
        super().__init__(message)


def caller_location(depth: int = 1) -> Optional[str]:
    """Return ``"file:line"`` of the frame ``depth`` levels above the caller."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def _describe(fn: Callable) -> str:
    """Readable name for a predicate or exception kind in messages."""
    name = getattr(fn, '__name__', None)
    if name is None or name == '<lambda>':
        return repr(fn)
    return name


def _capture(thunk: Callable[[], Any]) -> Optional[BaseException]:
    """Call ``thunk`` and return whatever it raised, or None."""
    try:
        thunk()
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        return e
    return None


def _require_callable(actual: Any) -> None:
    if not callable(actual):
        raise TypeError(
            f"exception expectations need a callable, got {actual!r}; "
            f"wrap the code under test in a lambda"
        )


def _exception_matches(raised: BaseException, expected: Any) -> bool:
    if isinstance(expected, type) and issubclass(expected, BaseException):
        return isinstance(raised, expected)
    if isinstance(expected, BaseException):
        return type(raised) is type(expected) and raised.args == expected.args
    raise TypeError(
        f"expected an exception class or instance, got {expected!r}"
    )


class _Should:
    """One polarity (positive or negated) of an expectation."""

    def __init__(self, expectation: 'Expectation', negated: bool):
        self._expectation = expectation
        self._negated = negated

    @property
    def _verb(self) -> str:
        return "not to" if self._negated else "to"

    def _check(self, outcome: bool, message: str) -> None:
        if outcome == self._negated:
            raise AssertionFailure(message, self._expectation.location)

    def equal(
        self,
        expected: Any,
        eq: Callable[[Any, Any], bool] = operator.eq,
    ) -> None:
        """``actual`` equals ``expected`` under ``eq``."""
        actual = self._expectation.actual
        self._check(
            bool(eq(actual, expected)),
            f"expected {actual!r} {self._verb} equal {expected!r}",
        )

    def be(self, predicate: Callable[[Any], bool]) -> None:
        """``predicate(actual)`` holds."""
        actual = self._expectation.actual
        self._check(
            bool(predicate(actual)),
            f"expected {actual!r} {self._verb} satisfy {_describe(predicate)}",
        )

    def match(self, pattern: Callable[[Any], bool]) -> None:
        """``actual`` matches ``pattern``, a caller-supplied matcher."""
        actual = self._expectation.actual
        self._check(
            bool(pattern(actual)),
            f"expected {actual!r} {self._verb} match {_describe(pattern)}",
        )

    def raise_an_exception(self) -> None:
        """Calling ``actual`` raises anything."""
        _require_callable(self._expectation.actual)
        raised = _capture(self._expectation.actual)
        if self._negated:
            detail = f", but it raised {raised!r}"
        else:
            detail = ", but nothing was raised"
        self._check(
            raised is not None,
            f"expected {_describe(self._expectation.actual)} {self._verb} "
            f"raise an exception{detail}",
        )

    def raise_exception(self, expected: Any) -> None:
        """
        Calling ``actual`` raises ``expected``.

        ``expected`` is an exception class (matched with ``isinstance``) or
        an exception instance (same type and same ``args``).
        """
        _require_callable(self._expectation.actual)
        raised = _capture(self._expectation.actual)
        outcome = raised is not None and _exception_matches(raised, expected)
        if raised is None:
            detail = "nothing was raised"
        else:
            detail = f"it raised {raised!r}"
        self._check(
            outcome,
            f"expected {_describe(self._expectation.actual)} {self._verb} "
            f"raise {_describe(expected) if isinstance(expected, type) else repr(expected)}, "
            f"but {detail}",
        )


class Expectation:
    """
    A value under test, with ``should`` and ``should_not`` checks.

    Attributes:
        actual: The value (or, for exception checks, the callable) under test.
        location: ``"file:line"`` reported on failure.
    """

    def __init__(self, actual: Any, location: Optional[str] = None):
        self.actual = actual
        self.location = location

    @property
    def should(self) -> _Should:
        return _Should(self, negated=False)

    @property
    def should_not(self) -> _Should:
        return _Should(self, negated=True)


def expect(actual: Any, location: Optional[str] = None) -> Expectation:
    """
    Start an expectation about ``actual``.

    Args:
        actual: Value under test.
        location: Source location to report; defaults to the caller's
            file and line.
    """
    return Expectation(actual, location or caller_location())


def failure_location(exc: BaseException) -> Optional[str]:
    """
    Location of an assertion failure.

    Uses the failure's own location when it carries one, else the innermost
    traceback frame (so plain ``assert`` statements get a location too).
    """
    location = getattr(exc, 'location', None)
    if location:
        return location
    tb = exc.__traceback__
    if tb is None:
        return None
    while tb.tb_next is not None:
        tb = tb.tb_next
    return f"{tb.tb_frame.f_code.co_filename}:{tb.tb_lineno}"

