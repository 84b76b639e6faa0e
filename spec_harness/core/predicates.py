# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Composable predicates for expectations and property preconditions.

Each predicate is a function ``value -> bool`` that can be combined
with ``all_of``, ``any_of``, and ``negate``.

Example:
    from spec_harness.core.predicates import all_of, between, is_instance

    small_int = all_of(is_instance(int), between(0, 10))
    expect(7).should.be(small_int)
"""

from typing import Any, Callable

Predicate = Callable  # Callable[[T], bool], but keeping it simple for runtime


def _named(check: Callable, name: str) -> Callable:
    check.__name__ = name
    return check


def all_of(*predicates: Predicate) -> Predicate:
    """All predicates must hold for a given value."""
    def check(value):
        return all(p(value) for p in predicates)
    return _named(check, f"all_of({', '.join(_name(p) for p in predicates)})")


def any_of(*predicates: Predicate) -> Predicate:
    """At least one predicate must hold."""
    def check(value):
        return any(p(value) for p in predicates)
    return _named(check, f"any_of({', '.join(_name(p) for p in predicates)})")


def negate(predicate: Predicate) -> Predicate:
    """Invert a predicate."""
    def check(value):
        return not predicate(value)
    return _named(check, f"not {_name(predicate)}")


def greater_than(bound: Any) -> Predicate:
    return _named(lambda value: value > bound, f"greater_than({bound!r})")


def less_than(bound: Any) -> Predicate:
    return _named(lambda value: value < bound, f"less_than({bound!r})")


def between(lo: Any, hi: Any) -> Predicate:
    """Value falls within [lo, hi]."""
    return _named(lambda value: lo <= value <= hi, f"between({lo!r}, {hi!r})")


def is_instance(kind: type) -> Predicate:
    return _named(lambda value: isinstance(value, kind), f"is_instance({kind.__name__})")


def contains(item: Any) -> Predicate:
    """Container holds ``item``."""
    return _named(lambda value: item in value, f"contains({item!r})")


def _name(predicate: Predicate) -> str:
    return getattr(predicate, '__name__', repr(predicate))
