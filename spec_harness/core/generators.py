# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Random value generators for property-based specs.

A generator is any zero-argument callable returning a fresh random value.
Primitives below are generators themselves; the ``*_of`` and ``*_in_range``
factories build new generators from existing ones.  Every draw comes from a
single shared ``random.Random`` instance, which can be seeded or swapped out
for reproducible runs.

Example:
    from spec_harness.core.generators import list_of, integer, int_in_range

    small_lists = list_of(integer, length=int_in_range(0, 5))
    sample = small_lists()   # e.g. [83512, 2, 771020]
"""

import random
import string
from collections import deque
from contextlib import contextmanager
from typing import Any, Callable, Deque, Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')

Generator = Callable[[], Any]

MAX_INT = 2 ** 30
"""Exclusive upper bound of ``integer``."""

DEFAULT_MAX_LENGTH = 10
"""Inclusive upper bound of the default container length."""

_rng = random.Random()


# ---------------------------------------------------------------------------
# Shared random source
# ---------------------------------------------------------------------------

def random_source() -> random.Random:
    """Return the random source all generators draw from."""
    return _rng


def set_random_source(rng: random.Random) -> random.Random:
    """Replace the shared random source. Returns the previous one."""
    global _rng
    previous = _rng
    _rng = rng
    return previous


def seed(value: Optional[int]) -> None:
    """Seed the shared random source. ``None`` reseeds from the OS."""
    _rng.seed(value)


@contextmanager
def use_random_source(rng: random.Random) -> Iterator[random.Random]:
    """
    Temporarily draw from ``rng`` instead of the shared source.

    Example::

        with use_random_source(random.Random(42)):
            values = list_of(integer)()
    """
    previous = set_random_source(rng)
    try:
        yield rng
    finally:
        set_random_source(previous)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def boolean() -> bool:
    """True or False with equal probability."""
    return _rng.random() < 0.5


def floating() -> float:
    """Uniform float in [0, 1)."""
    return _rng.random()


def integer() -> int:
    """Uniform int in [0, MAX_INT)."""
    return _rng.randrange(MAX_INT)


def char() -> str:
    """Any character with code point 0-255."""
    return chr(_rng.randrange(256))


def ascii_char() -> str:
    """Any 7-bit ASCII character."""
    return chr(_rng.randrange(128))


def digit() -> str:
    return _rng.choice(string.digits)


def lowercase() -> str:
    return _rng.choice(string.ascii_lowercase)


def uppercase() -> str:
    return _rng.choice(string.ascii_uppercase)


def alphanumeric() -> str:
    return _rng.choice(string.ascii_letters + string.digits)


# ---------------------------------------------------------------------------
# Parameterized primitives
# ---------------------------------------------------------------------------

def int_below(bound: int) -> Callable[[], int]:
    """Generate ints in [0, bound)."""
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")
    return lambda: _rng.randrange(bound)


def int_in_range(lo: int, hi: int) -> Callable[[], int]:
    """Generate ints in the inclusive range [lo, hi]."""
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")
    return lambda: _rng.randint(lo, hi)


def float_in_range(lo: float, hi: float) -> Callable[[], float]:
    """Generate floats in [lo, hi)."""
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi})")
    return lambda: lo + (hi - lo) * _rng.random()


def default_length() -> int:
    """Length used by container generators when none is given: [0, 10]."""
    return _rng.randint(0, DEFAULT_MAX_LENGTH)


def constant(value: T) -> Callable[[], T]:
    return lambda: value


def one_of(values: Sequence[T]) -> Callable[[], T]:
    """Pick uniformly from a fixed, non-empty sequence of values."""
    choices = list(values)
    if not choices:
        raise ValueError("one_of needs at least one value")
    return lambda: _rng.choice(choices)


def map_gen(fn: Callable[[Any], T], gen: Generator) -> Callable[[], T]:
    """Apply ``fn`` to every value drawn from ``gen``."""
    return lambda: fn(gen())


def tuple_of(*gens: Generator) -> Callable[[], Tuple]:
    """Draw one value from each generator, left to right."""
    return lambda: tuple(g() for g in gens)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def _draw_length(length: Optional[Callable[[], int]]) -> int:
    n = (length or default_length)()
    if n < 0:
        raise ValueError(f"length generator produced a negative length: {n}")
    return n


def list_of(
    element: Callable[[], T],
    length: Optional[Callable[[], int]] = None,
) -> Callable[[], List[T]]:
    """Generate lists of ``element`` draws."""
    return lambda: [element() for _ in range(_draw_length(length))]


def array_of(
    element: Callable[[], T],
    length: Optional[Callable[[], int]] = None,
) -> Callable[[], Tuple[T, ...]]:
    """Generate fixed-size (tuple) sequences of ``element`` draws."""
    return lambda: tuple(element() for _ in range(_draw_length(length)))


def string_of(
    character: Callable[[], str],
    length: Optional[Callable[[], int]] = None,
) -> Callable[[], str]:
    """Generate strings from a character generator."""
    return lambda: ''.join(character() for _ in range(_draw_length(length)))


def queue_of(
    element: Callable[[], T],
    length: Optional[Callable[[], int]] = None,
) -> Callable[[], Deque[T]]:
    """Generate FIFO queues; the first value drawn is at the front."""
    return lambda: deque(element() for _ in range(_draw_length(length)))


def stack_of(
    element: Callable[[], T],
    length: Optional[Callable[[], int]] = None,
) -> Callable[[], List[T]]:
    """Generate stacks as lists; the last value drawn is on top."""
    def make() -> List[T]:
        stack: List[T] = []
        for _ in range(_draw_length(length)):
            stack.append(element())
        return stack
    return make


def hashtbl_of(
    key: Callable[[], K],
    value: Callable[[], V],
    length: Optional[Callable[[], int]] = None,
) -> Callable[[], Dict[K, V]]:
    """
    Generate dicts from key and value generators.

    ``length`` is the number of bindings drawn; a key drawn twice keeps its
    last value, so the result may be smaller than the drawn length.
    """
    def make() -> Dict[K, V]:
        table: Dict[K, V] = {}
        for _ in range(_draw_length(length)):
            k = key()
            table[k] = value()
        return table
    return make
