# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Randomized property checking.

``forall`` draws samples from one generator (or a tuple of generators),
discards samples that fail an optional precondition, and checks a conclusion
on every accepted sample.  The first falsifying sample is reported as-is;
there is no shrinking.

Rejected samples count toward a discard budget of ``discard_ratio`` times
the requested sample count.  When the budget runs out before enough samples
were accepted, the property is reported as exhausted: inconclusive, but
never a pass.

Example:
    from spec_harness.core.generators import boolean, integer, list_of
    from spec_harness.core.property import forall

    forall(list_of(integer), lambda l: list(reversed(list(reversed(l)))) == l)

    forall(boolean, lambda b: b is True,
           count=10, precondition=lambda b: b)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from spec_harness.core.assertions import AssertionFailure, caller_location
from spec_harness.core.run_config import DEFAULT_SAMPLE_COUNT, active_run_config

logger = logging.getLogger(__name__)

GeneratorBinding = Union[Callable[[], Any], Sequence[Callable[[], Any]]]


class PropertyStatus(Enum):
    """Outcome of a property check."""
    PASSED = "passed"
    FALSIFIED = "falsified"
    EXHAUSTED = "exhausted"


@dataclass
class PropertyResult:
    """
    Result of checking a property over generated samples.

    When the property is falsified, ``counterexample`` holds the exact sample
    that violated it (a tuple when several generators are bound).
    """

    status: PropertyStatus
    requested: int
    accepted: int = 0
    discarded: int = 0
    counterexample: Any = None
    details: str = ""
    description: str = ""

    @property
    def passed(self) -> bool:
        return self.status == PropertyStatus.PASSED


class PropertyFalsified(AssertionFailure):
    """
    A generated sample violated the conclusion.

    Attributes:
        counterexample: The falsifying sample.
        accepted: Accepted samples evaluated, the falsifying one included.
    """

    def __init__(
        self,
        message: str,
        counterexample: Any = None,
        accepted: int = 0,
        location: Optional[str] = None,
    ):
        self.counterexample = counterexample
        self.accepted = accepted
        super().__init__(message, location)


class GenerationExhausted(AssertionFailure):
    """Too many samples were rejected by the precondition."""

    def __init__(
        self,
        message: str,
        accepted: int = 0,
        discarded: int = 0,
        location: Optional[str] = None,
    ):
        self.accepted = accepted
        self.discarded = discarded
        super().__init__(message, location)


def _sampler(generator: GeneratorBinding) -> Tuple[Callable[[], Tuple], bool]:
    """Return (draw, is_tuple) for a single generator or a sequence of them."""
    if callable(generator):
        return (lambda: (generator(),)), False
    gens = tuple(generator)
    if not gens or not all(callable(g) for g in gens):
        raise TypeError("forall needs a generator or a non-empty sequence of generators")
    return (lambda: tuple(g() for g in gens)), True


def _label(description: str) -> str:
    return f" ({description})" if description else ""


def check_property(
    generator: GeneratorBinding,
    conclusion: Callable[..., Any],
    count: Optional[int] = None,
    precondition: Optional[Callable[..., bool]] = None,
    discard_ratio: Optional[int] = None,
    description: str = "",
) -> PropertyResult:
    """
    Check ``conclusion`` over randomly generated samples.

    Args:
        generator: Zero-argument generator, or a sequence of them whose
            draws are passed positionally.
        conclusion: Called with each accepted sample.  Returning ``False``
            or raising ``AssertionError`` falsifies the property; any other
            return value counts as a pass.
        count: Accepted samples required (default 100, 10x in nightly mode).
        precondition: Samples for which this returns false are discarded.
        discard_ratio: Discard budget per requested sample (default from
            the active RunConfig).
        description: Human-readable property description.

    Returns:
        PropertyResult with status, counters and counterexample.

    Raises:
        Errors from generators, preconditions or conclusions that are not
        assertion failures propagate unchanged.
    """
    config = active_run_config()
    if count is None:
        count = DEFAULT_SAMPLE_COUNT * config.sample_multiplier
    if count < 1:
        raise ValueError(f"sample count must be positive, got {count}")
    ratio = config.discard_ratio if discard_ratio is None else discard_ratio
    budget = ratio * count

    draw, is_tuple = _sampler(generator)

    def shown(sample: Tuple) -> Any:
        return sample if is_tuple else sample[0]

    accepted = 0
    discarded = 0
    while accepted < count:
        sample = draw()
        if precondition is not None and not precondition(*sample):
            discarded += 1
            if discarded < budget:
                continue
            logger.debug(
                "property%s exhausted: %d accepted, %d discarded",
                _label(description), accepted, discarded,
            )
            return PropertyResult(
                status=PropertyStatus.EXHAUSTED,
                requested=count,
                accepted=accepted,
                discarded=discarded,
                details=(
                    f"Could not generate enough valid samples: "
                    f"{accepted}/{count} accepted after {discarded} discarded"
                    f"{_label(description)}"
                ),
                description=description,
            )

        accepted += 1
        try:
            holds = conclusion(*sample) is not False
            reason = ""
        except AssertionError as e:
            holds = False
            reason = f": {e}"

        if not holds:
            return PropertyResult(
                status=PropertyStatus.FALSIFIED,
                requested=count,
                accepted=accepted,
                discarded=discarded,
                counterexample=shown(sample),
                details=(
                    f"Property falsified after {accepted} sample(s) by "
                    f"{shown(sample)!r}{_label(description)}{reason}"
                ),
                description=description,
            )

    logger.debug(
        "property%s held for %d samples (%d discarded)",
        _label(description), accepted, discarded,
    )
    return PropertyResult(
        status=PropertyStatus.PASSED,
        requested=count,
        accepted=accepted,
        discarded=discarded,
        description=description,
    )


def forall(
    generator: GeneratorBinding,
    conclusion: Callable[..., Any],
    count: Optional[int] = None,
    precondition: Optional[Callable[..., bool]] = None,
    discard_ratio: Optional[int] = None,
    description: str = "",
) -> PropertyResult:
    """
    Assert that ``conclusion`` holds for every generated sample.

    Same arguments as ``check_property``.

    Raises:
        PropertyFalsified: A sample violated the conclusion.
        GenerationExhausted: The discard budget ran out first.
    """
    location = caller_location()
    result = check_property(
        generator,
        conclusion,
        count=count,
        precondition=precondition,
        discard_ratio=discard_ratio,
        description=description,
    )
    if result.status == PropertyStatus.FALSIFIED:
        raise PropertyFalsified(
            result.details,
            counterexample=result.counterexample,
            accepted=result.accepted,
            location=location,
        )
    if result.status == PropertyStatus.EXHAUSTED:
        raise GenerationExhausted(
            result.details,
            accepted=result.accepted,
            discarded=result.discarded,
            location=location,
        )
    return result
