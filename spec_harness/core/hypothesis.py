# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Hypothesis integration for property-based specs.

Optional module: requires ``pip install hypothesis`` (or
``pip install spec_harness[hypothesis]``).

Provides:

- ``spec_property``: a pre-configured Hypothesis ``@settings`` decorator
  (no deadline, persistent database, slow health checks suppressed).
- ``hypothesis_forall``: the ``forall`` contract driven by Hypothesis, so
  counterexamples are shrunk to a minimal sample before being reported.

Example::

    from hypothesis import strategies as st
    from spec_harness.core.hypothesis import hypothesis_forall

    @spec.it("sorts idempotently")
    def _():
        hypothesis_forall(
            st.lists(st.integers()),
            lambda xs: sorted(sorted(xs)) == sorted(xs),
        )
"""

import os
from typing import Any, Callable, Optional, Sequence, Union

try:
    from hypothesis import HealthCheck, assume, settings
    from hypothesis import given as hypothesis_given
    from hypothesis import strategies as st
    from hypothesis.database import DirectoryBasedExampleDatabase
    from hypothesis.errors import Unsatisfiable
    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False

from spec_harness.core.assertions import caller_location
from spec_harness.core.property import GenerationExhausted, PropertyFalsified
from spec_harness.core.run_config import NIGHTLY_MULTIPLIER, active_run_config

# Default location for the persistent Hypothesis example database.
_DEFAULT_DB_DIR = os.path.join(
    os.environ.get('HOME', '/tmp'),
    '.hypothesis', 'spec_harness',
)


def _require_hypothesis():
    """Raise ImportError if hypothesis is not installed."""
    if not HAS_HYPOTHESIS:
        raise ImportError(
            "hypothesis is required for this feature. "
            "Install it with: pip install hypothesis"
        )


# ---------------------------------------------------------------------------
# spec_property: pre-configured @settings
# ---------------------------------------------------------------------------

def spec_property(
    max_examples: int = 100,
    deadline: Optional[int] = None,
    database_dir: Optional[str] = None,
    derandomize: bool = False,
    nightly: bool = False,
    **extra_settings,
):
    """
    Hypothesis ``@settings`` pre-configured for spec examples.

    - No deadline (example bodies often touch slow fixtures)
    - Persistent example database (shrunk counterexamples survive across runs)
    - ``too_slow`` health check suppressed

    Args:
        max_examples: Number of test cases to generate.
        deadline: Per-example time limit in ms.  None (default) disables it.
        database_dir: Directory for the persistent example database.
            Defaults to ``~/.hypothesis/spec_harness/``.
        derandomize: If True, use deterministic example generation.
        nightly: If True, use 10x more examples.  Also enabled by
            ``SPEC_HARNESS_NIGHTLY``.
        **extra_settings: Additional keyword args passed to
            ``hypothesis.settings``.

    Returns:
        A ``hypothesis.settings`` decorator.
    """
    _require_hypothesis()

    if nightly or active_run_config().nightly:
        max_examples = max_examples * NIGHTLY_MULTIPLIER

    db_dir = database_dir or _DEFAULT_DB_DIR

    suppressed = list(extra_settings.pop('suppress_health_check', []))
    if HealthCheck.too_slow not in suppressed:
        suppressed.append(HealthCheck.too_slow)

    return settings(
        max_examples=max_examples,
        deadline=deadline,
        database=DirectoryBasedExampleDatabase(db_dir),
        suppress_health_check=suppressed,
        derandomize=derandomize,
        **extra_settings,
    )


# ---------------------------------------------------------------------------
# forall driven by Hypothesis
# ---------------------------------------------------------------------------

def hypothesis_forall(
    strategies: Union['st.SearchStrategy', Sequence['st.SearchStrategy']],
    conclusion: Callable[..., Any],
    precondition: Optional[Callable[..., bool]] = None,
    max_examples: int = 100,
    description: str = "",
) -> None:
    """
    Check ``conclusion`` over Hypothesis-generated samples.

    Samples failing ``precondition`` are rejected with ``assume``.  A
    conclusion returning ``False`` or raising ``AssertionError`` falsifies
    the property; Hypothesis then shrinks the sample before it is reported.

    Args:
        strategies: One strategy, or a sequence whose draws are passed
            positionally.
        conclusion: Predicate over the sample.
        precondition: Optional filter predicate.
        max_examples: Number of samples to try.
        description: Human-readable description.

    Raises:
        PropertyFalsified: With the shrunk counterexample.
        GenerationExhausted: The precondition rejected every sample.
    """
    _require_hypothesis()
    location = caller_location()

    if isinstance(strategies, st.SearchStrategy):
        combined = st.tuples(strategies)
        single = True
    else:
        combined = st.tuples(*strategies)
        single = False

    @spec_property(
        max_examples=max_examples,
        suppress_health_check=[HealthCheck.filter_too_much],
    )
    @hypothesis_given(sample=combined)
    def _check(sample):
        if precondition is not None:
            assume(precondition(*sample))
        shown = sample[0] if single else sample
        try:
            holds = conclusion(*sample) is not False
            reason = ""
        except AssertionError as e:
            holds = False
            reason = f": {e}"
        if not holds:
            label = f" ({description})" if description else ""
            raise PropertyFalsified(
                f"Property falsified by {shown!r}{label}{reason}",
                counterexample=shown,
                location=location,
            )

    try:
        _check()
    except Unsatisfiable as e:
        label = f" ({description})" if description else ""
        raise GenerationExhausted(
            f"Could not generate enough valid samples{label}: {e}",
            location=location,
        ) from e
