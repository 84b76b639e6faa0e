# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
spec_harness - Behavior-driven specs and randomized property checks.

A small BDD framework, providing:
- Nested describe/it contexts with before/after hooks
- A runner that reports every example as passed, failed, pending or errored
- Positive and negated expectations (expect(x).should / .should_not)
- Random value generators and a forall property checker
- Nested and progress console formatters, JSON export and a CLI

Example usage:
    from spec_harness import SpecBuilder, expect, forall
    from spec_harness import generators as gen

    spec = SpecBuilder()

    with spec.describe("list reversal"):

        @spec.it("is its own inverse")
        def _():
            forall(gen.list_of(gen.integer),
                   lambda xs: list(reversed(list(reversed(xs)))) == xs)

        @spec.it("keeps the length")
        def _():
            expect(len(list(reversed([1, 2, 3])))).should.equal(3)

Save as ``reverse_spec.py`` and run ``spec-harness reverse_spec.py``.
"""

from spec_harness.core import generators
from spec_harness.core import predicates
from spec_harness.core.assertions import (
    AssertionFailure,
    Expectation,
    expect,
)
from spec_harness.core.tree import (
    SpecDefinitionError,
    UnknownContextError,
    HookKind,
    Hook,
    Context,
    Example,
    SpecTree,
)
from spec_harness.core.builder import SpecBuilder
from spec_harness.core.results import (
    ResultKind,
    ExampleResult,
    ExampleRecord,
    ContextError,
    RunSummary,
)
from spec_harness.core.engine import SpecRunner, run_specs
from spec_harness.core.run_config import (
    RunConfig,
    get_run_config,
    apply_run_config,
)

# Property checking
from spec_harness.core.property import (
    PropertyStatus,
    PropertyResult,
    PropertyFalsified,
    GenerationExhausted,
    check_property,
    forall,
)
from spec_harness.core.predicates import (
    all_of,
    any_of,
    negate,
)

# Hypothesis property-based testing (optional dependency)
from spec_harness.core.hypothesis import (
    spec_property,
    hypothesis_forall,
)

# Reporters
from spec_harness.output.reporter import (
    Reporter,
    RecordingReporter,
    MultiReporter,
)
from spec_harness.output.formatters import (
    NestedFormatter,
    ProgressFormatter,
    get_formatter,
)
from spec_harness.output.json_reporter import JsonReporter, export_to_json

__all__ = [
    # Modules
    'generators',
    'predicates',
    # Tree and builder
    'SpecDefinitionError',
    'UnknownContextError',
    'HookKind',
    'Hook',
    'Context',
    'Example',
    'SpecTree',
    'SpecBuilder',
    # Assertions
    'AssertionFailure',
    'Expectation',
    'expect',
    # Engine and results
    'ResultKind',
    'ExampleResult',
    'ExampleRecord',
    'ContextError',
    'RunSummary',
    'SpecRunner',
    'run_specs',
    'RunConfig',
    'get_run_config',
    'apply_run_config',
    # Properties
    'PropertyStatus',
    'PropertyResult',
    'PropertyFalsified',
    'GenerationExhausted',
    'check_property',
    'forall',
    'all_of',
    'any_of',
    'negate',
    # Hypothesis
    'spec_property',
    'hypothesis_forall',
    # Reporters
    'Reporter',
    'RecordingReporter',
    'MultiReporter',
    'NestedFormatter',
    'ProgressFormatter',
    'get_formatter',
    'JsonReporter',
    'export_to_json',
]
