# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Core spec infrastructure: tree model, runner, assertions and properties."""

from spec_harness.core.assertions import (
    AssertionFailure,
    Expectation,
    expect,
)
from spec_harness.core.run_config import (
    RunConfig,
    get_run_config,
    apply_run_config,
    active_run_config,
)
from spec_harness.core.property import (
    PropertyStatus,
    PropertyResult,
    PropertyFalsified,
    GenerationExhausted,
    check_property,
    forall,
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

__all__ = [
    'AssertionFailure',
    'Expectation',
    'expect',
    'RunConfig',
    'get_run_config',
    'apply_run_config',
    'active_run_config',
    'PropertyStatus',
    'PropertyResult',
    'PropertyFalsified',
    'GenerationExhausted',
    'check_property',
    'forall',
    'SpecDefinitionError',
    'UnknownContextError',
    'HookKind',
    'Hook',
    'Context',
    'Example',
    'SpecTree',
    'SpecBuilder',
    'ResultKind',
    'ExampleResult',
    'ExampleRecord',
    'ContextError',
    'RunSummary',
    'SpecRunner',
    'run_specs',
]
