# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration for spec_harness unit tests.

Every test gets a freshly seeded random source and an environment-free
run configuration, so results do not depend on test order or on
SPEC_HARNESS_* variables set in the calling shell.
"""

import os
import random

import pytest

from spec_harness.core import generators
from spec_harness.core.run_config import reset_run_config

SPEC_HARNESS_ENV = (
    'SPEC_HARNESS_SEED',
    'SPEC_HARNESS_FORMAT',
    'SPEC_HARNESS_NIGHTLY',
    'SPEC_HARNESS_DISCARD_RATIO',
    'NO_COLOR',
)


@pytest.fixture(autouse=True)
def isolated_run_state(monkeypatch):
    """Clear spec_harness env vars and pin the shared random source."""
    for name in SPEC_HARNESS_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_run_config()
    previous = generators.set_random_source(random.Random(1234))
    yield
    generators.set_random_source(previous)
    reset_run_config()
