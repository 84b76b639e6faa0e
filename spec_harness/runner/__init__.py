# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Spec file discovery and the spec-harness command line.

Usage:
    # Run every *_spec.py under the current directory
    spec-harness

    # Run specific files with terse output
    spec-harness -format progress specs/stack_spec.py

    # List discovered spec files
    spec-harness --list-only specs/
"""

from spec_harness.runner.spec_registry import (
    SpecRegistry,
    SpecFileInfo,
    SpecLoadError,
    discover_specs,
)
from spec_harness.runner.runner import SuiteRunner, run_spec_files

__all__ = [
    'SpecRegistry',
    'SpecFileInfo',
    'SpecLoadError',
    'discover_specs',
    'SuiteRunner',
    'run_spec_files',
]
