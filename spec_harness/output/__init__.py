# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Reporters and console formatting for spec runs."""

from spec_harness.output.console import Console
from spec_harness.output.reporter import Reporter, RecordingReporter, MultiReporter
from spec_harness.output.formatters import (
    ConsoleFormatter,
    NestedFormatter,
    ProgressFormatter,
    get_formatter,
)
from spec_harness.output.json_reporter import JsonReporter, export_to_json

__all__ = [
    'Console',
    'Reporter',
    'RecordingReporter',
    'MultiReporter',
    'ConsoleFormatter',
    'NestedFormatter',
    'ProgressFormatter',
    'get_formatter',
    'JsonReporter',
    'export_to_json',
]
