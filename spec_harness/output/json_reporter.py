# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
JSON export of spec results.

Writes one document per run::

    {
      "timestamp": "...",
      "summary": {"total": 3, "passed": 2, "failed": 1, ...},
      "examples": [{"name": ..., "full_name": ..., "kind": "failed", ...}],
      "context_errors": [...]
    }
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from spec_harness.core.results import RunSummary
from spec_harness.output.reporter import Reporter

logger = logging.getLogger(__name__)


def summary_to_dict(summary: RunSummary) -> Dict[str, Any]:
    """Serializable view of a run summary."""
    examples = []
    for record in summary.records:
        result = asdict(record.result)
        result['kind'] = record.result.kind.value
        examples.append({
            'name': record.name,
            'full_name': record.full_name,
            'depth': record.depth,
            **result,
        })

    return {
        'timestamp': datetime.now().isoformat(),
        'summary': {
            'total': summary.total,
            'passed': summary.passed,
            'failed': summary.failed,
            'pending': summary.pending,
            'errored': summary.errored,
            'context_errors': len(summary.context_errors),
            'duration': summary.duration,
            'success': summary.success,
        },
        'examples': examples,
        'context_errors': [asdict(e) for e in summary.context_errors],
    }


class JsonReporter(Reporter):
    """Writes the run's results to a JSON file when the run finishes."""

    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)
        self.written = False

    def run_finished(self, summary):
        self.written = export_to_json(summary, self.filepath)


def export_to_json(summary: RunSummary, filepath: Union[str, Path]) -> bool:
    """Export results to a JSON file. Returns True on success."""
    try:
        data = summary_to_dict(summary)
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)
        return True
    except (OSError, TypeError) as e:
        logger.error("Failed to export results to %s: %s", filepath, e)
        return False
