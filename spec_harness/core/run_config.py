# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Run configuration for spec_harness.

Reads settings from the environment so that CI can pin a seed or enable
nightly depth without changing spec files:

- ``SPEC_HARNESS_SEED``: integer seed for the shared random source
- ``SPEC_HARNESS_FORMAT``: default output format (``nested`` or ``progress``)
- ``SPEC_HARNESS_NIGHTLY``: ``1``/``true``/``yes`` runs 10x property samples
- ``SPEC_HARNESS_DISCARD_RATIO``: discard budget per requested sample
- ``NO_COLOR``: disable colored output
"""

import os
from dataclasses import dataclass
from typing import Optional

from spec_harness.core import generators

FORMATS = ('nested', 'progress')

DEFAULT_SAMPLE_COUNT = 100
DEFAULT_DISCARD_RATIO = 10
NIGHTLY_MULTIPLIER = 10


@dataclass
class RunConfig:
    """Settings shared by the runner and the property engine."""

    seed: Optional[int] = None
    """Seed for the shared random source (None: not reproducible)."""

    output_format: str = 'nested'
    """Formatter used by the CLI."""

    nightly: bool = False
    """Multiply default property sample counts by ``NIGHTLY_MULTIPLIER``."""

    discard_ratio: int = DEFAULT_DISCARD_RATIO
    """Rejected samples tolerated per requested sample."""

    color: bool = True
    """Whether console output may use ANSI colors."""

    @property
    def sample_multiplier(self) -> int:
        return NIGHTLY_MULTIPLIER if self.nightly else 1


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, '')
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes')


def get_run_config() -> RunConfig:
    """
    Build a RunConfig from environment variables.

    Unparseable numbers fall back to their defaults; an unknown format falls
    back to ``nested``.

    Returns:
        RunConfig reflecting the current environment
    """
    output_format = os.environ.get('SPEC_HARNESS_FORMAT', 'nested').lower()
    if output_format not in FORMATS:
        output_format = 'nested'

    discard_ratio = _env_int('SPEC_HARNESS_DISCARD_RATIO', DEFAULT_DISCARD_RATIO)
    if discard_ratio is None or discard_ratio < 1:
        discard_ratio = DEFAULT_DISCARD_RATIO

    return RunConfig(
        seed=_env_int('SPEC_HARNESS_SEED', None),
        output_format=output_format,
        nightly=_env_flag('SPEC_HARNESS_NIGHTLY'),
        discard_ratio=discard_ratio,
        color='NO_COLOR' not in os.environ,
    )


_active: Optional[RunConfig] = None


def active_run_config() -> RunConfig:
    """Return the applied RunConfig, reading the environment on first use."""
    global _active
    if _active is None:
        _active = get_run_config()
    return _active


def apply_run_config(config: Optional[RunConfig] = None) -> RunConfig:
    """
    Make ``config`` the active configuration.

    Seeds the shared random source when ``config.seed`` is set.

    Args:
        config: Config to apply (reads the environment if None)

    Returns:
        The applied RunConfig
    """
    global _active
    if config is None:
        config = get_run_config()
    _active = config
    if config.seed is not None:
        generators.seed(config.seed)
    return config


def reset_run_config() -> None:
    """Forget the active configuration; the next use re-reads the environment."""
    global _active
    _active = None
