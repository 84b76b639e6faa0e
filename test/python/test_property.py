#!/usr/bin/env python3
# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the randomized property checker."""

import pytest

from spec_harness.core import generators as gen
from spec_harness.core.assertions import expect
from spec_harness.core.property import (
    GenerationExhausted,
    PropertyFalsified,
    PropertyStatus,
    check_property,
    forall,
)
from spec_harness.core.run_config import RunConfig, apply_run_config


class TestCheckProperty:
    """Tests for check_property outcomes."""

    def test_holds(self):
        result = check_property(
            gen.list_of(gen.integer),
            lambda xs: list(reversed(list(reversed(xs)))) == xs,
        )
        assert result.status == PropertyStatus.PASSED
        assert result.passed
        assert result.accepted == 100
        assert result.discarded == 0

    def test_precondition_filters_samples(self):
        seen = []

        def conclusion(b):
            seen.append(b)
            return b is True

        result = check_property(gen.boolean, conclusion, count=10, precondition=lambda b: b)
        assert result.passed
        assert result.accepted == 10
        assert seen == [True] * 10

    def test_falsified_reports_exact_counterexample(self):
        result = check_property(gen.int_in_range(0, 100), lambda n: n < 50)
        assert result.status == PropertyStatus.FALSIFIED
        assert result.counterexample >= 50
        assert repr(result.counterexample) in result.details

    def test_assertion_error_falsifies(self):
        def conclusion(n):
            expect(n).should.be(lambda x: x < 0)

        result = check_property(gen.integer, conclusion, count=5)
        assert result.status == PropertyStatus.FALSIFIED
        assert result.accepted == 1

    def test_none_return_counts_as_pass(self):
        result = check_property(gen.integer, lambda n: None, count=5)
        assert result.passed

    def test_other_errors_propagate(self):
        def conclusion(n):
            raise KeyError(n)

        with pytest.raises(KeyError):
            check_property(gen.integer, conclusion, count=5)

    def test_exhausted_after_discard_budget(self):
        result = check_property(
            gen.integer, lambda n: True, count=5, precondition=lambda n: False,
        )
        assert result.status == PropertyStatus.EXHAUSTED
        assert not result.passed
        assert result.accepted == 0
        assert result.discarded == 50

    def test_custom_discard_ratio(self):
        result = check_property(
            gen.integer, lambda n: True, count=4,
            precondition=lambda n: False, discard_ratio=2,
        )
        assert result.discarded == 8

    def test_tuple_binding(self):
        pairs = []

        def commutes(a, b):
            pairs.append((a, b))
            return a + b == b + a

        result = check_property([gen.int_below(10), gen.int_below(10)], commutes, count=20)
        assert result.passed
        assert len(pairs) == 20

    def test_tuple_counterexample(self):
        result = check_property(
            (gen.int_in_range(1, 5), gen.int_in_range(1, 5)),
            lambda a, b: a - b == b - a,
            precondition=lambda a, b: a != b,
        )
        assert result.status == PropertyStatus.FALSIFIED
        a, b = result.counterexample
        assert a != b

    def test_invalid_count(self):
        with pytest.raises(ValueError):
            check_property(gen.integer, lambda n: True, count=0)

    def test_invalid_generator_binding(self):
        with pytest.raises(TypeError):
            check_property([], lambda: True)


class TestForall:
    """Tests for the raising forall wrapper."""

    def test_returns_result_on_success(self):
        result = forall(gen.boolean, lambda b: b is True, count=10, precondition=lambda b: b)
        assert result.accepted == 10

    def test_raises_falsified(self):
        with pytest.raises(PropertyFalsified) as info:
            forall(gen.integer, lambda n: n < 0, description="negative ints")
        assert info.value.counterexample >= 0
        assert info.value.accepted == 1
        assert "negative ints" in str(info.value)
        assert "test_property.py:" in info.value.location

    def test_falsified_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            forall(gen.integer, lambda n: False, count=1)

    def test_raises_exhausted(self):
        with pytest.raises(GenerationExhausted) as info:
            forall(gen.integer, lambda n: True, count=3, precondition=lambda n: False)
        assert info.value.discarded == 30
        assert "Could not generate" in str(info.value)


class TestRunConfigInteraction:
    """Tests for seeding and nightly mode."""

    def test_seeded_runs_are_reproducible(self):
        apply_run_config(RunConfig(seed=7))
        first = check_property(gen.list_of(gen.integer), lambda xs: len(xs) < 5)
        apply_run_config(RunConfig(seed=7))
        second = check_property(gen.list_of(gen.integer), lambda xs: len(xs) < 5)
        assert first.status == PropertyStatus.FALSIFIED
        assert first.counterexample == second.counterexample
        assert first.accepted == second.accepted

    def test_nightly_multiplies_default_count(self):
        apply_run_config(RunConfig(nightly=True))
        result = check_property(gen.boolean, lambda b: True)
        assert result.accepted == 1000

    def test_explicit_count_ignores_nightly(self):
        apply_run_config(RunConfig(nightly=True))
        result = check_property(gen.boolean, lambda b: True, count=3)
        assert result.accepted == 3

    def test_config_discard_ratio(self):
        apply_run_config(RunConfig(discard_ratio=1))
        result = check_property(gen.integer, lambda n: True, count=6, precondition=lambda n: False)
        assert result.discarded == 6


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
