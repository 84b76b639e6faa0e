#!/usr/bin/env python3
# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the spec runner."""

import logging

import pytest

from spec_harness.core.assertions import expect
from spec_harness.core.builder import SpecBuilder
from spec_harness.core.engine import SpecRunner, describe_exception, run_specs
from spec_harness.core.results import ExampleResult, ResultKind
from spec_harness.output.reporter import RecordingReporter


def _run(spec):
    reporter = RecordingReporter()
    summary = SpecRunner(reporter).run(spec)
    return summary, reporter


def _kinds(reporter):
    return {name: result.kind for name, result in reporter.results()}


class TestHookOrdering:
    """Tests for when hooks fire."""

    def test_before_and_after_all_run_once(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_all(lambda: log.append("before_all"))
            spec.after_all(lambda: log.append("after_all"))
            for i in range(3):
                spec.example(f"e{i}", lambda i=i: log.append(f"e{i}"))

        summary, _ = _run(spec)

        assert log == ["before_all", "e0", "e1", "e2", "after_all"]
        assert summary.passed == 3

    def test_each_hooks_nest_outer_to_inner(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_each(lambda: log.append("before A"))
            spec.after_each(lambda: log.append("after A"))
            with spec.describe("B"):
                spec.before_each(lambda: log.append("before B"))
                spec.after_each(lambda: log.append("after B"))
                with spec.describe("C"):
                    spec.before_each(lambda: log.append("before C"))
                    spec.after_each(lambda: log.append("after C"))
                    spec.example("x", lambda: log.append("body"))

        _run(spec)

        assert log == [
            "before A", "before B", "before C",
            "body",
            "after C", "after B", "after A",
        ]

    def test_hooks_of_one_kind_run_in_registration_order(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_each(lambda: log.append(1))
            spec.before_each(lambda: log.append(2))
            spec.example("x", lambda: None)

        _run(spec)
        assert log == [1, 2]

    def test_before_all_is_lazy(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("first", lambda: log.append("first"))
            with spec.describe("B"):
                spec.before_all(lambda: log.append("before_all B"))
                spec.after_all(lambda: log.append("after_all B"))
                spec.example("inner", lambda: log.append("inner"))
            spec.example("last", lambda: log.append("last"))

        _run(spec)
        assert log == ["first", "before_all B", "inner", "after_all B", "last"]

    def test_context_without_examples_runs_no_all_hooks(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("empty"):
            spec.before_all(lambda: log.append("before_all"))
            spec.after_all(lambda: log.append("after_all"))

        summary, _ = _run(spec)
        assert log == []
        assert summary.success

    def test_pending_example_does_not_change_all_hook_counts(self):
        counts = {'before_all': 0, 'after_all': 0}
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_all(lambda: counts.__setitem__('before_all', counts['before_all'] + 1))
            spec.after_all(lambda: counts.__setitem__('after_all', counts['after_all'] + 1))
            spec.example("runs", lambda: None)
            spec.it("later")

        summary, _ = _run(spec)
        assert counts == {'before_all': 1, 'after_all': 1}
        assert summary.pending == 1


class TestResults:
    """Tests for example classification."""

    def test_pass_fail_error_pending(self):
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("passes", lambda: expect(1).should.equal(1))
            spec.example("fails", lambda: expect(1).should.equal(2))
            spec.example("errors", lambda: {}['missing'])
            spec.it("pending")

        summary, reporter = _run(spec)

        assert _kinds(reporter) == {
            "passes": ResultKind.PASSED,
            "fails": ResultKind.FAILED,
            "errors": ResultKind.ERRORED,
            "pending": ResultKind.PENDING,
        }
        assert (summary.passed, summary.failed, summary.errored, summary.pending) == (1, 1, 1, 1)
        assert not summary.success

    def test_failure_carries_message_and_location(self):
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("fails", lambda: expect(3).should.equal(4))

        _, reporter = _run(spec)
        result = reporter.results()[0][1]
        assert "expected 3 to equal 4" in result.reason
        assert "test_engine.py:" in result.location

    def test_plain_assert_is_a_failure(self):
        def body():
            assert False, "plain assert"

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("asserts", body)

        _, reporter = _run(spec)
        result = reporter.results()[0][1]
        assert result.kind == ResultKind.FAILED
        assert "test_engine.py:" in result.location

    def test_error_reason_names_exception_type(self):
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("errors", lambda: int("x"))

        _, reporter = _run(spec)
        result = reporter.results()[0][1]
        assert result.reason.startswith("ValueError: ")
        assert "Traceback" in result.traceback

    def test_pending_example_still_runs_each_hooks(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_each(lambda: log.append("before"))
            spec.after_each(lambda: log.append("after"))
            spec.it("later")

        _run(spec)
        assert log == ["before", "after"]

    def test_all_passing_or_pending_is_success(self):
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("ok", lambda: None)
            spec.it("later")

        summary = run_specs(spec)
        assert summary.success
        assert summary.total == 2

    def test_describe_exception(self):
        assert describe_exception(ValueError("bad")) == "ValueError: bad"
        assert describe_exception(KeyboardInterrupt()) == "KeyboardInterrupt"


class TestFailureIsolation:
    """Tests for failures in hooks."""

    def test_failing_before_each_skips_body(self):
        log = []

        def broken():
            raise RuntimeError("no fixture")

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_each(broken)
            spec.after_each(lambda: log.append("after"))
            spec.example("x", lambda: log.append("body"))

        _, reporter = _run(spec)
        result = reporter.results()[0][1]
        assert result.kind == ResultKind.ERRORED
        assert "before_each hook 'broken'" in result.reason
        assert log == ["after"]

    def test_first_after_each_failure_wins(self, caplog):
        def inner():
            raise RuntimeError("inner hook")

        def outer():
            raise RuntimeError("outer hook")

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.after_each(outer)
            with spec.describe("B"):
                spec.after_each(inner)
                spec.example("x", lambda: None)

        with caplog.at_level(logging.WARNING, logger="spec_harness.core.engine"):
            _, reporter = _run(spec)

        result = reporter.results()[0][1]
        assert result.kind == ResultKind.ERRORED
        assert "inner hook" in result.reason
        assert "outer hook" in caplog.text

    def test_body_failure_beats_after_each_failure(self):
        def broken():
            raise RuntimeError("cleanup failed")

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.after_each(broken)
            spec.example("x", lambda: expect(1).should.equal(2))

        _, reporter = _run(spec)
        result = reporter.results()[0][1]
        assert result.kind == ResultKind.FAILED
        assert "expected 1 to equal 2" in result.reason

    def test_failing_before_all_errors_descendants_only(self):
        log = []

        def broken():
            raise RuntimeError("cannot connect")

        spec = SpecBuilder()
        with spec.describe("Root"):
            spec.after_all(lambda: log.append("after_all Root"))
            with spec.describe("Broken"):
                spec.before_all(broken)
                spec.before_all(lambda: log.append("second before_all"))
                spec.before_each(lambda: log.append("before_each Broken"))
                spec.after_all(lambda: log.append("after_all Broken"))
                spec.example("a", lambda: log.append("body a"))
                with spec.describe("Nested"):
                    spec.example("b", lambda: log.append("body b"))
            with spec.describe("Sibling"):
                spec.example("c", lambda: log.append("body c"))

        summary, reporter = _run(spec)
        kinds = _kinds(reporter)

        assert kinds == {
            "a": ResultKind.ERRORED,
            "b": ResultKind.ERRORED,
            "c": ResultKind.PASSED,
        }
        assert "cannot connect" in reporter.results()[0][1].reason
        assert log == ["body c", "after_all Root"]
        assert not summary.success

    def test_failing_after_all_is_a_context_error(self):
        log = []

        def broken():
            raise RuntimeError("teardown failed")

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.after_all(broken)
            spec.after_all(lambda: log.append("second after_all"))
            spec.example("x", lambda: None)

        summary, reporter = _run(spec)

        assert summary.passed == 1
        assert len(summary.context_errors) == 1
        assert "teardown failed" in summary.context_errors[0].reason
        assert log == ["second after_all"]
        assert not summary.success
        errored = [e for e in reporter.events if e[0] == 'context_errored']
        assert errored[0][1:3] == ("A", 0)


class TestPendingExamples:
    """Tests for pending examples surrounded by failing hooks."""

    def test_failing_after_each_keeps_pending(self, caplog):
        spec = SpecBuilder()
        with spec.describe("A"):
            @spec.after_each
            def boom():
                assert False, "cleanup assertion"

            spec.it("later")

        with caplog.at_level(logging.WARNING, logger="spec_harness.core.engine"):
            summary, reporter = _run(spec)

        assert _kinds(reporter) == {"later": ResultKind.PENDING}
        assert summary.pending == 1
        assert summary.failed == 0
        assert "cleanup assertion" in caplog.text

    def test_failing_before_each_keeps_pending(self):
        def broken():
            raise RuntimeError("no fixture")

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_each(broken)
            spec.it("later")
            spec.example("runs", lambda: None)

        summary, reporter = _run(spec)

        assert _kinds(reporter) == {
            "later": ResultKind.PENDING,
            "runs": ResultKind.ERRORED,
        }
        assert summary.pending == 1


class TestAllHooksAcrossNesting:
    """Tests for all-hooks with examples spread over nested contexts."""

    def test_outer_all_hooks_fire_once_for_nested_chain(self):
        counts = {}

        def counter(key):
            def bump():
                counts[key] = counts.get(key, 0) + 1
            return bump

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_all(counter("before A"))
            spec.after_all(counter("after A"))
            spec.example("a1", lambda: None)
            with spec.describe("B"):
                spec.before_all(counter("before B"))
                spec.after_all(counter("after B"))
                spec.example("b1", lambda: None)
                with spec.describe("C"):
                    spec.before_all(counter("before C"))
                    spec.after_all(counter("after C"))
                    spec.example("c1", lambda: None)
                    spec.example("c2", lambda: None)
                spec.example("b2", lambda: None)
            with spec.describe("B2"):
                spec.example("d1", lambda: None)
            spec.example("a2", lambda: None)

        summary, _ = _run(spec)

        assert summary.passed == 7
        assert counts == {
            "before A": 1, "after A": 1,
            "before B": 1, "after B": 1,
            "before C": 1, "after C": 1,
        }

    def test_rerunning_a_tree_fires_all_hooks_again(self):
        log = []
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.before_all(lambda: log.append("before_all"))
            spec.after_all(lambda: log.append("after_all"))
            spec.example("x", lambda: log.append("x"))

        runner = SpecRunner()
        runner.run(spec, finish=False)
        summary = runner.run(spec)

        assert log == ["before_all", "x", "after_all"] * 2
        assert summary.passed == 2


class TestExampleResultSummary:
    """Tests for one-line result summaries."""

    def test_summary_lines(self):
        assert ExampleResult.passed().summary() == "passed"
        assert ExampleResult.errored("KeyError: 1").summary() == "errored: KeyError: 1"
        assert (
            ExampleResult.failed("nope", location="a_spec.py:3").summary()
            == "failed: nope (a_spec.py:3)"
        )


class TestEventStream:
    """Tests for reporter events."""

    def test_events_in_traversal_order(self):
        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("a1", lambda: None)
            with spec.describe("B"):
                spec.it("b1")

        _, reporter = _run(spec)
        shapes = [e[:3] if e[0] != 'run_finished' else e[:1] for e in reporter.events]

        assert shapes == [
            ('context_entered', 'A', 0),
            ('example_started', 'a1', 1),
            ('example_finished', 'a1', 1),
            ('context_entered', 'B', 1),
            ('example_started', 'b1', 2),
            ('example_finished', 'b1', 2),
            ('context_exited', 'B', 1),
            ('context_exited', 'A', 0),
            ('run_finished',),
        ]

    def test_batched_runs_share_one_summary(self):
        first = SpecBuilder()
        with first.describe("A"):
            first.example("x", lambda: None)
        second = SpecBuilder()
        with second.describe("B"):
            second.example("y", lambda: expect(1).should.equal(2))

        reporter = RecordingReporter()
        runner = SpecRunner(reporter)
        runner.run(first, finish=False)
        runner.run(second, finish=False)
        summary = runner.finish()

        assert summary.total == 2
        assert summary.failed == 1
        assert [e[0] for e in reporter.events].count('run_finished') == 1

    def test_keyboard_interrupt_stops_run(self):
        def interrupt():
            raise KeyboardInterrupt()

        spec = SpecBuilder()
        with spec.describe("A"):
            spec.example("x", interrupt)

        with pytest.raises(KeyboardInterrupt):
            SpecRunner().run(spec)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
