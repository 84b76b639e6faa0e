# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Execution engine: runs specification trees and reports results.

The runner walks each root context depth-first.  For every example it runs

1. the before-all hooks of any enclosing context that has not started yet
   (outermost first),
2. the before-each hooks from the root down to the example's parent,
3. the body (skipped for pending examples, which stay Pending even when
   a hook around them fails),
4. the after-each hooks from the parent back up to the root,

and after a context's last example it runs that context's after-all hooks.
Each example produces exactly one ``ExampleResult``; a failure never stops
sibling examples or enclosing contexts.

Assertion failures (any ``AssertionError``) become Failed results; every
other ``Exception`` becomes Errored.  ``KeyboardInterrupt`` and other
non-``Exception`` signals stop the run.
"""

import logging
import time
import traceback
from typing import Dict, Iterable, List, Optional, Union

from spec_harness.core.assertions import failure_location
from spec_harness.core.results import (
    ContextError,
    ExampleRecord,
    ExampleResult,
    RunSummary,
)
from spec_harness.core.tree import Context, Example, Hook, HookKind, SpecTree
from spec_harness.output.reporter import Reporter

logger = logging.getLogger(__name__)


def describe_exception(exc: BaseException) -> str:
    """``"TypeName: message"`` (or just the type name when there is no message)."""
    message = str(exc)
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


def _classify(exc: Exception, started: float, prefix: str = "") -> ExampleResult:
    duration = time.monotonic() - started
    if isinstance(exc, AssertionError):
        return ExampleResult.failed(
            prefix + (str(exc) or "assertion failed"),
            location=failure_location(exc),
            duration=duration,
        )
    return ExampleResult.errored(
        prefix + describe_exception(exc),
        traceback=''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        duration=duration,
    )


class _ContextState:
    """Per-run bookkeeping for one context."""

    __slots__ = ('started', 'aborted', 'abort_reason', 'abort_traceback')

    def __init__(self):
        self.started = False
        self.aborted = False
        self.abort_reason = ""
        self.abort_traceback = ""


class SpecRunner:
    """
    Runs specification trees and streams events to a reporter.

    Usage::

        runner = SpecRunner(reporter=NestedFormatter())
        summary = runner.run(spec)          # a SpecTree, or a list of roots
        sys.exit(0 if summary.success else 1)
    """

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter or Reporter()
        self._states: Dict[int, _ContextState] = {}
        self._summary = RunSummary()

    def _state(self, context: Context) -> _ContextState:
        state = self._states.get(id(context))
        if state is None:
            state = self._states[id(context)] = _ContextState()
        return state

    # -- public API -------------------------------------------------------

    def run(
        self,
        specs: Union[SpecTree, Context, Iterable[Union[SpecTree, Context]]],
        finish: bool = True,
    ) -> RunSummary:
        """
        Run every example under ``specs``.

        Args:
            specs: A SpecTree, a root Context, or an iterable of either.
            finish: Emit ``run_finished`` when done.  Pass False to run
                several batches into one report, then call ``finish()``.

        Running a tree again starts its contexts afresh, so before-all and
        after-all hooks fire once per run.

        Returns:
            RunSummary for everything run by this runner so far.
        """
        started = time.monotonic()
        for root in self._roots(specs):
            self._reset(root)
            self._run_context(root)
        self._summary.duration += time.monotonic() - started
        if finish:
            self.finish()
        return self._summary

    def finish(self) -> RunSummary:
        """Emit ``run_finished`` with the accumulated summary."""
        self.reporter.run_finished(self._summary)
        return self._summary

    def record_context_error(self, name: str, depth: int, reason: str, tb: str = "") -> None:
        """Report a failure that belongs to no example."""
        error = ContextError(context=name, depth=depth, reason=reason, traceback=tb)
        self._summary.context_errors.append(error)
        logger.warning("context %r errored: %s", name, reason)
        self.reporter.context_errored(name, depth, error)

    @property
    def summary(self) -> RunSummary:
        return self._summary

    # -- traversal --------------------------------------------------------

    @staticmethod
    def _roots(specs) -> List[Context]:
        if isinstance(specs, SpecTree):
            return list(specs.roots)
        if isinstance(specs, Context):
            return [specs]
        roots: List[Context] = []
        for item in specs:
            roots.extend(SpecRunner._roots(item))
        return roots

    def _reset(self, root: Context) -> None:
        """Forget hook state from an earlier run of the same tree."""
        for node in root.walk():
            if isinstance(node, Context):
                self._states.pop(id(node), None)

    def _run_context(self, context: Context) -> None:
        depth = context.depth
        self.reporter.context_entered(context.name, depth)

        for child in context.children:
            if isinstance(child, Context):
                self._run_context(child)
            else:
                self._run_example(child)

        state = self._state(context)
        if state.started and not state.aborted:
            self._run_after_all(context)

        self.reporter.context_exited(context.name, depth)

    def _start_contexts(self, ancestors: List[Context]) -> Optional[_ContextState]:
        """
        Fire pending before-all hooks, outermost context first.

        Returns the state of the first aborted context in the chain, if any.
        """
        for context in ancestors:
            state = self._state(context)
            if not state.started:
                state.started = True
                for hook in context.hooks_of(HookKind.BEFORE_ALL):
                    try:
                        logger.debug("before_all %s of %r", hook.name, context.full_name)
                        hook()
                    except Exception as e:
                        state.aborted = True
                        state.abort_reason = (
                            f"before_all hook '{hook.name}' of '{context.full_name}' "
                            f"failed: {describe_exception(e)}"
                        )
                        state.abort_traceback = ''.join(
                            traceback.format_exception(type(e), e, e.__traceback__)
                        )
                        logger.warning("%s", state.abort_reason)
                        break
            if state.aborted:
                return state
        return None

    def _run_after_all(self, context: Context) -> None:
        for hook in context.hooks_of(HookKind.AFTER_ALL):
            try:
                logger.debug("after_all %s of %r", hook.name, context.full_name)
                hook()
            except Exception as e:
                self.record_context_error(
                    context.name,
                    context.depth,
                    f"after_all hook '{hook.name}' failed: {describe_exception(e)}",
                    ''.join(traceback.format_exception(type(e), e, e.__traceback__)),
                )

    # -- examples ---------------------------------------------------------

    def _run_example(self, example: Example) -> None:
        depth = example.depth
        self.reporter.example_started(example.name, depth)

        ancestors = example.parent.ancestors()
        aborted = self._start_contexts(ancestors)
        if aborted is not None:
            result = ExampleResult.errored(aborted.abort_reason, aborted.abort_traceback)
        else:
            result = self._execute(example, ancestors)

        self._summary.record(ExampleRecord(
            name=example.name,
            full_name=example.full_name,
            depth=depth,
            result=result,
        ))
        logger.debug("%s: %s", example.full_name, result.summary())
        self.reporter.example_finished(example.name, depth, result)

    def _execute(self, example: Example, ancestors: List[Context]) -> ExampleResult:
        started = time.monotonic()
        result: Optional[ExampleResult] = None
        phase = ""

        try:
            for context in ancestors:
                for hook in context.hooks_of(HookKind.BEFORE_EACH):
                    phase = f"before_each hook '{hook.name}': "
                    self._run_hook(hook, context)
            phase = ""
            if example.body is not None:
                example.body()
        except Exception as e:
            result = _classify(e, started, prefix=phase)

        for context in reversed(ancestors):
            for hook in context.hooks_of(HookKind.AFTER_EACH):
                try:
                    self._run_hook(hook, context)
                except Exception as e:
                    if result is None:
                        result = _classify(
                            e, started, prefix=f"after_each hook '{hook.name}': ",
                        )
                    else:
                        logger.warning(
                            "after_each hook %r of %r failed after %r already %s: %s",
                            hook.name, context.full_name, example.full_name,
                            result.kind.value, describe_exception(e),
                        )

        duration = time.monotonic() - started
        if example.pending:
            if result is not None:
                logger.warning(
                    "hook failed around pending example %r: %s",
                    example.full_name, result.reason,
                )
            return ExampleResult.pending(duration)
        if result is None:
            result = ExampleResult.passed(duration)
        return result

    @staticmethod
    def _run_hook(hook: Hook, context: Context) -> None:
        logger.debug("%s %s of %r", hook.kind.value, hook.name, context.full_name)
        hook()


def run_specs(
    specs: Union[SpecTree, Context, Iterable[Union[SpecTree, Context]]],
    reporter: Optional[Reporter] = None,
) -> RunSummary:
    """Convenience function: run ``specs`` with a fresh SpecRunner."""
    return SpecRunner(reporter=reporter).run(specs)
