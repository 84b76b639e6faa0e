# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Declarative front-end for specification trees.

``SpecBuilder`` keeps a stack of open contexts so specs read top to bottom:

    from spec_harness import SpecBuilder, expect

    spec = SpecBuilder()

    with spec.describe("a counter"):
        state = {}

        @spec.before_each
        def reset():
            state['n'] = 0

        @spec.it("starts at zero")
        def _():
            expect(state['n']).should.equal(0)

        spec.it("wraps around at the limit")   # pending

        with spec.describe("after an increment"):
            ...

Spec files expose their trees by defining one or more ``SpecBuilder``
objects at module level; the CLI discovers and runs them.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Union

from spec_harness.core.assertions import caller_location
from spec_harness.core.tree import (
    Action,
    Context,
    Example,
    HookKind,
    SpecDefinitionError,
    SpecTree,
)


class SpecBuilder(SpecTree):
    """SpecTree with a stack-based ``describe``/``it`` API."""

    def __init__(self):
        super().__init__()
        self._stack: List[Context] = []

    @property
    def current(self) -> Context:
        """The innermost open context."""
        if not self._stack:
            raise SpecDefinitionError(
                "examples and hooks must be declared inside spec.describe(...)"
            )
        return self._stack[-1]

    @contextmanager
    def describe(self, name: str) -> Iterator[Context]:
        """Open a context, nested in the current one if any."""
        parent = self._stack[-1] if self._stack else None
        context = self.new_context(name, parent)
        self._stack.append(context)
        try:
            yield context
        finally:
            self._stack.pop()

    # RSpec-style alias
    context = describe

    def it(self, name: str) -> Callable[[Action], Action]:
        """
        Declare an example in the current context.

        The example is registered immediately as pending; decorating a
        function with the returned decorator gives it a body.
        """
        example = self.new_example(name, self.current, location=caller_location())

        def attach(body: Action) -> Action:
            if not callable(body):
                raise SpecDefinitionError(f"example body must be callable, got {body!r}")
            example.body = body
            return body

        return attach

    def example(self, name: str, body: Optional[Action] = None) -> Example:
        """Declare an example with an explicit body (or pending without)."""
        return self.new_example(name, self.current, body, location=caller_location())

    def _hook(
        self,
        kind: HookKind,
        action_or_name: Union[Action, str, None],
    ):
        if callable(action_or_name):
            self.register_hook(self.current, kind, action_or_name)
            return action_or_name

        context = self.current

        def register(action: Action) -> Action:
            self.register_hook(context, kind, action, action_or_name or "")
            return action

        return register

    def before_all(self, action_or_name=None):
        """Register a hook run once before the context's first example."""
        return self._hook(HookKind.BEFORE_ALL, action_or_name)

    def before_each(self, action_or_name=None):
        """Register a hook run before every example in the context."""
        return self._hook(HookKind.BEFORE_EACH, action_or_name)

    def after_all(self, action_or_name=None):
        """Register a hook run once after the context's last example."""
        return self._hook(HookKind.AFTER_ALL, action_or_name)

    def after_each(self, action_or_name=None):
        """Register a hook run after every example in the context."""
        return self._hook(HookKind.AFTER_EACH, action_or_name)
