# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Stack behavior, written as nested contexts.

Run with:
    spec-harness examples/stack_spec.py

Shows before-each setup shared down the tree, pending examples, and
exception expectations.
"""

from spec_harness import SpecBuilder, expect
from spec_harness.core.predicates import all_of, contains, is_instance


class EmptyStackError(Exception):
    pass


class Stack:
    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        if not self._items:
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise EmptyStackError("peek at empty stack")
        return self._items[-1]

    def __len__(self):
        return len(self._items)

    def __contains__(self, item):
        return item in self._items


spec = SpecBuilder()
state = {}

with spec.describe("Stack"):

    @spec.before_each
    def new_stack():
        state['stack'] = Stack()

    with spec.describe("when empty"):

        @spec.it("has size zero")
        def _():
            expect(len(state['stack'])).should.equal(0)

        @spec.it("refuses to pop")
        def _():
            expect(state['stack'].pop).should.raise_exception(EmptyStackError)

        @spec.it("refuses to peek with a helpful message")
        def _():
            expect(state['stack'].peek).should.raise_exception(
                EmptyStackError("peek at empty stack")
            )

    with spec.describe("after pushing 'a' then 'b'"):

        @spec.before_each
        def push_two():
            state['stack'].push('a')
            state['stack'].push('b')

        @spec.it("pops the last item first")
        def _():
            expect(state['stack'].pop()).should.equal('b')
            expect(state['stack'].pop()).should.equal('a')

        @spec.it("keeps both items")
        def _():
            expect(state['stack']).should.be(all_of(is_instance(Stack), contains('a')))
            expect(state['stack']).should_not.be(contains('c'))

        @spec.it("peeks without removing")
        def _():
            state['stack'].peek()
            expect(len(state['stack'])).should.equal(2)

        spec.it("can be cleared in one call")
