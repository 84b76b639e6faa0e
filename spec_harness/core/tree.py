# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Specification tree: contexts, examples and hooks.

A ``SpecTree`` owns one or more root ``Context`` nodes.  Contexts hold their
children in insertion order plus four ordered hook lists; examples are the
leaves.  Front-ends build trees through ``new_context``, ``new_example`` and
``register_hook``; the runner only reads them.

Example:
    tree = SpecTree()
    stack = tree.new_context("Stack")
    tree.register_hook(stack, HookKind.BEFORE_EACH, reset_stack)
    tree.new_example("pops what was pushed", stack, body=check_push_pop)
    tree.new_example("reports its size", stack)     # pending
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Set, Union

Action = Callable[[], object]


class SpecDefinitionError(ValueError):
    """A specification tree was built incorrectly."""


class UnknownContextError(SpecDefinitionError):
    """A context handle does not belong to the tree it was used with."""


class HookKind(Enum):
    """When a hook runs relative to the examples of its context."""
    BEFORE_ALL = "before_all"
    BEFORE_EACH = "before_each"
    AFTER_ALL = "after_all"
    AFTER_EACH = "after_each"


@dataclass
class Hook:
    """A setup or teardown action scoped to the context that declared it."""

    kind: HookKind
    action: Action
    name: str = ""

    def __post_init__(self):
        if not self.name:
            self.name = getattr(self.action, '__name__', self.kind.value)

    def __call__(self) -> None:
        self.action()


@dataclass(eq=False)
class Example:
    """A single named case; pending when it has no body."""

    name: str
    parent: 'Context' = field(repr=False)
    body: Optional[Action] = None
    location: Optional[str] = None

    @property
    def pending(self) -> bool:
        return self.body is None

    @property
    def depth(self) -> int:
        return self.parent.depth + 1

    @property
    def full_name(self) -> str:
        return f"{self.parent.full_name} {self.name}"


@dataclass(eq=False)
class Context:
    """A named group of examples and nested contexts."""

    name: str
    parent: Optional['Context'] = field(default=None, repr=False)
    children: List[Union['Context', Example]] = field(default_factory=list, repr=False)
    hooks: Dict[HookKind, List[Hook]] = field(
        default_factory=lambda: {kind: [] for kind in HookKind}, repr=False,
    )

    @property
    def depth(self) -> int:
        return 0 if self.parent is None else self.parent.depth + 1

    @property
    def full_name(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.full_name} {self.name}"

    def hooks_of(self, kind: HookKind) -> List[Hook]:
        return self.hooks[kind]

    def ancestors(self) -> List['Context']:
        """Contexts from the root down to (and including) this one."""
        chain = []
        node: Optional[Context] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    def walk(self) -> Iterator[Union['Context', Example]]:
        """Depth-first traversal, this context first, children in order."""
        yield self
        for child in self.children:
            if isinstance(child, Context):
                yield from child.walk()
            else:
                yield child

    def examples(self) -> Iterator[Example]:
        """All descendant examples in traversal order."""
        for node in self.walk():
            if isinstance(node, Example):
                yield node

    def has_examples(self) -> bool:
        return next(self.examples(), None) is not None


class SpecTree:
    """
    Builder and owner of specification trees.

    Handles returned by ``new_context`` are only valid with the tree that
    created them; using a foreign or stale handle raises
    ``UnknownContextError``.
    """

    def __init__(self):
        self.roots: List[Context] = []
        self._known: Set[int] = set()

    def _require_known(self, context: Context) -> None:
        if not isinstance(context, Context) or id(context) not in self._known:
            raise UnknownContextError(f"unknown context: {context!r}")

    def new_context(self, name: str, parent: Optional[Context] = None) -> Context:
        """Create a context, nested in ``parent`` or as a new root."""
        if parent is not None:
            self._require_known(parent)
        context = Context(name=name, parent=parent)
        if parent is None:
            self.roots.append(context)
        else:
            parent.children.append(context)
        self._known.add(id(context))
        return context

    def new_example(
        self,
        name: str,
        context: Context,
        body: Optional[Action] = None,
        location: Optional[str] = None,
    ) -> Example:
        """Add an example to ``context``; without a body it is pending."""
        self._require_known(context)
        if body is not None and not callable(body):
            raise SpecDefinitionError(f"example body must be callable, got {body!r}")
        example = Example(name=name, parent=context, body=body, location=location)
        context.children.append(example)
        return example

    def register_hook(
        self,
        context: Context,
        kind: HookKind,
        action: Action,
        name: str = "",
    ) -> Hook:
        """Append a hook of ``kind`` to ``context``."""
        self._require_known(context)
        if not callable(action):
            raise SpecDefinitionError(f"hook action must be callable, got {action!r}")
        hook = Hook(kind=HookKind(kind), action=action, name=name)
        context.hooks[hook.kind].append(hook)
        return hook

    def examples(self) -> Iterator[Example]:
        for root in self.roots:
            yield from root.examples()

    def count_examples(self) -> int:
        return sum(1 for _ in self.examples())
