# logic_parser/ast_nodes.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Logic tree node classes for propositional formula representation

"""Logic tree node classes for representing parsed propositional formulas.

The node set is closed: a tree is made of exactly one ``RootNode`` plus
atomic, negation, conjunction, disjunction, conditional and biconditional
nodes. Each class declares how many children it may hold and in which slots:

    RootNode            left only
    AtomicNode          none
    NegationNode        right only
    Conjunction, Disjunction, Conditional, Biconditional nodes   left and right

Child storage exists only on the classes whose layout permits it, so an
atomic node has no child attributes at all. Parents are held through a
``weakref`` so that ownership always flows from parent to child.

Nodes are wired together by the tree builder through ``_set_next_child``.
Children and parents are exposed as read-only properties; once a tree is
returned to the caller nothing in the public API modifies it.

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
import weakref
from enum import Enum, auto
from typing import Callable, ClassVar, Dict, Iterator, Optional, Protocol, Tuple

from .exceptions import (
    AllChildrenAlreadyConfiguredError,
    InvalidCharacterError,
    InvalidChildrenTypeError,
    ParentAlreadyConfiguredError,
)
from utils.logger import get_logger


# Printed in place of a child slot that has not been filled yet
MISSING_CHILD = "nil"


class ChildrenLayout(Enum):
    """The possible layouts for the children of a node."""

    NONE = auto()
    LEFT_ONLY = auto()
    RIGHT_ONLY = auto()
    LEFT_AND_RIGHT = auto()


class LogicVisitor(Protocol):
    """Interface for logic tree visitors implementing the visitor design pattern.

    Concrete visitors implement one visit method per node kind.
    """

    def visit_root(self, n: RootNode): ...

    def visit_atomic(self, n: AtomicNode): ...

    def visit_negation(self, n: NegationNode): ...

    def visit_conjunction(self, n: ConjunctionNode): ...

    def visit_disjunction(self, n: DisjunctionNode): ...

    def visit_conditional(self, n: ConditionalNode): ...

    def visit_biconditional(self, n: BiconditionalNode): ...


class LogicNode:
    """Base class for all nodes in a logic tree.

    Attributes:
        name: Human-readable name of the node kind
        children_layout: Which child slots the node kind permits
    """

    name: ClassVar[str] = "Logic"
    children_layout: ClassVar[ChildrenLayout] = ChildrenLayout.NONE

    # Storage slots in the order they are filled by _set_next_child
    _child_slots: ClassVar[Tuple[str, ...]] = ()

    __slots__ = ("_parent", "__weakref__")

    def __init__(self):
        self._parent: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional[LogicNode]:
        """The node holding this one as a child, or None for detached nodes."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def left(self) -> Optional[LogicNode]:
        return getattr(self, "_left", None)

    @property
    def right(self) -> Optional[LogicNode]:
        return getattr(self, "_right", None)

    @property
    def children(self) -> Tuple[LogicNode, ...]:
        """Filled child slots in left-to-right order."""
        return tuple(
            child
            for child in (getattr(self, slot) for slot in self._child_slots)
            if child is not None
        )

    @property
    def is_complete(self) -> bool:
        """Whether every child slot permitted by the layout is filled."""
        return all(getattr(self, slot) is not None for slot in self._child_slots)

    def walk(self) -> Iterator[LogicNode]:
        """Iterate over this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def description(self) -> str:
        """A description of this node and its children suitable for printing.

        Rendered bottom-up without recursion so very deep trees can be printed.
        """
        rendered: Dict[int, str] = {}

        def describe(node: Optional[LogicNode]) -> str:
            return MISSING_CHILD if node is None else rendered[id(node)]

        # Reversed pre-order visits every child before its parent
        for node in reversed(list(self.walk())):
            rendered[id(node)] = node._render(describe)
        return rendered[id(self)]

    def _render(self, describe: Callable[[Optional[LogicNode]], str]) -> str:
        layout = self.children_layout
        if layout is ChildrenLayout.NONE:
            return self.name
        if layout is ChildrenLayout.LEFT_ONLY:
            return f"({self.name} {describe(self.left)}|_)"
        if layout is ChildrenLayout.RIGHT_ONLY:
            return f"({self.name} _|{describe(self.right)})"
        return f"({self.name} {describe(self.left)}|{describe(self.right)})"

    def _set_next_child(self, child: LogicNode) -> None:
        """Attach a child to the first free slot permitted by the layout.

        Args:
            child: Detached node to attach

        Raises:
            InvalidChildrenTypeError: The layout permits no children
            AllChildrenAlreadyConfiguredError: Every permitted slot is filled
            ParentAlreadyConfiguredError: The child already has a parent
        """
        if not self._child_slots:
            raise InvalidChildrenTypeError(
                f"Can't attach a child to a {self.name.lower()} node"
            )
        for slot in self._child_slots:
            if getattr(self, slot) is None:
                child._set_parent(self)
                setattr(self, slot, child)
                get_logger().node_attached(self.name, child.name, slot.lstrip("_"))
                return
        raise AllChildrenAlreadyConfiguredError(
            f"All children of the {self.name.lower()} node are already configured"
        )

    def _set_parent(self, parent: LogicNode) -> None:
        if self._parent is not None:
            raise ParentAlreadyConfiguredError(
                f"The {self.name.lower()} node already has a parent"
            )
        self._parent = weakref.ref(parent)

    def accept(self, v: LogicVisitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description}>"


class RootNode(LogicNode):
    """Entry node of every logic tree; holds the top-level formula on the left."""

    name = "Root"
    children_layout = ChildrenLayout.LEFT_ONLY
    _child_slots = ("_left",)

    __slots__ = ("_left",)

    def __init__(self):
        super().__init__()
        self._left: Optional[LogicNode] = None

    @property
    def formula(self) -> Optional[LogicNode]:
        """The top-level formula held by this root."""
        return self._left

    def _set_parent(self, parent: LogicNode) -> None:
        raise ParentAlreadyConfiguredError("Can't set the parent of a root node")

    def accept(self, v: LogicVisitor):
        return v.visit_root(self)


class AtomicNode(LogicNode):
    """A propositional variable, identified by one uppercase letter.

    Attributes:
        character: The letter associated with this atom
    """

    name = "Atomic"
    children_layout = ChildrenLayout.NONE

    __slots__ = ("_character",)

    def __init__(self, character: str):
        super().__init__()
        if len(character) != 1 or not character.isalpha():
            raise InvalidCharacterError(
                character, f"Atoms must be a single letter, got '{character}'"
            )
        self._character = character.upper()

    @property
    def character(self) -> str:
        return self._character

    def _render(self, describe: Callable[[Optional[LogicNode]], str]) -> str:
        return self._character

    def accept(self, v: LogicVisitor):
        return v.visit_atomic(self)


class NegationNode(LogicNode):
    """Logical negation; its single operand sits in the right slot."""

    name = "Negation"
    children_layout = ChildrenLayout.RIGHT_ONLY
    _child_slots = ("_right",)

    __slots__ = ("_right",)

    def __init__(self):
        super().__init__()
        self._right: Optional[LogicNode] = None

    @property
    def operand(self) -> Optional[LogicNode]:
        return self._right

    def accept(self, v: LogicVisitor):
        return v.visit_negation(self)


class BinaryNode(LogicNode):
    """Base class for the four binary connectives."""

    children_layout = ChildrenLayout.LEFT_AND_RIGHT
    _child_slots = ("_left", "_right")

    __slots__ = ("_left", "_right")

    def __init__(self):
        super().__init__()
        self._left: Optional[LogicNode] = None
        self._right: Optional[LogicNode] = None


class ConjunctionNode(BinaryNode):
    """Logical conjunction (∧)."""

    name = "Conjunction"

    __slots__ = ()

    def accept(self, v: LogicVisitor):
        return v.visit_conjunction(self)


class DisjunctionNode(BinaryNode):
    """Logical disjunction (∨)."""

    name = "Disjunction"

    __slots__ = ()

    def accept(self, v: LogicVisitor):
        return v.visit_disjunction(self)


class ConditionalNode(BinaryNode):
    """Material conditional (→); left is the antecedent, right the consequent."""

    name = "Conditional"

    __slots__ = ()

    def accept(self, v: LogicVisitor):
        return v.visit_conditional(self)


class BiconditionalNode(BinaryNode):
    """Biconditional (↔)."""

    name = "Biconditional"

    __slots__ = ()

    def accept(self, v: LogicVisitor):
        return v.visit_biconditional(self)


# Connective characters and the node kinds they introduce
CONNECTIVES: Dict[str, type] = {
    "¬": NegationNode,
    "∧": ConjunctionNode,
    "∨": DisjunctionNode,
    "→": ConditionalNode,
    "↔": BiconditionalNode,
}
