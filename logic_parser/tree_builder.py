# logic_parser/tree_builder.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Conversion of generic syntax trees into typed logic trees

"""Builds typed logic trees from generic syntax trees.

The grammar hands back an untyped tree of syntax nodes and leaves. This module
walks that tree top-down and creates the matching logic nodes. Dispatch is
purely structural: the number of children of a syntax node identifies which
grammar alternative matched it.

    1 child   atom: read the letter and attach an atomic node
    2 children   negation: attach a negation node, build its operand
    3 children   grouping: build the inner formula under the current parent
    5 children   binary connective: attach the node, build left then right

Any other count is an invariant violation. The walk uses an explicit
work-list rather than recursion so deeply nested formulas do not exhaust the
interpreter stack. Left operands are pushed last and therefore finished
first, which keeps child slots filled in source order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from . import ast_nodes as ast
from .exceptions import (
    EmptySubstringError,
    InvalidCharacterError,
    InvalidSyntaxTreeError,
    NoLeafFoundError,
    ParseError,
    UnsupportedChildCountError,
)
from .syntax_tree import SyntaxTree
from utils.logger import LogLevel, get_logger


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Non-fatal observation made while building a logic tree.

    Attributes:
        position: Index of the character in the normalized input
        character: The character as it appeared in the input
        message: Human-readable explanation
    """

    position: int
    character: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (position {self.position})"


class LogicTreeBuilder:
    """Converts a generic syntax tree into a logic tree.

    Attributes:
        string: The normalized formula the syntax tree's leaves refer to
        diagnostics: Non-fatal observations collected during the last build
    """

    def __init__(self, string: str):
        self.string = string
        self.diagnostics: List[Diagnostic] = []

    def build(self, syntax_tree: SyntaxTree) -> ast.RootNode:
        """Build the logic tree for a whole formula.

        Args:
            syntax_tree: Root of the generic syntax tree

        Returns:
            Fresh root node holding the top-level formula

        Raises:
            LogicParsingError: The syntax tree violates the grammar's shape
            NodeConfigurationError: A node received more children than it permits
        """
        logger = get_logger()
        self.diagnostics = []

        root = ast.RootNode()
        try:
            self._build_logic_tree(syntax_tree, root)
        except ParseError as error:
            logger.build_failed(error)
            raise

        if logger.is_enabled_for(LogLevel.DEBUG):
            logger.tree_built(self.string, sum(1 for _ in root.walk()))
        return root

    def _build_logic_tree(self, syntax_tree: SyntaxTree, parent: ast.LogicNode) -> None:
        work: List[Tuple[SyntaxTree, ast.LogicNode]] = [(syntax_tree, parent)]

        while work:
            syntax_tree, parent = work.pop()

            syntax_children = syntax_tree.children
            if syntax_children is None:
                raise InvalidSyntaxTreeError("Syntax tree doesn't have any children")

            count = len(syntax_children)
            if count == 1:
                parent._set_next_child(self._create_atomic_node(syntax_children[0]))

            elif count == 2:
                node = self._create_connective_node(syntax_children[0], unary=True)
                parent._set_next_child(node)
                work.append((syntax_children[1], node))

            elif count == 3:
                # Grouping adds no node of its own
                work.append((syntax_children[1], parent))

            elif count == 5:
                node = self._create_connective_node(syntax_children[2], unary=False)
                parent._set_next_child(node)
                work.append((syntax_children[3], node))
                work.append((syntax_children[1], node))

            else:
                raise UnsupportedChildCountError(count)

    def _read_character(self, syntax_tree: SyntaxTree) -> Tuple[str, int]:
        """Return the first character of a leaf and its position.

        Raises:
            NoLeafFoundError: The syntax tree is not a leaf
            EmptySubstringError: The leaf's range is empty
        """
        span = syntax_tree.leaf
        if span is None:
            raise NoLeafFoundError("Expected a leaf in the syntax tree but found none")

        substring = self.string[span]
        if not substring:
            raise EmptySubstringError(
                "Couldn't get the first character from the syntax tree leaf's "
                "associated substring"
            )
        return substring[0], span.start

    def _create_atomic_node(self, syntax_tree: SyntaxTree) -> ast.AtomicNode:
        character, position = self._read_character(syntax_tree)
        if not character.isalpha():
            raise InvalidCharacterError(character)

        if character.islower():
            get_logger().lowercase_atom(character, position)
            self.diagnostics.append(
                Diagnostic(
                    position,
                    character,
                    f"Lowercase letter '{character}' converted to "
                    f"'{character.upper()}'",
                )
            )
        return ast.AtomicNode(character.upper())

    def _create_connective_node(
        self, syntax_tree: SyntaxTree, unary: bool
    ) -> ast.LogicNode:
        character, _ = self._read_character(syntax_tree)
        node_type = ast.CONNECTIVES.get(character)
        if node_type is None:
            raise InvalidCharacterError(character)

        if (node_type is ast.NegationNode) != unary:
            expected = "negation" if unary else "binary connective"
            raise InvalidCharacterError(
                character, f"Expected a {expected} but found '{character}'"
            )
        return node_type()
