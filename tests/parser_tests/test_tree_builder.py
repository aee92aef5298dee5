# tests/parser_tests/test_tree_builder.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Test suite for syntax tree to logic tree conversion

"""Test suite for the logic tree builder.

The grammar never produces malformed syntax trees, so these tests hand-build
generic trees to reach each builder error: missing children, a node where a
leaf belongs, empty leaves, characters in the wrong position and child counts
no grammar alternative produces.
"""

import pytest
from logic_parser import (
    ConjunctionNode,
    EmptySubstringError,
    InvalidCharacterError,
    InvalidSyntaxTreeError,
    LogicParsingError,
    LogicTreeBuilder,
    NoLeafFoundError,
    RootNode,
    UnsupportedChildCountError,
)
from logic_parser.grammar import build_syntax_tree
from logic_parser.syntax_tree import SyntaxLeaf, SyntaxNode
from utils.logger import get_logger


def _atom(index: int) -> SyntaxNode:
    return SyntaxNode("formula", (SyntaxLeaf(index, index + 1),))


def _group(start: int, inner: SyntaxNode, end: int) -> SyntaxNode:
    return SyntaxNode("formula", (SyntaxLeaf(start, start + 1), inner, SyntaxLeaf(end, end + 1)))


class TestLogicTreeBuilder:
    """Test cases for converting generic syntax trees into logic trees."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_builds_from_grammar_output(self, basic_formula):
        """Test building directly from a derived syntax tree."""
        normalized = f"({basic_formula})"
        builder = LogicTreeBuilder(normalized)
        root = builder.build(build_syntax_tree(normalized))

        assert isinstance(root, RootNode)
        assert isinstance(root.formula, ConjunctionNode)
        assert [d.character for d in builder.diagnostics] == ["p", "q"]

    def test_builds_from_hand_made_tree(self):
        """Test that hand-built trees follow the same dispatch."""
        text = "(p∧q)"
        tree = SyntaxNode(
            "formula",
            (
                SyntaxLeaf(0, 1),
                _atom(1),
                SyntaxLeaf(2, 3),
                _atom(3),
                SyntaxLeaf(4, 5),
            ),
        )
        root = LogicTreeBuilder(text).build(tree)
        assert root.description == "(Root (Conjunction P|Q)|_)"

    def test_diagnostics_reset_between_builds(self):
        """Test that each build starts with an empty diagnostic list."""
        builder = LogicTreeBuilder("(p)")
        tree = build_syntax_tree("(p)")

        builder.build(tree)
        builder.build(tree)

        assert len(builder.diagnostics) == 1

    def test_leaf_without_children(self):
        """Test that a leaf where a node belongs is an invalid syntax tree."""
        with pytest.raises(InvalidSyntaxTreeError):
            LogicTreeBuilder("p").build(SyntaxLeaf(0, 1))

    def test_node_where_leaf_expected(self):
        """Test that an atom position holding a node raises NoLeafFoundError."""
        tree = SyntaxNode("formula", (_atom(0),))

        with pytest.raises(NoLeafFoundError):
            LogicTreeBuilder("p").build(tree)

    def test_operator_position_without_leaf(self):
        """Test that a binary operator position holding a node is rejected."""
        tree = SyntaxNode(
            "formula",
            (SyntaxLeaf(0, 1), _atom(1), _atom(2), _atom(3), SyntaxLeaf(4, 5)),
        )

        with pytest.raises(NoLeafFoundError):
            LogicTreeBuilder("(pqr)").build(tree)

    def test_empty_substring(self):
        """Test that an empty leaf raises EmptySubstringError."""
        tree = SyntaxNode("formula", (SyntaxLeaf(1, 1),))

        with pytest.raises(EmptySubstringError):
            LogicTreeBuilder("(p)").build(tree)

    INVALID_CHARACTER_CASES = [
        # Non-letter in atom position
        ("1", SyntaxNode("formula", (SyntaxLeaf(0, 1),))),
        ("∧", SyntaxNode("formula", (SyntaxLeaf(0, 1),))),
        # Wrong character in negation position
        ("∧p", SyntaxNode("formula", (SyntaxLeaf(0, 1), _atom(1)))),
        ("qp", SyntaxNode("formula", (SyntaxLeaf(0, 1), _atom(1)))),
        # Wrong character in binary operator position
        (
            "(p¬q)",
            SyntaxNode(
                "formula",
                (SyntaxLeaf(0, 1), _atom(1), SyntaxLeaf(2, 3), _atom(3), SyntaxLeaf(4, 5)),
            ),
        ),
        (
            "(p&q)",
            SyntaxNode(
                "formula",
                (SyntaxLeaf(0, 1), _atom(1), SyntaxLeaf(2, 3), _atom(3), SyntaxLeaf(4, 5)),
            ),
        ),
    ]

    @pytest.mark.parametrize("text, tree", INVALID_CHARACTER_CASES)
    def test_invalid_character(self, text, tree):
        """Test that misplaced or unknown characters raise InvalidCharacterError.

        Args:
            text: String the leaves refer to
            tree: Hand-built syntax tree
        """
        self.logger.debug(f"Testing invalid character tree for: {text}")

        with pytest.raises(InvalidCharacterError) as exc_info:
            LogicTreeBuilder(text).build(tree)

        assert exc_info.value.character in text

    @pytest.mark.parametrize("count", [0, 4, 6])
    def test_unsupported_child_count(self, count):
        """Test that child counts outside {1, 2, 3, 5} are invariant violations.

        Args:
            count: Number of children on the hand-built node
        """
        tree = SyntaxNode("formula", tuple(SyntaxLeaf(0, 1) for _ in range(count)))

        with pytest.raises(UnsupportedChildCountError) as exc_info:
            LogicTreeBuilder("p").build(tree)

        assert exc_info.value.count == count

    def test_nested_error_aborts_build(self):
        """Test that an error deep in the tree aborts the whole build."""
        tree = _group(0, _group(1, SyntaxNode("formula", (SyntaxLeaf(2, 3),)), 3), 4)

        with pytest.raises(LogicParsingError):
            LogicTreeBuilder("((1))").build(tree)
