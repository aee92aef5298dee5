# logic_parser/__init__.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Formula parsing and logic-tree construction for propositional logic

"""Propositional formula parsing into typed logic trees.

This package converts a textual propositional formula into a tree of typed
logic nodes that callers can traverse, print or evaluate. Parsing runs in
three stages:

1. Normalization wraps the input in one pair of parentheses and removes all
   whitespace.
2. The SLY grammar derives a generic syntax tree whose leaves point back into
   the normalized string.
3. The tree builder converts that syntax tree into logic nodes under a fresh
   ``RootNode``, enforcing each node kind's child layout.

Core Functions:
    parse: Converts a formula string into a logic tree
    parse_with_diagnostics: Same, also returning non-fatal diagnostics
    normalize: Applies the input normalization on its own

Supported Logic:
    - Atoms: single letters, case-insensitive (stored uppercase)
    - Negation: ¬p
    - Conjunction, disjunction, conditional, biconditional: (p∧q), (p∨q),
      (p→q), (p↔q), always parenthesized

Example:
    >>> from logic_parser import parse
    >>> print(parse("(p∧q)"))
    (Root (Conjunction P|Q)|_)
"""

from typing import List, Tuple

from .ast_nodes import (
    AtomicNode,
    BiconditionalNode,
    BinaryNode,
    ChildrenLayout,
    ConditionalNode,
    ConjunctionNode,
    DisjunctionNode,
    LogicNode,
    LogicVisitor,
    NegationNode,
    RootNode,
)
from .exceptions import (
    AllChildrenAlreadyConfiguredError,
    EmptySubstringError,
    GrammarParseError,
    InvalidCharacterError,
    InvalidChildrenTypeError,
    InvalidSyntaxTreeError,
    LogicParsingError,
    NoLeafFoundError,
    NodeConfigurationError,
    ParentAlreadyConfiguredError,
    ParseError,
    UnsupportedChildCountError,
)
from .grammar import build_syntax_tree, normalize
from .tree_builder import Diagnostic, LogicTreeBuilder
from utils.logger import get_logger


def parse_with_diagnostics(source: str) -> Tuple[RootNode, List[Diagnostic]]:
    """Parse a formula and report non-fatal observations alongside the tree.

    Lowercase atoms are accepted and converted to uppercase; each conversion
    is reported as a ``Diagnostic`` so callers can warn about possible atom
    conflicts such as ``p`` and ``P`` naming the same variable.

    Args:
        source: Raw formula string

    Returns:
        Tuple of the root node and the list of diagnostics

    Raises:
        GrammarParseError: The formula is malformed
        LogicParsingError: The derived syntax tree violates the builder's contract
    """
    logger = get_logger()

    normalized = normalize(source)
    logger.formula_normalized(source, normalized)

    syntax_tree = build_syntax_tree(normalized)

    builder = LogicTreeBuilder(normalized)
    root = builder.build(syntax_tree)
    return root, builder.diagnostics


def parse(source: str) -> RootNode:
    """Parse a formula string into a logic tree.

    Args:
        source: Raw formula string; whitespace is ignored

    Returns:
        Root node whose single child is the top-level formula

    Raises:
        GrammarParseError: The formula is malformed
        LogicParsingError: The derived syntax tree violates the builder's contract

    Example:
        >>> parse("¬p").formula
        <NegationNode (Negation _|P)>
    """
    root, _ = parse_with_diagnostics(source)
    return root


__all__ = [
    "parse",
    "parse_with_diagnostics",
    "normalize",
    "build_syntax_tree",
    "LogicTreeBuilder",
    "Diagnostic",
    "ChildrenLayout",
    "LogicVisitor",
    "LogicNode",
    "RootNode",
    "AtomicNode",
    "NegationNode",
    "BinaryNode",
    "ConjunctionNode",
    "DisjunctionNode",
    "ConditionalNode",
    "BiconditionalNode",
    "ParseError",
    "GrammarParseError",
    "LogicParsingError",
    "InvalidSyntaxTreeError",
    "NoLeafFoundError",
    "EmptySubstringError",
    "InvalidCharacterError",
    "UnsupportedChildCountError",
    "NodeConfigurationError",
    "InvalidChildrenTypeError",
    "AllChildrenAlreadyConfiguredError",
    "ParentAlreadyConfiguredError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and logic-tree construction"
