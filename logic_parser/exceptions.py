# logic_parser/exceptions.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Custom exceptions for formula parsing and logic-tree construction

"""Domain-specific exceptions for propositional formula processing.

This module defines every exception that can be raised while turning a raw
formula string into a logic tree. All of them derive from ``ParseError`` so
callers can catch a single type, while the subclasses keep each failure
distinguishable:

    GrammarParseError: the input has no derivation under the formula grammar
    LogicParsingError: the generic parse tree violates the builder's contract
    NodeConfigurationError: an illegal attach operation on a logic node

Every error aborts the current build; no partial tree is ever returned.
"""


class ParseError(RuntimeError):
    """Base exception for all formula parsing and tree construction failures."""

    pass


class GrammarParseError(ParseError):
    """Exception raised when the grammar cannot derive the input formula.

    Covers malformed formulas, unbalanced parentheses, empty operands and
    characters that match neither an atom nor a connective.
    """

    pass


class LogicParsingError(ParseError):
    """Exception raised when the generic parse tree cannot be converted.

    These errors indicate a contract violation between the grammar and the
    tree builder rather than a problem with the user's formula.
    """

    pass


class InvalidSyntaxTreeError(LogicParsingError):
    """A generic parse-tree node has no children where some were expected."""

    pass


class NoLeafFoundError(LogicParsingError):
    """An internal node sits where the builder expected a leaf."""

    pass


class EmptySubstringError(LogicParsingError):
    """A leaf references an empty range of the normalized input."""

    pass


class InvalidCharacterError(LogicParsingError):
    """A leaf holds a character that is not valid at its position.

    Attributes:
        character: The offending character
    """

    def __init__(self, character: str, message: str = ""):
        self.character = character
        super().__init__(message or f"Encountered an invalid character '{character}'")


class UnsupportedChildCountError(LogicParsingError):
    """A generic parse-tree node has a child count outside {1, 2, 3, 5}.

    The formula grammar only produces those counts, so this signals an
    internal invariant breach.

    Attributes:
        count: The unexpected number of children
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Syntax tree node has {count} children; expected one of 1, 2, 3 or 5"
        )


class NodeConfigurationError(ParseError):
    """Base exception for illegal child or parent assignments on logic nodes."""

    pass


class InvalidChildrenTypeError(NodeConfigurationError):
    """The node's children layout does not permit any children."""

    pass


class AllChildrenAlreadyConfiguredError(NodeConfigurationError):
    """Every child slot permitted by the node's layout is already filled."""

    pass


class ParentAlreadyConfiguredError(NodeConfigurationError):
    """The node already has a parent or can never have one."""

    pass
