# logic_parser/grammar.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# LALR(1) grammar for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The grammar has a single non-terminal, ``formula``, with seven alternatives:

    formula : ATOM
            | "(" formula ")"
            | "¬" formula
            | "(" formula "∧" formula ")"
            | "(" formula "∨" formula ")"
            | "(" formula "→" formula ")"
            | "(" formula "↔" formula ")"

Every binary connective is fully parenthesized, so the grammar is
unambiguous and needs no precedence table. Rules do not build logic nodes;
each one returns a generic ``SyntaxNode`` whose children are the matched
right-hand-side symbols. The tree builder then dispatches on the child count,
which identifies the alternative: 1 for an atom, 2 for a negation, 3 for a
parenthetical group and 5 for a binary connective.

Input is normalized before parsing: the whole string is wrapped in one pair
of parentheses and all whitespace is removed, so the start symbol always
matches the parenthetical alternative.
"""

from sly import Parser
from .lexer import FormulaLexer
from .syntax_tree import SyntaxNode
from .exceptions import GrammarParseError
from utils.logger import get_logger


def normalize(source: str) -> str:
    """Wrap a raw formula in parentheses and strip all whitespace.

    Args:
        source: Raw formula string as supplied by the caller

    Returns:
        Normalized formula string ready for the grammar
    """
    return "".join(character for character in f"({source})" if not character.isspace())


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser producing generic syntax trees.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    @_("ATOM")
    def formula(self, p) -> SyntaxNode:
        """Single-letter propositional variable."""
        return SyntaxNode("formula", (p.ATOM,))

    @_("LPAREN formula RPAREN")
    def formula(self, p) -> SyntaxNode:
        """Parenthesized formula for grouping."""
        return SyntaxNode("formula", (p.LPAREN, p.formula, p.RPAREN))

    @_("NOT formula")
    def formula(self, p) -> SyntaxNode:
        """Negation; the operand is not parenthesized."""
        return SyntaxNode("formula", (p.NOT, p.formula))

    @_("LPAREN formula AND formula RPAREN")
    def formula(self, p) -> SyntaxNode:
        """Conjunction."""
        return SyntaxNode(
            "formula", (p.LPAREN, p.formula0, p.AND, p.formula1, p.RPAREN)
        )

    @_("LPAREN formula OR formula RPAREN")
    def formula(self, p) -> SyntaxNode:
        """Disjunction."""
        return SyntaxNode(
            "formula", (p.LPAREN, p.formula0, p.OR, p.formula1, p.RPAREN)
        )

    @_("LPAREN formula IMPLIES formula RPAREN")
    def formula(self, p) -> SyntaxNode:
        """Conditional."""
        return SyntaxNode(
            "formula", (p.LPAREN, p.formula0, p.IMPLIES, p.formula1, p.RPAREN)
        )

    @_("LPAREN formula IFF formula RPAREN")
    def formula(self, p) -> SyntaxNode:
        """Biconditional."""
        return SyntaxNode(
            "formula", (p.LPAREN, p.formula0, p.IFF, p.formula1, p.RPAREN)
        )

    def parse(self, text: str) -> SyntaxNode:
        """Parse normalized formula text into a generic syntax tree.

        Args:
            text: Normalized formula string

        Returns:
            Root syntax node of the derivation

        Raises:
            GrammarParseError: If the text has no derivation under the grammar
        """
        logger = get_logger()

        try:
            syntax_tree = super().parse(FormulaLexer().tokenize(text))

            if syntax_tree is None:
                raise GrammarParseError("Failed to parse formula (syntax error).")

            return syntax_tree

        except GrammarParseError:
            logger.debug("Grammar parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected grammar parsing error: {e}")
            raise GrammarParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            GrammarParseError: Always raised with position information
        """
        if token:
            error_msg = (
                f"Syntax error near {token.type} at position {token.value.start}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise GrammarParseError(error_msg)


def build_syntax_tree(normalized: str) -> SyntaxNode:
    """Derive a generic syntax tree for an already-normalized formula.

    A fresh parser is created per call so concurrent callers share no state.

    Args:
        normalized: Output of ``normalize``

    Returns:
        Root syntax node, always the parenthetical alternative

    Raises:
        GrammarParseError: If the formula is malformed
    """
    logger = get_logger()
    syntax_tree = _FormulaParser().parse(normalized)
    logger.syntax_tree_built(normalized)
    return syntax_tree
