# logic_parser/lexer.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks a normalized formula string into single-character tokens
for the grammar. Every token value is replaced by a ``SyntaxLeaf`` holding the
token's range in the input, so the parse tree refers back to the source text
instead of carrying copies of it.

Supported Tokens:
- Atoms: a single ASCII letter, either case
- Connectives: ¬, ∧, ∨, →, ↔
- Grouping: (, )
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .syntax_tree import SyntaxLeaf
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ATOM",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # One letter per atom; "pq" is two atoms, which the grammar rejects
    ATOM = r"[a-zA-Z]"

    NOT = r"¬"
    AND = r"∧"
    OR = r"∨"
    IMPLIES = r"→"
    IFF = r"↔"
    LPAREN = r"\("
    RPAREN = r"\)"

    def tokenize(self, text, lineno=1, index=0):
        """Tokenize text, replacing each token value with its source range.

        Args:
            text: Formula string to tokenize
            lineno: Starting line number
            index: Starting character offset

        Yields:
            SLY tokens whose ``value`` is a ``SyntaxLeaf``
        """
        for token in super().tokenize(text, lineno, index):
            token.value = SyntaxLeaf(token.index, token.index + len(token.value))
            yield token

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
