# logic_parser/syntax_tree.py
# This file is part of Logic Parser - A propositional-logic formula parser
#
# Generic, untyped parse tree produced by the formula grammar

"""Generic parse tree emitted by the formula grammar.

The grammar does not build logic nodes directly. Each matched production
yields a ``SyntaxNode`` whose children mirror the right-hand side of that
production, and each terminal yields a ``SyntaxLeaf`` that references a
substring range of the normalized input. The tree builder later turns this
structure into the typed logic tree.

Both classes expose the same two accessors so the builder can check which
shape it received:

    children: ordered child tuple for nodes, ``None`` for leaves
    leaf: ``slice`` into the normalized input for leaves, ``None`` for nodes
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class SyntaxLeaf:
    """Terminal of the generic parse tree.

    Attributes:
        start: Index of the first character in the normalized input
        end: Index one past the last character
    """

    start: int
    end: int

    @property
    def children(self) -> Optional[Tuple[SyntaxTree, ...]]:
        return None

    @property
    def leaf(self) -> Optional[slice]:
        return slice(self.start, self.end)

    def __str__(self) -> str:
        return f"[{self.start}:{self.end}]"


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """Non-terminal of the generic parse tree.

    Attributes:
        symbol: Name of the non-terminal that was reduced
        nodes: Right-hand-side symbols of the matched production, in order
    """

    symbol: str
    nodes: Tuple[SyntaxTree, ...]

    @property
    def children(self) -> Optional[Tuple[SyntaxTree, ...]]:
        return self.nodes

    @property
    def leaf(self) -> Optional[slice]:
        return None

    def __str__(self) -> str:
        return f"{self.symbol}({' '.join(str(child) for child in self.nodes)})"


SyntaxTree = Union[SyntaxLeaf, SyntaxNode]
