"""
Source Abstract Syntax Tree
===========================

Node types produced by the parser from the parenthesized-call language.

Node Hierarchy
--------------
ASTNode (base)
├── Program - root node, one per compilation
├── CallExpression - (name param param ...)
├── NumberLiteral - digit run, kept as text
└── StringLiteral - quoted text without the quotes

Design Notes
------------
- All nodes are dataclasses for clean representation and comparison
- `kind` is a class-level tag naming the node type; the tree walker and
  visitors key their handlers on it
- The tree is built once by the parser and never mutated afterwards
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union


@dataclass
class ASTNode:
    """Base class for all source tree nodes."""
    kind: ClassVar[str] = "ASTNode"


@dataclass
class NumberLiteral(ASTNode):
    """
    Number literal.

    Attributes:
        value: The digits exactly as written (no numeric conversion)
    """
    kind: ClassVar[str] = "NumberLiteral"
    value: str = ""


@dataclass
class StringLiteral(ASTNode):
    """
    String literal.

    Attributes:
        value: Text between the double quotes
    """
    kind: ClassVar[str] = "StringLiteral"
    value: str = ""


@dataclass
class CallExpression(ASTNode):
    """
    Parenthesized call such as (add 2 (subtract 4 2)).

    Attributes:
        name: Callee identifier, never empty
        params: Argument expressions in source order (may be empty)
    """
    kind: ClassVar[str] = "CallExpression"
    name: str = ""
    params: list["Expression"] = field(default_factory=list)


Expression = Union[CallExpression, NumberLiteral, StringLiteral]


@dataclass
class Program(ASTNode):
    """
    Root of the source tree.

    Attributes:
        body: Top-level expressions in textual order
    """
    kind: ClassVar[str] = "Program"
    body: list[Expression] = field(default_factory=list)
