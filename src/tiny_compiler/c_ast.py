"""
Target Abstract Syntax Tree
===========================

Node types for the C-like call syntax produced by the transformer and
consumed by the code generator.

Node Hierarchy
--------------
CNode (base)
├── Program - root node
├── ExpressionStatement - top-level call followed by ';'
├── CallExpression - callee(arg, arg, ...)
├── Identifier - callee name
├── NumberLiteral - carried over unchanged
└── StringLiteral - carried over unchanged

Compared with the source tree, a call's name becomes a separate
Identifier node and top-level calls gain an ExpressionStatement wrapper.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union


@dataclass
class CNode:
    """Base class for all target tree nodes."""
    kind: ClassVar[str] = "CNode"


@dataclass
class Identifier(CNode):
    kind: ClassVar[str] = "Identifier"
    name: str = ""


@dataclass
class NumberLiteral(CNode):
    kind: ClassVar[str] = "NumberLiteral"
    value: str = ""


@dataclass
class StringLiteral(CNode):
    kind: ClassVar[str] = "StringLiteral"
    value: str = ""


@dataclass
class CallExpression(CNode):
    """
    Call expression.

    Attributes:
        callee: The called function
        arguments: Argument expressions in source order
    """
    kind: ClassVar[str] = "CallExpression"
    callee: Identifier = field(default_factory=Identifier)
    arguments: list["CExpression"] = field(default_factory=list)


CExpression = Union[CallExpression, NumberLiteral, StringLiteral]


@dataclass
class ExpressionStatement(CNode):
    """
    Expression used as a statement; only top-level calls are wrapped.

    Attributes:
        expression: The wrapped expression
    """
    kind: ClassVar[str] = "ExpressionStatement"
    expression: Optional[CExpression] = None


@dataclass
class Program(CNode):
    """
    Root of the target tree.

    Attributes:
        body: Statements in source order
    """
    kind: ClassVar[str] = "Program"
    body: list[ExpressionStatement] = field(default_factory=list)
