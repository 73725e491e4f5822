"""
Source Tree Walker
==================

Generic depth-first traversal of the source tree, driven by a visitor
mapping from node kind to enter/exit callbacks.

Usage
-----
>>> from tiny_compiler.traverser import NodeHandlers, traverse
>>> names = []
>>> visitor = {
...     "CallExpression": NodeHandlers(
...         enter=lambda node, parent: names.append(node.name),
...     ),
... }
>>> traverse(program, visitor)

For each node the walker calls `enter(node, parent)` if registered, walks
the children in order, then calls `exit(node, parent)` if registered.
`parent` is None only for the root. Kinds without handlers are simply
walked through. The walker never modifies the tree.
"""

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from tiny_compiler.ast import (
    ASTNode,
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
)
from tiny_compiler.errors import TraversalError


Callback = Callable[[ASTNode, Optional[ASTNode]], None]


@dataclass(frozen=True)
class NodeHandlers:
    """
    Callbacks registered for one node kind.

    Attributes:
        enter: Called before the node's children are walked
        exit: Called after the node's children are walked
    """
    enter: Optional[Callback] = None
    exit: Optional[Callback] = None


Visitor = Mapping[str, NodeHandlers]


def _children(node: ASTNode) -> list[ASTNode]:
    """Return the child nodes of a source node in structural order."""
    if isinstance(node, Program):
        return node.body
    if isinstance(node, CallExpression):
        return node.params
    if isinstance(node, (NumberLiteral, StringLiteral)):
        return []
    raise TraversalError(getattr(node, "kind", type(node).__name__))


def _traverse_node(node: ASTNode, parent: Optional[ASTNode], visitor: Visitor) -> None:
    children = _children(node)
    handlers = visitor.get(node.kind)

    if handlers and handlers.enter:
        handlers.enter(node, parent)

    for child in children:
        _traverse_node(child, node, visitor)

    if handlers and handlers.exit:
        handlers.exit(node, parent)


def traverse(root: ASTNode, visitor: Visitor) -> None:
    """
    Walk a source tree depth-first, dispatching to visitor callbacks.

    Args:
        root: Node to start from, usually a Program
        visitor: Mapping from node kind to NodeHandlers

    Raises:
        TraversalError: If a node is not a recognized source node
    """
    _traverse_node(root, None, visitor)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter:
    """
    Pretty printer for source tree debugging.

    Produces a human-readable outline of the tree structure:

        Program
          Call: add
            Number: 2
            Call: subtract
              Number: 4
              Number: 2

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode) -> str:
        """Print the tree and return it as a string."""
        self.output = []
        self.indent_level = 0
        traverse(node, {
            "Program": NodeHandlers(
                enter=lambda n, p: self._open("Program"),
                exit=self._close,
            ),
            "CallExpression": NodeHandlers(
                enter=lambda n, p: self._open(f"Call: {n.name}"),
                exit=self._close,
            ),
            "NumberLiteral": NodeHandlers(
                enter=lambda n, p: self._emit(f"Number: {n.value}"),
            ),
            "StringLiteral": NodeHandlers(
                enter=lambda n, p: self._emit(f'String: "{n.value}"'),
            ),
        })
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        """Emit a line with current indentation."""
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def _open(self, text: str) -> None:
        self._emit(text)
        self.indent_level += 1

    def _close(self, node: ASTNode, parent: Optional[ASTNode]) -> None:
        self.indent_level = max(0, self.indent_level - 1)
