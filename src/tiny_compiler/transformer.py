"""
Source-to-Target Tree Transformer
=================================

Rewrites the source tree into the target (C-like) tree using the tree
walker.

    (add 2 (subtract 4 2))

    Program                          Program
      CallExpression add               ExpressionStatement
        NumberLiteral 2        ->        CallExpression
        CallExpression subtract            Identifier add
          NumberLiteral 4                  NumberLiteral 2
          NumberLiteral 2                  CallExpression
                                             Identifier subtract
                                             NumberLiteral 4
                                             NumberLiteral 2

Append Discipline
-----------------
Each visited node appends its target counterpart to its parent's output
collection. The root's collection is the target Program.body; a call's
collection is the `arguments` list of the target call built for it.
Only calls whose parent is not a call are wrapped in an
ExpressionStatement.

The collections are kept on a stack owned by the Transformer instance:
entering a call pushes its `arguments`, leaving it pops. The source tree
is never annotated or modified.
"""

from typing import Optional
import logging

from tiny_compiler import ast
from tiny_compiler import c_ast
from tiny_compiler.traverser import NodeHandlers, traverse

logger = logging.getLogger(__name__)


class Transformer:
    """
    Builds a target tree from a source tree.

    One instance per transformation; the collection stack is not shared.

    Usage:
        target = Transformer().transform(program)
    """

    def __init__(self):
        self._collections: list[list] = []

    def transform(self, program: ast.Program) -> c_ast.Program:
        """
        Transform a source Program into a target Program.

        Raises:
            TraversalError: If the source tree contains unknown node kinds
        """
        target = c_ast.Program()
        self._collections = [target.body]

        try:
            traverse(program, {
                "NumberLiteral": NodeHandlers(enter=self._enter_number),
                "StringLiteral": NodeHandlers(enter=self._enter_string),
                "CallExpression": NodeHandlers(
                    enter=self._enter_call,
                    exit=self._exit_call,
                ),
            })
        finally:
            self._collections = []

        return target

    def _append(self, node: c_ast.CNode) -> None:
        """Append to the output collection of the node being visited's parent."""
        self._collections[-1].append(node)

    def _enter_number(self, node: ast.NumberLiteral, parent: Optional[ast.ASTNode]) -> None:
        self._append(c_ast.NumberLiteral(value=node.value))

    def _enter_string(self, node: ast.StringLiteral, parent: Optional[ast.ASTNode]) -> None:
        self._append(c_ast.StringLiteral(value=node.value))

    def _enter_call(self, node: ast.CallExpression, parent: Optional[ast.ASTNode]) -> None:
        call = c_ast.CallExpression(callee=c_ast.Identifier(name=node.name))

        if isinstance(parent, ast.CallExpression):
            self._append(call)
        else:
            self._append(c_ast.ExpressionStatement(expression=call))

        # Children of this call land in its argument list
        self._collections.append(call.arguments)

    def _exit_call(self, node: ast.CallExpression, parent: Optional[ast.ASTNode]) -> None:
        self._collections.pop()


# =============================================================================
# Convenience Functions
# =============================================================================

def transform(program: ast.Program) -> c_ast.Program:
    """
    Transform a source tree into a target tree.

    Raises:
        TraversalError: If the source tree contains unknown node kinds
    """
    target = Transformer().transform(program)
    logger.debug(f"Transformed {len(program.body)} top-level expressions")
    return target
