"""
Code Generator
==============

Renders a target tree as C-like call syntax text.

Rendering Rules
---------------
| Node                | Output                          |
|---------------------|---------------------------------|
| Program             | statements joined by newlines   |
| ExpressionStatement | expression + ';'                |
| CallExpression      | callee(arg, arg, ...)           |
| Identifier          | name                            |
| NumberLiteral       | value verbatim                  |
| StringLiteral       | "value" (no escaping)           |

Example
-------
>>> from tiny_compiler import c_ast
>>> from tiny_compiler.codegen import generate
>>> call = c_ast.CallExpression(
...     callee=c_ast.Identifier(name="add"),
...     arguments=[c_ast.NumberLiteral(value="2"), c_ast.NumberLiteral(value="2")],
... )
>>> generate(c_ast.Program(body=[c_ast.ExpressionStatement(expression=call)]))
'add(2, 2);'
"""

import logging

from tiny_compiler.c_ast import (
    CNode,
    Program,
    ExpressionStatement,
    CallExpression,
    Identifier,
    NumberLiteral,
    StringLiteral,
)
from tiny_compiler.errors import CodeGenError

logger = logging.getLogger(__name__)


class CodeGenerator:
    """
    Recursive renderer for target trees.

    Usage:
        generator = CodeGenerator()
        text = generator.generate(program)
    """

    STATEMENT_SEPARATOR = "\n"
    ARGUMENT_SEPARATOR = ", "

    def generate(self, node: CNode) -> str:
        """
        Render a target node and its children.

        Raises:
            CodeGenError: If a node kind is not recognized
        """
        if isinstance(node, Program):
            return self._generate_program(node)
        elif isinstance(node, ExpressionStatement):
            return self.generate(node.expression) + ";"
        elif isinstance(node, CallExpression):
            # One frame per nesting level; Parser.MAX_NESTING_DEPTH relies on it
            args = []
            for arg in node.arguments:
                args.append(self.generate(arg))
            return f"{self.generate(node.callee)}({self.ARGUMENT_SEPARATOR.join(args)})"
        elif isinstance(node, Identifier):
            return node.name
        elif isinstance(node, NumberLiteral):
            return node.value
        elif isinstance(node, StringLiteral):
            return f'"{node.value}"'

        raise CodeGenError(getattr(node, "kind", type(node).__name__))

    def _generate_program(self, program: Program) -> str:
        return self.STATEMENT_SEPARATOR.join(
            self.generate(statement) for statement in program.body
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def generate(node: CNode) -> str:
    """
    Render a target tree as text.

    Raises:
        CodeGenError: If a node kind is not recognized
    """
    output = CodeGenerator().generate(node)
    logger.debug(f"Generated {len(output)} characters")
    return output
