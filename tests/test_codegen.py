# =============================================================================
# test_codegen.py - Code Generator Unit Tests
# =============================================================================
# Tests for rendering target trees as C-like call syntax.
#
# Test coverage includes:
#   - Each node kind's rendering rule
#   - Statement and argument separators
#   - Unknown node kinds
# =============================================================================

import pytest
from tiny_compiler.codegen import CodeGenerator, generate
from tiny_compiler import c_ast
from tiny_compiler import ast
from tiny_compiler.errors import CodeGenError


# =============================================================================
# Helper Functions
# =============================================================================

def call(name: str, *arguments) -> c_ast.CallExpression:
    """Build a target call node."""
    return c_ast.CallExpression(
        callee=c_ast.Identifier(name=name),
        arguments=list(arguments),
    )


def statement(expression) -> c_ast.ExpressionStatement:
    return c_ast.ExpressionStatement(expression=expression)


def num(value: str) -> c_ast.NumberLiteral:
    return c_ast.NumberLiteral(value=value)


# =============================================================================
# Rendering Rule Tests
# =============================================================================

class TestRendering:
    """Test the rendering rule for each node kind."""

    def test_identifier(self):
        """Identifiers render as their name."""
        assert generate(c_ast.Identifier(name="add")) == "add"

    def test_number(self):
        """Numbers render verbatim."""
        assert generate(num("007")) == "007"

    def test_string(self):
        """Strings are wrapped in double quotes."""
        assert generate(c_ast.StringLiteral(value="foo")) == '"foo"'

    def test_string_not_escaped(self):
        """Backslashes and other characters are not escaped."""
        assert generate(c_ast.StringLiteral(value="a\\b")) == '"a\\b"'

    def test_call_without_arguments(self):
        """A call with no arguments renders empty parentheses."""
        assert generate(call("now")) == "now()"

    def test_call_arguments_joined(self):
        """Arguments are separated by a comma and a space."""
        assert generate(call("add", num("2"), num("2"))) == "add(2, 2)"

    def test_nested_call(self):
        """Nested calls render recursively."""
        node = call("add", num("2"), call("subtract", num("4"), num("2")))
        assert generate(node) == "add(2, subtract(4, 2))"

    def test_statement(self):
        """Statements end with a semicolon."""
        assert generate(statement(call("f"))) == "f();"

    def test_program_joins_with_newlines(self):
        """Statements are joined with single newlines, no trailing newline."""
        program = c_ast.Program(body=[
            statement(call("add", num("2"), num("2"))),
            statement(call("subtract", num("4"), num("2"))),
        ])
        assert generate(program) == "add(2, 2);\nsubtract(4, 2);"

    def test_empty_program(self):
        """An empty program renders as the empty string."""
        assert generate(c_ast.Program()) == ""

    def test_mixed_arguments(self):
        """Strings, numbers and calls mix freely as arguments."""
        node = call("f", c_ast.StringLiteral(value="x"), num("1"), call("g"))
        assert generate(node) == 'f("x", 1, g())'

    def test_generator_class(self):
        """CodeGenerator can be used directly."""
        generator = CodeGenerator()
        assert generator.generate(statement(call("f", num("1")))) == "f(1);"


# =============================================================================
# Error Tests
# =============================================================================

class TestCodeGenErrors:
    """Test unknown node kinds."""

    def test_source_node_rejected(self):
        """Source tree nodes cannot be rendered."""
        with pytest.raises(CodeGenError) as exc_info:
            generate(ast.CallExpression(name="add"))
        assert exc_info.value.kind == "CallExpression"

    def test_unknown_argument(self):
        """An unknown node nested in arguments is detected."""
        node = call("f", num("1"), ast.NumberLiteral(value="2"))
        with pytest.raises(CodeGenError):
            generate(node)

    def test_foreign_object(self):
        """Objects without a kind report their class name."""
        with pytest.raises(CodeGenError) as exc_info:
            generate(None)
        assert exc_info.value.kind == "NoneType"

    def test_message(self):
        """The error message names the node kind."""
        with pytest.raises(CodeGenError) as exc_info:
            generate(ast.Program())
        assert "'Program'" in str(exc_info.value)
