"""
Tiny Compiler
=============

A minimal source-to-source compiler from a parenthesized-call language
to a C-like call syntax.

    (add 2 (subtract 4 2))    →    add(2, subtract(4, 2));

Pipeline
--------
    Source → Lexer → Parser → Transformer → Code Generator → Output

- **lexer**: text to tokens (parens, numbers, strings, names)
- **parser**: tokens to source tree (Program, CallExpression, literals)
- **traverser**: generic depth-first walker with enter/exit callbacks
- **transformer**: source tree to target tree via the walker
- **codegen**: target tree to text

Quick Start
-----------
    >>> from tiny_compiler import compile
    >>> compile('(concat "foo" "bar")')
    'concat("foo", "bar");'

Each stage is also exported on its own for inspecting intermediate
results:

    >>> from tiny_compiler import scan, parse, transform, generate
    >>> generate(transform(parse(scan("(add 2 2)"))))
    'add(2, 2);'

Or use the command-line tool:
    $ tinyc program.lisp -o program.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tiny_compiler.compiler import (
    TinyCompiler,
    CompilerOptions,
    CompilerResult,
    Stage,
    compile,
    compile_file,
)
from tiny_compiler.lexer import Lexer, Token, TokenType, scan
from tiny_compiler.parser import Parser, parse
from tiny_compiler.traverser import NodeHandlers, ASTPrinter, traverse
from tiny_compiler.transformer import Transformer, transform
from tiny_compiler.codegen import CodeGenerator, generate
from tiny_compiler.errors import (
    TinyCompilerError,
    LexError,
    InvalidCharacterError,
    UnterminatedStringError,
    ParseError,
    MissingCalleeError,
    UnexpectedTokenError,
    UnexpectedEndError,
    NestingTooDeepError,
    TraversalError,
    CodeGenError,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "TinyCompiler",
    "CompilerOptions",
    "CompilerResult",
    "Stage",
    "compile",
    "compile_file",
    # Stages
    "Lexer",
    "Token",
    "TokenType",
    "scan",
    "Parser",
    "parse",
    "NodeHandlers",
    "ASTPrinter",
    "traverse",
    "Transformer",
    "transform",
    "CodeGenerator",
    "generate",
    # Errors
    "TinyCompilerError",
    "LexError",
    "InvalidCharacterError",
    "UnterminatedStringError",
    "ParseError",
    "MissingCalleeError",
    "UnexpectedTokenError",
    "UnexpectedEndError",
    "NestingTooDeepError",
    "TraversalError",
    "CodeGenError",
]
