"""
Compiler Main Module
====================

This module provides the main compiler interface. It orchestrates the
complete compilation process:

    Source → Scan → Parse → Transform → Generate → Output

Usage
-----
Command line:
    $ tinyc program.lisp -o program.c

Programmatic:
    >>> from tiny_compiler import compile
    >>> compile("(add 2 (subtract 4 2))")
    'add(2, subtract(4, 2));'

Compilation Pipeline
--------------------
1. **Scanning**: Convert source text to tokens
2. **Parsing**: Build the source syntax tree
3. **Transformation**: Rewrite it into the target syntax tree
4. **Code Generation**: Render the target tree as text

Error Handling
--------------
Every stage fails fast. The first error aborts compilation and is
propagated unchanged to the caller; no partial output is produced.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Optional
import logging

from tiny_compiler.lexer import Token, scan
from tiny_compiler.parser import parse
from tiny_compiler.transformer import transform
from tiny_compiler.codegen import generate
from tiny_compiler.ast import Program
from tiny_compiler.c_ast import Program as CProgram

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Pipeline stages, in execution order."""
    SCAN = 1
    PARSE = 2
    TRANSFORM = 3
    GENERATE = 4


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        stop_after: Last stage to run. Earlier values leave the later
                    fields of CompilerResult unset; used by the CLI to
                    dump tokens or trees without generating output.
    """
    stop_after: Stage = Stage.GENERATE


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        success: True if every requested stage completed
        tokens: Tokens produced by the scanner
        ast: Source syntax tree (if parsing ran)
        target_ast: Target syntax tree (if transformation ran)
        output: Generated text (if code generation ran)
    """
    filename: str = ""
    success: bool = False
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[Program] = None
    target_ast: Optional[CProgram] = None
    output: str = ""

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class TinyCompiler:
    """
    Compiler from parenthesized-call syntax to C-like call syntax.

    Example:
        compiler = TinyCompiler()
        result = compiler.compile_source("(add 2 2)")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile source text.

        Args:
            source: Program text
            filename: Source name, recorded in the result

        Returns:
            CompilerResult with the intermediate and final products

        Raises:
            TinyCompilerError: If any stage fails
        """
        stop_after = self.options.stop_after
        result = CompilerResult(filename=filename)
        logger.debug(f"Compiling {filename} (stop after {stop_after.name})")

        # Stage 1: Scanning
        result.tokens = scan(source)

        # Stage 2: Parsing
        if stop_after >= Stage.PARSE:
            result.ast = parse(result.tokens)

        # Stage 3: Transformation
        if stop_after >= Stage.TRANSFORM:
            result.target_ast = transform(result.ast)

        # Stage 4: Code generation
        if stop_after >= Stage.GENERATE:
            result.output = generate(result.target_ast)

        result.success = True
        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a source file.

        Raises:
            TinyCompilerError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile(source: str) -> str:
    """
    Compile parenthesized-call source text to C-like call syntax.

    This is the primary high-level interface.

    Args:
        source: Program text

    Returns:
        Generated text; empty for an empty program

    Raises:
        TinyCompilerError: If compilation fails

    Example:
        >>> compile('(concat "foo" "bar")')
        'concat("foo", "bar");'
    """
    return TinyCompiler().compile_source(source).output


def compile_file(filepath: str, output_path: Optional[str] = None) -> str:
    """
    Compile a source file, optionally writing the result.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write generated output

    Returns:
        Generated text

    Raises:
        TinyCompilerError: If compilation fails
        FileNotFoundError: If source file not found
    """
    result = TinyCompiler().compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
