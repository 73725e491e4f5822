"""
Tiny Compiler Command-Line Interface
====================================

- **tinyc**: compile parenthesized-call source to C-like call syntax

The tool is a Click-based CLI application that pipes a file or stdin
through the compiler and writes the result to stdout or a file.
"""

__all__ = ["tinyc"]
