"""
Tiny Compiler Error Hierarchy
=============================

This module defines the exception hierarchy for the compiler pipeline.
All exceptions inherit from TinyCompilerError, allowing callers to catch
every compilation failure with a single except clause if desired.

Exception Hierarchy
-------------------
TinyCompilerError (base)
├── LexError (scanner)
│   ├── InvalidCharacterError - character matches no token class
│   └── UnterminatedStringError - missing closing double quote
├── ParseError (parser)
│   ├── MissingCalleeError - '(' not followed by a name
│   ├── UnexpectedTokenError - token cannot start an expression
│   ├── UnexpectedEndError - tokens ran out inside a call
│   └── NestingTooDeepError - calls nested beyond the supported depth
├── TraversalError - tree walker met a node kind it does not know
└── CodeGenError - code generator met a node kind it does not know

Every stage fails fast: the first error aborts the whole compilation and
no partial output is produced.

Error messages follow this format:
    offset 7: error: invalid character '@'
    hint: suggestion for fixing (when available)

The offset prefix only appears when a position is known (scanner and
parser errors). Traversal and code generation errors describe internal
invariant violations and carry the offending node kind instead.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TinyCompilerError(Exception):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        position: 0-based offset into the source text (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with position and hint.

        Example output:
            offset 4: error: unterminated string literal
            hint: add closing '"' to complete the string
        """
        parts = []

        if self.position is not None:
            parts.append(f"offset {self.position}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexError(TinyCompilerError):
    """
    Error raised while scanning source text into tokens.

    Examples:
        - Character outside every token class ('@', '_', '-')
        - String literal without a closing quote
    """
    pass


class InvalidCharacterError(LexError):
    """
    Character that matches none of the recognized token classes.

    Attributes:
        char: The offending character
    """

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        super().__init__(
            f"invalid character '{char}'",
            position=position,
        )


class UnterminatedStringError(LexError):
    """
    String literal that reaches end of input before its closing quote.

    Example:
        (concat "foo "bar)    ; second quote opens a string that never closes
    """

    def __init__(self, position: Optional[int] = None):
        super().__init__(
            "unterminated string literal",
            position=position,
            hint="add closing '\"' to complete the string",
        )


# =============================================================================
# Syntax Errors
# =============================================================================

class ParseError(TinyCompilerError):
    """
    Structural error raised while building the source tree from tokens.
    """
    pass


class MissingCalleeError(ParseError):
    """
    An opening parenthesis that is not followed by a callee name.

    Example:
        (2 3)      ; number where a name is required
        ((add) 1)  ; callees cannot themselves be expressions

    Attributes:
        found: Description of what was found instead
    """

    def __init__(self, found: str, position: Optional[int] = None):
        self.found = found
        super().__init__(
            "expected callee name",
            position=position,
            hint=f"found {found}; a call must start with '(' followed by a name",
        )


class UnexpectedTokenError(ParseError):
    """
    Token that cannot begin an expression.

    Attributes:
        unexpected_kind: The TokenType of the offending token
        token: The offending token itself
    """

    def __init__(self, token, expected: Optional[str] = None):
        self.token = token
        self.unexpected_kind = token.type

        hint = f"expected {expected}" if expected else None
        super().__init__(
            f"unexpected token {token.type.name} '{token.value}'",
            position=token.position,
            hint=hint,
        )


class UnexpectedEndError(ParseError):
    """
    Token stream exhausted in the middle of a call expression.

    Attributes:
        expected: What the parser was waiting for
    """

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(
            f"unexpected end of input, expected {expected}",
            hint="check that every '(' has a matching ')'",
        )


class NestingTooDeepError(ParseError):
    """
    Calls nested deeper than the parser supports.

    Every stage walks the tree recursively, so the parser rejects
    nesting that later stages could not render.

    Attributes:
        max_depth: The deepest nesting accepted
    """

    def __init__(self, max_depth: int, position: Optional[int] = None):
        self.max_depth = max_depth
        super().__init__(
            f"calls nested deeper than {max_depth} levels",
            position=position,
            hint="split the expression into smaller calls",
        )


# =============================================================================
# Internal Invariant Errors
# =============================================================================

class TraversalError(TinyCompilerError):
    """
    Tree walker reached a node kind it does not recognize.

    Trees built by the parser never trigger this; it guards against
    hand-built or foreign trees being passed to traverse().

    Attributes:
        kind: Name of the unrecognized node kind
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"cannot traverse node of kind '{kind}'")


class CodeGenError(TinyCompilerError):
    """
    Code generator reached a node kind it does not recognize.

    Attributes:
        kind: Name of the unrecognized node kind
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"cannot generate code for node of kind '{kind}'")
