"""
Lexer (Tokenizer)
=================

This module converts source text into a flat list of tokens for the
parser.

Token Categories
----------------
| Type    | Matches                     | Example  |
|---------|-----------------------------|----------|
| LPAREN  | (                           | (        |
| RPAREN  | )                           | )        |
| NUMBER  | run of ASCII digits         | 42       |
| STRING  | "..." (quotes stripped)     | "foo"    |
| NAME    | run of ASCII letters        | add      |

Whitespace between tokens is skipped. There are no comments, escape
sequences, signed or fractional numbers, and names may not contain
digits or underscores.

Example Usage
-------------
>>> from tiny_compiler.lexer import scan
>>> for token in scan('(add 2 "two")'):
...     print(token)
Token(LPAREN, '(', 0)
Token(NAME, 'add', 1)
Token(NUMBER, '2', 5)
Token(STRING, 'two', 7)
Token(RPAREN, ')', 12)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import logging
import string

from tiny_compiler.errors import InvalidCharacterError, UnterminatedStringError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types of the parenthesized-call language."""

    LPAREN = auto()     # (  paren-open
    RPAREN = auto()     # )  paren-close
    NUMBER = auto()     # digit run
    STRING = auto()     # double-quoted text
    NAME = auto()       # letter run


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        value: Source text of the token (string tokens exclude the quotes)
        position: 0-based offset of the token's first character
    """
    type: TokenType
    value: str
    position: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.position})"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text in a single left-to-right pass.

    The lexer never backtracks. The first character that fits no token
    class aborts scanning with an InvalidCharacterError.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())
    """

    DIGITS = string.digits
    LETTERS = string.ascii_letters

    def __init__(self, source: str):
        self.source = source
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects in source order

        Raises:
            InvalidCharacterError: On a character outside every token class
            UnterminatedStringError: If a string literal is never closed
        """
        while not self._at_end():
            char = self._peek()

            if char == "(":
                yield self._single(TokenType.LPAREN)
                continue

            if char == ")":
                yield self._single(TokenType.RPAREN)
                continue

            if char.isspace():
                self._pos += 1
                continue

            if char in self.DIGITS:
                yield self._scan_run(TokenType.NUMBER, self.DIGITS)
                continue

            if char == '"':
                yield self._scan_string()
                continue

            if char in self.LETTERS:
                yield self._scan_run(TokenType.NAME, self.LETTERS)
                continue

            raise InvalidCharacterError(char, self._pos)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string past the end."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _single(self, token_type: TokenType) -> Token:
        """Consume one character as a token of the given type."""
        token = Token(token_type, self.source[self._pos], self._pos)
        self._pos += 1
        return token

    def _scan_run(self, token_type: TokenType, charset: str) -> Token:
        """Consume the maximal run of characters drawn from charset."""
        start = self._pos
        while self._peek() and self._peek() in charset:
            self._pos += 1
        return Token(token_type, self.source[start:self._pos], start)

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        Characters are copied verbatim up to the next double quote; there
        is no escape processing, so a string can never contain '"'.
        """
        start = self._pos
        end = self.source.find('"', start + 1)
        if end == -1:
            raise UnterminatedStringError(start)

        self._pos = end + 1  # skip closing "
        return Token(TokenType.STRING, self.source[start + 1:end], start)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(source: str) -> list[Token]:
    """
    Convert source text into a list of tokens.

    Args:
        source: Program text

    Returns:
        Ordered list of tokens (empty for empty or blank input)

    Raises:
        LexError: If the text cannot be tokenized
    """
    tokens = list(Lexer(source).tokenize())
    logger.debug(f"Scanned {len(tokens)} tokens from {len(source)} characters")
    return tokens
