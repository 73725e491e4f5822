"""
Recursive Descent Parser
========================

This module builds the source tree from the token list produced by the
lexer.

Grammar (EBNF)
--------------
program     ::= expression*
expression  ::= NUMBER | STRING | call
call        ::= '(' NAME expression* ')'

The token after '(' must be a NAME; callees are never expressions
themselves. Top-level entries are in practice always calls.

Example Usage
-------------
>>> from tiny_compiler.lexer import scan
>>> from tiny_compiler.parser import parse
>>> parse(scan("(add 2 2)"))
Program(body=[CallExpression(name='add', params=[NumberLiteral(value='2'), NumberLiteral(value='2')])])
"""

from typing import Optional
import logging

from tiny_compiler.lexer import Token, TokenType
from tiny_compiler.ast import (
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
    Expression,
)
from tiny_compiler.errors import (
    MissingCalleeError,
    UnexpectedTokenError,
    UnexpectedEndError,
    NestingTooDeepError,
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Recursive descent parser over a token list.

    The parser stops at the first error; there is no recovery.

    Attributes:
        tokens: List of tokens to parse
    """

    # Deepest call nesting accepted. The parser uses two frames per level
    # and the walker and code generator one each, so this stays well
    # inside the default recursion limit.
    MAX_NESTING_DEPTH = 256

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

        # Current position in token list
        self._pos = 0

        # Number of calls currently open
        self._depth = 0

    def parse(self) -> Program:
        """
        Parse the token list into a Program.

        Returns:
            Program whose body holds every top-level expression

        Raises:
            ParseError: If the tokens are structurally malformed
        """
        body = []
        while not self._at_end():
            body.append(self._parse_expression())
        return Program(body=body)

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Current token, or None when the list is exhausted."""
        if self._at_end():
            return None
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def _check(self, token_type: TokenType) -> bool:
        token = self._peek()
        return token is not None and token.type == token_type

    # =========================================================================
    # Grammar Rules
    # =========================================================================

    def _parse_expression(self) -> Expression:
        """
        Parse a single expression.

        expression ::= NUMBER | STRING | call
        """
        token = self._peek()

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(value=token.value)

        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(value=token.value)

        if token.type == TokenType.LPAREN:
            return self._parse_call()

        raise UnexpectedTokenError(token, expected="a number, string or '('")

    def _parse_call(self) -> CallExpression:
        """
        Parse a call expression.

        call ::= '(' NAME expression* ')'
        """
        open_paren = self._advance()  # consume (
        self._depth += 1
        if self._depth > self.MAX_NESTING_DEPTH:
            raise NestingTooDeepError(
                self.MAX_NESTING_DEPTH, position=open_paren.position
            )

        callee = self._peek()
        if callee is None:
            raise UnexpectedEndError("callee name")
        if callee.type != TokenType.NAME:
            raise MissingCalleeError(
                f"{callee.type.name} '{callee.value}'",
                position=callee.position,
            )
        self._advance()

        node = CallExpression(name=callee.value)
        while not self._check(TokenType.RPAREN):
            if self._at_end():
                raise UnexpectedEndError("')'")
            node.params.append(self._parse_expression())

        self._advance()  # consume )
        self._depth -= 1
        return node


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: list[Token]) -> Program:
    """
    Build the source tree from a token list.

    An empty token list yields a Program with an empty body.

    Raises:
        ParseError: If the tokens are structurally malformed
    """
    program = Parser(tokens).parse()
    logger.debug(f"Parsed {len(program.body)} top-level expressions")
    return program
