# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the scanner that turns source text into tokens.
#
# Test coverage includes:
#   - Parentheses, numbers, strings and names
#   - Whitespace handling
#   - Token positions
#   - Error conditions (invalid characters, unterminated strings)
# =============================================================================

import pytest
from tiny_compiler.lexer import Lexer, Token, TokenType, scan
from tiny_compiler.errors import (
    LexError,
    InvalidCharacterError,
    UnterminatedStringError,
)


# =============================================================================
# Helper Function
# =============================================================================

def kinds(source: str) -> list:
    """Helper returning only the token types for a source string."""
    return [t.type for t in scan(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert scan("") == []

    def test_whitespace_only(self):
        """Whitespace-only source produces no tokens."""
        assert scan("  \t\n\r  ") == []

    def test_parentheses(self):
        """Each parenthesis is a single token."""
        assert kinds("()") == [TokenType.LPAREN, TokenType.RPAREN]

    def test_adjacent_parentheses(self):
        """Parentheses need no separating whitespace."""
        assert kinds("(())") == [
            TokenType.LPAREN,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.RPAREN,
        ]

    def test_name(self):
        """A run of letters is a single NAME token."""
        tokens = scan("add")
        assert tokens == [Token(TokenType.NAME, "add", 0)]

    def test_mixed_case_name(self):
        """Names are case-insensitive letter runs and keep their case."""
        tokens = scan("ConCat")
        assert tokens[0].type == TokenType.NAME
        assert tokens[0].value == "ConCat"

    def test_simple_call(self):
        """A complete call expression."""
        tokens = scan("(add 2 2)")
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.LPAREN, "("),
            (TokenType.NAME, "add"),
            (TokenType.NUMBER, "2"),
            (TokenType.NUMBER, "2"),
            (TokenType.RPAREN, ")"),
        ]


# =============================================================================
# Number Tests
# =============================================================================

class TestNumbers:
    """Test number recognition."""

    def test_single_digit(self):
        """Single digit number."""
        assert scan("7") == [Token(TokenType.NUMBER, "7", 0)]

    def test_multi_digit_is_greedy(self):
        """All consecutive digits belong to one token."""
        tokens = scan("12345")
        assert len(tokens) == 1
        assert tokens[0].value == "12345"

    def test_leading_zeros_preserved(self):
        """Digits are kept verbatim, not converted to an integer."""
        assert scan("007")[0].value == "007"

    def test_number_then_name(self):
        """A letter ends a number run and starts a name."""
        tokens = scan("12abc")
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.NUMBER, "12"),
            (TokenType.NAME, "abc"),
        ]

    def test_name_then_number(self):
        """Names cannot contain digits; the digits form a separate token."""
        tokens = scan("abc12")
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.NAME, "abc"),
            (TokenType.NUMBER, "12"),
        ]

    def test_number_followed_by_paren(self):
        """A closing paren terminates a number."""
        assert kinds("42)") == [TokenType.NUMBER, TokenType.RPAREN]


# =============================================================================
# String Tests
# =============================================================================

class TestStrings:
    """Test string literal recognition."""

    def test_simple_string(self):
        """Quotes are stripped from the token value."""
        tokens = scan('"foo"')
        assert tokens == [Token(TokenType.STRING, "foo", 0)]

    def test_empty_string(self):
        """An empty string literal is a STRING token with empty value."""
        tokens = scan('""')
        assert tokens[0].type == TokenType.STRING
        assert tokens[0].value == ""

    def test_string_keeps_whitespace(self):
        """Whitespace inside a string is preserved."""
        assert scan('"hello  world"')[0].value == "hello  world"

    def test_string_keeps_other_characters(self):
        """Characters invalid elsewhere are fine inside strings."""
        assert scan('"a@b_c-1(2)"')[0].value == "a@b_c-1(2)"

    def test_no_escape_processing(self):
        """Backslashes are copied verbatim."""
        assert scan('"a\\nb"')[0].value == "a\\nb"

    def test_string_spanning_lines(self):
        """Newlines inside a string are copied verbatim."""
        assert scan('"a\nb"')[0].value == "a\nb"

    def test_two_strings(self):
        """Adjacent string literals are separate tokens."""
        tokens = scan('"foo" "bar"')
        assert [t.value for t in tokens] == ["foo", "bar"]

    def test_unterminated_string(self):
        """A string without a closing quote is a lex error."""
        with pytest.raises(UnterminatedStringError) as exc_info:
            scan('(concat "foo)')
        assert exc_info.value.position == 8

    def test_unterminated_string_is_lex_error(self):
        """UnterminatedStringError is a LexError."""
        with pytest.raises(LexError):
            scan('"')


# =============================================================================
# Position Tests
# =============================================================================

class TestPositions:
    """Test token offsets."""

    def test_positions(self):
        """Each token records the offset of its first character."""
        tokens = scan('(add 2 "two")')
        assert [t.position for t in tokens] == [0, 1, 5, 7, 12]

    def test_positions_after_newline(self):
        """Offsets count newlines as single characters."""
        tokens = scan("(a)\n(b)")
        assert [t.position for t in tokens] == [0, 1, 2, 4, 5, 6]


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Test error conditions."""

    def test_invalid_character(self):
        """An unrecognized character raises InvalidCharacterError."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            scan("@")
        assert exc_info.value.char == "@"
        assert exc_info.value.position == 0
        assert "'@'" in str(exc_info.value)

    def test_invalid_character_is_lex_error(self):
        """InvalidCharacterError is a LexError."""
        with pytest.raises(LexError):
            scan("(add 1 #)")

    @pytest.mark.parametrize("char", ["_", "-", "+", ".", "'", "[", ";"])
    def test_characters_outside_token_classes(self, char):
        """Underscores, signs, decimal points and brackets are rejected."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            scan(f"(add {char})")
        assert exc_info.value.char == char
        assert exc_info.value.position == 5

    def test_non_ascii_digit_rejected(self):
        """Only ASCII digits form numbers."""
        with pytest.raises(InvalidCharacterError):
            scan("٣")

    def test_generator_stops_at_error(self):
        """The generator form raises as soon as it reaches the bad character."""
        lexer = Lexer("(add @ 1)")
        tokens = []
        with pytest.raises(InvalidCharacterError):
            for token in lexer.tokenize():
                tokens.append(token)
        assert [t.type for t in tokens] == [TokenType.LPAREN, TokenType.NAME]

    def test_token_repr(self):
        """Token repr shows type, value and offset."""
        assert repr(Token(TokenType.NAME, "add", 1)) == "Token(NAME, 'add', 1)"
