"""
Error handling for the Toy lexer.

Every error carries a Diagnostic with the source location of the token
involved, so the parser can report it instead of aborting.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, Token, TokenType, PUNCTUATION


@dataclass
class Diagnostic:
    """Diagnostic attached to every lexer error."""
    message: str
    location: SourceLocation
    severity: str  # "error"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Base exception for everything the lexer reports.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedCharacterError(LexerError):
    """A character outside the Toy grammar was found in the input."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(f"Invalid character: '{char}'", location, **kwargs)
        self.char = char


class InvalidNumberError(LexerError):
    """A run of digits and dots that does not parse as a decimal number."""

    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        super().__init__(f"Invalid numeric literal: '{lexeme}'", location, **kwargs)
        self.lexeme = lexeme


class TokenMismatchError(LexerError):
    """The caller expected a different token than the current one."""

    def __init__(self, expected: TokenType, actual: Token, **kwargs):
        super().__init__(
            f"Expected {expected.debug_name}, found {actual.type.debug_name}",
            actual.location,
            **kwargs
        )
        self.expected = expected
        self.actual = actual


class WrongTokenKindError(LexerError):
    """The caller asked for a payload the current token does not carry."""

    def __init__(self, requested: TokenType, actual: Token, **kwargs):
        super().__init__(
            f"Current token is {actual.type.debug_name}, not {requested.debug_name}",
            actual.location,
            **kwargs
        )
        self.requested = requested
        self.actual = actual


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L003": "Invalid numeric literal",
    "L101": "Unexpected token",
    "L102": "Wrong token kind for accessor",
}


# Helper functions for creating common errors
def create_invalid_character_error(char: str, location: SourceLocation) -> UnrecognizedCharacterError:
    """Create an error for an invalid character."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Toy source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnrecognizedCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation) -> InvalidNumberError:
    """Create an error for a malformed numeric literal."""
    if lexeme.count('.') > 1:
        reason = "A number literal may contain at most one decimal point."
    else:
        reason = "A number literal needs at least one digit."

    return InvalidNumberError(
        lexeme,
        location,
        code="L003",
        help_text=reason,
    )


def create_token_mismatch_error(expected: TokenType, actual: Token) -> TokenMismatchError:
    """Create an error for a failed expect_and_advance()."""
    suggestions = None
    if expected in (TokenType.SEMICOLON, TokenType.RIGHT_PAREN,
                    TokenType.RIGHT_BRACE, TokenType.RIGHT_BRACKET):
        suggestions = [f"Insert a missing '{_PUNCTUATION_CHARS[expected]}'"]

    return TokenMismatchError(expected, actual, code="L101", suggestions=suggestions)


def create_wrong_token_kind_error(requested: TokenType, actual: Token) -> WrongTokenKindError:
    """Create an error for reading the wrong payload off the current token."""
    return WrongTokenKindError(
        requested,
        actual,
        code="L102",
        help_text=f"Check current_token().type before reading the {requested.name.lower()} value.",
    )


_PUNCTUATION_CHARS = {token_type: char for char, token_type in PUNCTUATION.items()}
