"""
Token definitions for the Toy lexer.

The Toy language only knows a handful of token kinds:
- Keywords (return, var, def)
- Identifiers and decimal number literals
- Single-character punctuation
- End of input

Author: xwest
"""

import string
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Toy.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Keywords
    # ========================================================================
    RETURN = auto()                 # return
    VAR = auto()                    # var
    DEF = auto()                    # def

    # ========================================================================
    # Primary
    # ========================================================================
    IDENTIFIER = auto()             # foo, x_1
    NUMBER = auto()                 # 42, 3.14, .5

    # ========================================================================
    # Punctuation
    # ========================================================================
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]

    # ========================================================================
    # Error and Recovery Tokens
    # ========================================================================
    INVALID = auto()                # Unrecognized character or malformed number

    @property
    def debug_name(self) -> str:
        """Name used in token dumps, e.g. ``tok_parenthese_open``."""
        return DEBUG_NAMES[self]


@dataclass(frozen=True)
class SourceLocation:
    """
    Position of the first character of a token.

    Lines are 1-based, columns are 0-based.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token in the Toy language.

    ``value`` depends on ``type``: the identifier text for IDENTIFIER,
    the parsed float for NUMBER, None for everything else.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Optional[Union[str, float]]
    location: SourceLocation

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "EOF"
        if self.type == TokenType.NUMBER:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_punctuation(self) -> bool:
        return self.type in PUNCTUATION.values()


# Lookup tables used by the lexer

KEYWORDS = {
    "return": TokenType.RETURN,
    "var": TokenType.VAR,
    "def": TokenType.DEF,
}

PUNCTUATION = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
}

# Character classes. The end-of-input marker "" is a member of none.
WHITESPACE = frozenset(" \t\n\r")
IDENTIFIER_START = frozenset(string.ascii_letters)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")
NUMBER_CHARS = frozenset(string.digits + ".")
COMMENT_START = "#"
COMMENT_END = frozenset("\n\r")

DEBUG_NAMES = {
    TokenType.SEMICOLON: "tok_semicolon",
    TokenType.LEFT_PAREN: "tok_parenthese_open",
    TokenType.RIGHT_PAREN: "tok_parenthese_close",
    TokenType.LEFT_BRACE: "tok_bracket_open",
    TokenType.RIGHT_BRACE: "tok_bracket_close",
    TokenType.LEFT_BRACKET: "tok_sbracket_open",
    TokenType.RIGHT_BRACKET: "tok_sbracket_close",
    TokenType.EOF: "tok_eof",
    TokenType.RETURN: "tok_return",
    TokenType.VAR: "tok_var",
    TokenType.DEF: "tok_def",
    TokenType.IDENTIFIER: "tok_identifier",
    TokenType.NUMBER: "tok_number",
    TokenType.INVALID: "tok_invalid",
}
