"""
Toy Lexer Package

Implements the lexical analyzer (tokenizer) for the Toy language.

Key Features:
- Pull-based scanning: the parser asks for one token at a time
- Pluggable line sources (in-memory buffer, files, stdin)
- Source location tracking on every token
- Typed, recoverable errors with diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .sources import LineSource, BufferLineSource, IterableLineSource
from .errors import (
    Diagnostic,
    LexerError,
    UnrecognizedCharacterError,
    InvalidNumberError,
    TokenMismatchError,
    WrongTokenKindError,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LineSource",
    "BufferLineSource",
    "IterableLineSource",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "UnrecognizedCharacterError",
    "InvalidNumberError",
    "TokenMismatchError",
    "WrongTokenKindError",
]
