"""
Toy Language Front End

Lexical analysis for the Toy language, a small expression-oriented
language with functions, variables and tensor literals.

Architecture:
    toylang/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # toylex command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, SourceLocation, LexerError

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
