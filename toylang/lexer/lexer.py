"""
Toy Lexer - turns source text into tokens, one at a time.

The parser drives it: advance() scans the next token, current_token() and
friends look at the one just scanned. Text arrives line by line from a
LineSource, so the lexer never needs the whole input in memory.

xwest
"""

import logging
from typing import Iterator, List

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, PUNCTUATION, WHITESPACE,
    IDENTIFIER_START, IDENTIFIER_CHARS, NUMBER_CHARS, COMMENT_START, COMMENT_END
)
from .errors import (
    Diagnostic, LexerError, create_invalid_character_error, create_invalid_number_error,
    create_token_mismatch_error, create_wrong_token_kind_error
)
from .sources import LineSource, BufferLineSource, IterableLineSource

logger = logging.getLogger(__name__)

# Returned by _next_char() once the line source is drained
EOF_CHAR = ""


class Lexer:
    """
    Toy lexical analyzer.

    Keeps track of the current token, where it started, and the scanning
    position (line and column) for diagnostics. Lines are counted from 1,
    columns from 0.
    """

    def __init__(self, source: LineSource, filename: str = "<unknown>"):
        """
        Initialize the lexer over a line source.

        Args:
            source: Supplier of input text
            filename: Name attached to every SourceLocation
        """
        self.source = source
        self.filename = filename
        self.errors: List[LexerError] = []

        # The buffer starts as a lone newline: consuming it moves the
        # counters onto line 1, column 0 before any real input is read.
        self._buffer = "\n"
        self._buffer_pos = 0
        self._line = 0
        self._column = 0

        # One character of lookahead and the position it was read from
        self._last_char = " "
        self._char_line = 0
        self._char_column = 0

        self._current = Token(TokenType.EOF, "", None, SourceLocation(filename, 0, 0))

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def current_token(self) -> Token:
        """Look at the current token without moving."""
        return self._current

    def advance(self) -> Token:
        """
        Scan the next token and make it current.

        Once the input is exhausted every call returns EOF.

        Raises:
            UnrecognizedCharacterError: character outside the grammar
            InvalidNumberError: digits and dots that are not a number

            In both cases the offending text has been consumed and the
            current token is INVALID; calling advance() again continues
            with the text that follows.
        """
        self._current = self._scan()
        return self._current

    def expect_and_advance(self, expected: TokenType) -> Token:
        """
        Advance past the current token, which must be of type `expected`.

        Raises:
            TokenMismatchError: if it is not. Nothing is consumed.
        """
        if self._current.type != expected:
            raise create_token_mismatch_error(expected, self._current)
        return self.advance()

    def current_identifier(self) -> str:
        """Text of the current identifier token."""
        if self._current.type != TokenType.IDENTIFIER:
            raise create_wrong_token_kind_error(TokenType.IDENTIFIER, self._current)
        return self._current.value

    def current_number(self) -> float:
        """Value of the current number token."""
        if self._current.type != TokenType.NUMBER:
            raise create_wrong_token_kind_error(TokenType.NUMBER, self._current)
        return self._current.value

    def current_location(self) -> SourceLocation:
        """Location of the first character of the current token."""
        return self._current.location

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF. Errors propagate."""
        while True:
            token = self.advance()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Errors don't stop the scan; they are collected in self.errors
        and the offending text is skipped.

        Returns:
            List of tokens ending with the EOF token
        """
        self.errors.clear()
        tokens: List[Token] = []

        while True:
            try:
                token = self.advance()
            except LexerError as e:
                self.errors.append(e)
                continue

            tokens.append(token)
            if token.type == TokenType.EOF:
                break

        return tokens

    def has_errors(self) -> bool:
        """Check if tokenize() ran into any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        return [error.diagnostic for error in self.errors]

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan(self) -> Token:
        """Recognize one token starting at the lookahead character."""
        while True:
            while self._last_char in WHITESPACE:
                self._last_char = self._next_char()

            location = SourceLocation(self.filename, self._char_line, self._char_column)
            char = self._last_char

            # Identifier: [a-zA-Z][a-zA-Z0-9_]*
            if char in IDENTIFIER_START:
                return self._scan_identifier(location)

            # Number: [0-9.]+
            if char in NUMBER_CHARS:
                return self._scan_number(location)

            if char == COMMENT_START:
                # Comment until end of line
                while True:
                    self._last_char = self._next_char()
                    if self._last_char == EOF_CHAR or self._last_char in COMMENT_END:
                        break
                if self._last_char != EOF_CHAR:
                    continue

            # Don't eat the EOF
            if self._last_char == EOF_CHAR:
                return Token(
                    TokenType.EOF, "", None,
                    SourceLocation(self.filename, self._char_line, self._char_column)
                )

            self._last_char = self._next_char()
            token_type = PUNCTUATION.get(char)
            if token_type is None:
                self._current = Token(TokenType.INVALID, char, None, location)
                raise create_invalid_character_error(char, location)
            return Token(token_type, char, None, location)

    def _scan_identifier(self, location: SourceLocation) -> Token:
        chars = [self._last_char]
        self._last_char = self._next_char()
        while self._last_char in IDENTIFIER_CHARS:
            chars.append(self._last_char)
            self._last_char = self._next_char()

        lexeme = "".join(chars)
        token_type = KEYWORDS.get(lexeme)
        if token_type is not None:
            return Token(token_type, lexeme, None, location)
        return Token(TokenType.IDENTIFIER, lexeme, lexeme, location)

    def _scan_number(self, location: SourceLocation) -> Token:
        chars = []
        while self._last_char in NUMBER_CHARS:
            chars.append(self._last_char)
            self._last_char = self._next_char()

        lexeme = "".join(chars)
        try:
            value = float(lexeme)
        except ValueError:
            self._current = Token(TokenType.INVALID, lexeme, None, location)
            raise create_invalid_number_error(lexeme, location) from None

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _next_char(self) -> str:
        """
        Consume one character from the line buffer.

        Fetches the next line from the source as soon as the buffer runs
        dry, so an empty buffer always means end of input.
        """
        self._char_line = self._line
        self._char_column = self._column

        if self._buffer_pos >= len(self._buffer):
            return EOF_CHAR

        self._column += 1
        char = self._buffer[self._buffer_pos]
        self._buffer_pos += 1

        if self._buffer_pos >= len(self._buffer):
            self._buffer = self.source.read_next_line()
            self._buffer_pos = 0
            if not self._buffer:
                logger.debug("%s: end of input after line %d", self.filename, self._line)

        if char == "\n":
            self._line += 1
            self._column = 0

        return char


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(BufferLineSource(source), filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Bytes that are not valid UTF-8 are read as U+FFFD and reported as
    invalid characters.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
        lexer = Lexer(IterableLineSource(f), filepath)
        tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens
