#!/usr/bin/env python3
"""
toylex - dump the token stream of a Toy source file.

Prints one token per line followed by any lexer diagnostics. Exit status
is 0 on a clean scan, 1 if the lexer reported errors and 2 if the input
could not be read.
"""

import argparse
import json
import logging
import math
import sys
from typing import List, Optional

from .lexer import Lexer, IterableLineSource, Token, TokenType


def format_token(token: Token, debug_names: bool = False) -> str:
    kind = token.type.debug_name if debug_names else token.type.name
    line = f"{token.location}\t{kind}"
    if token.type == TokenType.NUMBER:
        line += f"\t{token.value!r}"
    elif token.type != TokenType.EOF:
        line += f"\t{token.lexeme}"
    return line


def token_to_dict(token: Token) -> dict:
    value = token.value
    # JSON has no inf; overflowing literals are written as strings
    if isinstance(value, float) and not math.isfinite(value):
        value = str(value)
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "value": value,
        "line": token.location.line,
        "column": token.location.column,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for toylex"""

    parser = argparse.ArgumentParser(
        prog="toylex",
        description="Tokenize Toy source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  toylex example.toy              # Dump tokens of a file
  cat example.toy | toylex -      # Read from standard input
  toylex --json example.toy       # One JSON object per token
        """
    )

    parser.add_argument('input', nargs='?', default='-',
                        help="Source file, or '-' for standard input (default)")
    parser.add_argument('--debug-names', action='store_true',
                        help='Print tok_* style token names')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON lines format')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.input == '-':
        tokens, lexer = _run(sys.stdin, "<stdin>")
    else:
        try:
            with open(args.input, 'r', encoding='utf-8', errors='replace') as f:
                tokens, lexer = _run(f, args.input)
        except OSError as e:
            print(f"toylex: cannot read {args.input}: {e.strerror}", file=sys.stderr)
            return 2

    for token in tokens:
        if args.json:
            print(json.dumps(token_to_dict(token), allow_nan=False))
        else:
            print(format_token(token, args.debug_names))

    for diagnostic in lexer.get_diagnostics():
        print(diagnostic, end="", file=sys.stderr)

    return 1 if lexer.has_errors() else 0


def _run(stream, filename: str):
    lexer = Lexer(IterableLineSource(stream), filename)
    return lexer.tokenize(), lexer


if __name__ == "__main__":
    sys.exit(main())
