"""
Tests for the line sources that feed the lexer.

Author: xwest
"""

import io
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from toylang.lexer.sources import LineSource, BufferLineSource, IterableLineSource
from toylang.lexer.lexer import Lexer
from toylang.lexer.tokens import TokenType


def drain(source: LineSource):
    lines = []
    while True:
        line = source.read_next_line()
        if not line:
            return lines
        lines.append(line)


class TestBufferLineSource(unittest.TestCase):

    def test_lines_keep_newlines(self):
        source = BufferLineSource("def a\nvar b\n")
        self.assertEqual(drain(source), ["def a\n", "var b\n"])

    def test_last_line_without_newline(self):
        source = BufferLineSource("one\ntwo")
        self.assertEqual(drain(source), ["one\n", "two"])

    def test_blank_lines(self):
        source = BufferLineSource("\n\nx\n")
        self.assertEqual(drain(source), ["\n", "\n", "x\n"])

    def test_empty_buffer(self):
        self.assertEqual(BufferLineSource("").read_next_line(), "")

    def test_stays_exhausted(self):
        source = BufferLineSource("x")
        drain(source)
        self.assertEqual(source.read_next_line(), "")
        self.assertEqual(source.read_next_line(), "")

    def test_nul_ends_input(self):
        source = BufferLineSource("var a;\nvar b;\0var c;\n")
        self.assertEqual(drain(source), ["var a;\n", "var b;"])


class TestIterableLineSource(unittest.TestCase):

    def test_list_of_chunks(self):
        source = IterableLineSource(["a", "b\n", "c"])
        self.assertEqual(drain(source), ["a", "b\n", "c"])

    def test_empty_chunks_are_skipped(self):
        source = IterableLineSource(["", "x", "", "", "y", ""])
        self.assertEqual(drain(source), ["x", "y"])

    def test_text_stream(self):
        stream = io.StringIO("def main() {\n  return 1;\n}\n")
        lexer = Lexer(IterableLineSource(stream), "<stream>")
        tokens = lexer.tokenize()
        self.assertFalse(lexer.has_errors())
        self.assertEqual(tokens[0].type, TokenType.DEF)
        self.assertEqual(tokens[-2].type, TokenType.RIGHT_BRACE)
        self.assertEqual(tokens[-2].location.line, 3)

    def test_stays_exhausted(self):
        source = IterableLineSource(iter(["only"]))
        self.assertEqual(source.read_next_line(), "only")
        self.assertEqual(source.read_next_line(), "")
        self.assertEqual(source.read_next_line(), "")


class TestCustomLineSource(unittest.TestCase):

    def test_subclass(self):
        class CountingSource(LineSource):
            def __init__(self):
                self.calls = 0

            def read_next_line(self):
                self.calls += 1
                return "x\n" if self.calls <= 3 else ""

        source = CountingSource()
        tokens = Lexer(source).tokenize()
        self.assertEqual([t.type for t in tokens],
                         [TokenType.IDENTIFIER] * 3 + [TokenType.EOF])
        self.assertEqual(source.calls, 4)

    def test_abstract(self):
        with self.assertRaises(TypeError):
            LineSource()


if __name__ == '__main__':
    unittest.main()
