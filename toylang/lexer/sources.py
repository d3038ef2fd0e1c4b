"""
Line sources feeding the Toy lexer.

The lexer never reads text itself. It pulls one chunk at a time from a
LineSource; an empty chunk means there is nothing left.

Author: xwest
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class LineSource(ABC):
    """Supplies successive chunks of source text to a Lexer."""

    @abstractmethod
    def read_next_line(self) -> str:
        """
        Return the next chunk of text.

        Returns an empty string once the input is exhausted, and on every
        call after that.
        """


class BufferLineSource(LineSource):
    """
    Line source over an in-memory string.

    Hands out one line per call, each keeping its trailing newline. A NUL
    character ends the buffer early.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

        nul = text.find('\0')
        self.end = len(text) if nul < 0 else nul

    def read_next_line(self) -> str:
        if self.pos >= self.end:
            return ""

        newline = self.text.find('\n', self.pos, self.end)
        stop = self.end if newline < 0 else newline + 1

        line = self.text[self.pos:stop]
        self.pos = stop
        return line


class IterableLineSource(LineSource):
    """
    Line source over any iterable of strings.

    Works with open text files, sys.stdin or plain lists. Empty strings
    coming from the iterable are skipped, since an empty chunk would
    otherwise read as end of input.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._exhausted = False

    def read_next_line(self) -> str:
        if self._exhausted:
            return ""

        for line in self._lines:
            if line:
                return line

        logger.debug("line source exhausted")
        self._exhausted = True
        return ""
