"""
G-Code Lexer: splits one block (line) of G-code into string tokens.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..cursor import Cursor
from ..errors import ErrorKind, LexerError
from .tokens import CLOSING_DELIMITERS, COMMENT_DELIMITERS, is_num_char

logger = logging.getLogger(__name__)


class GCodeLexer:
    """
    Block-level G-code lexer.

    Produces whitespace-free string tokens: numeric runs, balanced
    ``(...)`` / ``[...]`` comments and single characters. No letter or
    number interpretation happens here.
    """

    def __init__(self, text: str):
        self.text = text
        self.cursor: Cursor[str] = Cursor(text, LexerError)

    @property
    def column(self) -> int:
        return self.cursor.pos

    def skip_whitespace(self) -> None:
        """Skip spaces, tabs, carriage returns and other whitespace."""
        while self.cursor.has_remaining and self.cursor.current.isspace():
            self.cursor.advance()

    def read_number(self) -> str:
        """Read a maximal run of digit / '.' / '-' characters."""
        chars = []
        while self.cursor.has_remaining and is_num_char(self.cursor.current):
            chars.append(self.cursor.advance())
        return "".join(chars)

    def read_delimited(self, open_char: str, close_char: str) -> str:
        """Read a nested, balanced comment including both delimiters."""
        start = self.column
        chars = [self.cursor.expect(open_char)]
        depth = 1

        while self.cursor.has_remaining and depth > 0:
            char = self.cursor.advance()
            if char == open_char:
                depth += 1
            elif char == close_char:
                depth -= 1
            chars.append(char)

        raw = "".join(chars)
        if depth > 0:
            logger.warning(
                "Unterminated %r comment at column %d: %r", open_char, start, raw
            )
        return raw

    def next_token(self) -> str:
        """Read the token at the cursor; whitespace must already be skipped."""
        char = self.cursor.current

        if is_num_char(char):
            return self.read_number()

        if char in COMMENT_DELIMITERS:
            return self.read_delimited(char, COMMENT_DELIMITERS[char])

        if char in CLOSING_DELIMITERS:
            raise self.cursor.error(
                ErrorKind.UNEXPECTED_CLOSING_DELIMITER,
                f"Unexpected closing delimiter: '{char}'",
            )

        return self.cursor.advance()

    def tokenize(self) -> list[str]:
        """Tokenize the whole block and return the token list."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        """Iterate over tokens."""
        while True:
            self.skip_whitespace()
            if not self.cursor.has_remaining:
                break
            yield self.next_token()


def lex_block(block_text: str) -> list[str]:
    """Convenience function to tokenize one line of G-code."""
    lexer = GCodeLexer(block_text)
    return lexer.tokenize()
