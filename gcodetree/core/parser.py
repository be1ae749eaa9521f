"""
G-Code parser: tokens to chunks, blocks and programs.

Every entry point either returns a complete structure or raises a
:class:`~gcodetree.core.errors.GCodeError` naming the failing line and
position. Nothing is printed and nothing is partially built.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .ast_nodes import (
    Address, Block, Chunk, Program,
    make_comment, make_double_address, make_int_address, make_isolated_word,
    make_percent_chunk, WordAddressChunk,
)
from .cursor import Cursor
from .errors import ErrorKind, GCodeError, ParserError
from .lexer import AddressType, get_address_type, is_num_char, lex_block
from .lexer.tokens import BLOCK_DELETE, COMMENT_DELIMITERS, LINE_COMMENT, LINE_NUMBER, PERCENT

logger = logging.getLogger(__name__)


# Leading numeric prefixes accepted for each address type
INTEGER_PATTERN = re.compile(r"-?\d+")
DOUBLE_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


class GCodeParser:
    """
    Parser for the tokens of one block.
    """

    def __init__(self, tokens: Iterable[str]):
        self.cursor: Cursor[str] = Cursor(tokens, ParserError, separator=" ")

    def _read_number(self, pattern: re.Pattern, what: str) -> str:
        if not self.cursor.has_remaining:
            raise self.cursor.error(
                ErrorKind.UNEXPECTED_END_OF_BLOCK,
                f"Expected {what} value, got end of block",
            )
        raw = self.cursor.current
        match = pattern.match(raw)
        if not match:
            raise self.cursor.error(
                ErrorKind.MALFORMED_NUMBER,
                f"Cannot convert '{raw}' to {what}",
            )
        text = match.group(0)
        if text != raw:
            logger.warning("Numeric token %r read as %s %s", raw, what, text)
        self.cursor.advance()
        return text

    def parse_int(self) -> int:
        return int(self._read_number(INTEGER_PATTERN, "integer"))

    def parse_double(self) -> float:
        return float(self._read_number(DOUBLE_PATTERN, "double"))

    def parse_address(self, letter: str) -> Address:
        """Parse the value token following ``letter``; its type comes from the letter."""
        address_type = get_address_type(letter)
        if address_type is AddressType.DOUBLE:
            return make_double_address(self.parse_double())
        if address_type is AddressType.INTEGER:
            return make_int_address(self.parse_int())
        raise ParserError(
            ErrorKind.UNRECOGNIZED_ADDRESS_LETTER,
            f"Unrecognized address letter: '{letter}'",
            self.cursor.pos - 1,
            " ".join([letter, *self.cursor.remaining]),
        )

    def parse_comment(self) -> Chunk:
        """Bracketed or parenthesized comment token, delimiters stripped."""
        raw = self.cursor.advance()
        left = raw[0]
        right = COMMENT_DELIMITERS[left]
        text = raw[1:]
        # An unterminated comment has no closer to strip
        if len(raw) > 1 and raw.endswith(right):
            text = raw[1:-1]
        return make_comment(left, right, text)

    def parse_line_comment(self) -> Chunk:
        """';' comment: every remaining token, concatenated."""
        self.cursor.expect(LINE_COMMENT)
        text = "".join(self.cursor.consume_rest())
        return make_comment(LINE_COMMENT, LINE_COMMENT, text)

    def parse_word(self) -> Chunk:
        """Isolated word, or word address when a numeric token follows."""
        token = self.cursor.current
        if len(token) != 1 or is_num_char(token):
            raise self.cursor.error(
                ErrorKind.UNEXPECTED_TOKEN,
                f"Expected a word letter, got '{token}'",
            )

        next_token = self.cursor.peek()
        if next_token is None or not is_num_char(next_token[0]):
            return make_isolated_word(self.cursor.advance())

        letter = self.cursor.advance()
        return WordAddressChunk(letter, self.parse_address(letter))

    def parse_chunk(self) -> Chunk:
        """Parse one chunk at the cursor."""
        token = self.cursor.current
        if token[0] in COMMENT_DELIMITERS:
            return self.parse_comment()
        if token == PERCENT:
            self.cursor.advance()
            return make_percent_chunk()
        if token == LINE_COMMENT:
            return self.parse_line_comment()
        return self.parse_word()

    def parse_slash(self) -> bool:
        if self.cursor.has_remaining and self.cursor.current == BLOCK_DELETE:
            self.cursor.advance()
            return True
        return False

    def parse_line_number(self) -> int | None:
        if self.cursor.has_remaining and self.cursor.current == LINE_NUMBER:
            self.cursor.expect(LINE_NUMBER)
            return self.parse_int()
        return None

    def parse_block(self) -> Block:
        """Parse all tokens into a single block."""
        if not self.cursor.has_remaining:
            return Block()

        deleted = self.parse_slash()
        line_number = self.parse_line_number()

        chunks: list[Chunk] = []
        while self.cursor.has_remaining:
            chunks.append(self.parse_chunk())

        return Block(chunks=chunks, line_number=line_number, deleted=deleted)


# ============================================================================
# Convenience functions
# ============================================================================

def parse_tokens(tokens: Iterable[str]) -> Block:
    """Assemble the tokens of one line into a Block."""
    return GCodeParser(tokens).parse_block()


def parse_block(block_text: str) -> Block:
    """Lex and parse one line of G-code."""
    return parse_tokens(lex_block(block_text))


def _split_lines(text: str) -> Iterable[tuple[int, str]]:
    """Yield (line number, line) for every non-empty physical line."""
    for idx, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            yield idx, line


def _parse_blocks(text: str) -> list[Block]:
    blocks: list[Block] = []
    for idx, line in _split_lines(text):
        try:
            blocks.append(parse_block(line))
        except GCodeError as exc:
            exc.line = idx
            raise
    logger.debug("Parsed %d blocks", len(blocks))
    return blocks


def parse_program(text: str) -> Program:
    """Parse a multi-line G-code program."""
    return Program(_parse_blocks(text))


def parse_program_with_debug_text(text: str) -> Program:
    """Like parse_program, with every block's rendering stored as debug text."""
    blocks = _parse_blocks(text)
    for block in blocks:
        block.set_debug_text()
    return Program(blocks)
