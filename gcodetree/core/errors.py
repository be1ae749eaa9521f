"""
Error types raised by the G-code lexer and parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """What went wrong while lexing or parsing a block."""

    UNEXPECTED_CHARACTER = auto()          # expected literal not at cursor
    UNRECOGNIZED_ADDRESS_LETTER = auto()   # letter in neither typing table
    MALFORMED_NUMBER = auto()              # numeric token not convertible
    UNEXPECTED_CLOSING_DELIMITER = auto()  # ')' or ']' with no opener
    UNEXPECTED_END_OF_BLOCK = auto()       # value expected, tokens exhausted
    UNEXPECTED_TOKEN = auto()              # token cannot start a chunk


@dataclass
class GCodeError(Exception):
    """
    Base error with position information.

    ``position`` is a column for lexer errors and a token index for parser
    errors. ``line`` is the 1-based physical line and is filled in by the
    program assembler; it stays None when a single block is parsed.
    """
    kind: ErrorKind
    message: str
    position: int
    remaining: str = ""
    line: Optional[int] = None

    _where = "position"

    def __str__(self) -> str:
        where = f"L{self.line}, " if self.line is not None else ""
        text = f"{where}{self._where} {self.position}: {self.message} [{self.kind.name}]"
        if self.remaining:
            text += f" (remaining: {self.remaining!r})"
        return text


@dataclass
class LexerError(GCodeError):
    """Error raised while splitting a line into tokens."""

    _where = "column"

    @property
    def column(self) -> int:
        return self.position


@dataclass
class ParserError(GCodeError):
    """Error raised while turning tokens into chunks and blocks."""

    _where = "token"

    @property
    def token_index(self) -> int:
        return self.position
