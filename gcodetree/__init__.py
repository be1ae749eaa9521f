"""
gcodetree
=========

Parse G-code program text into a typed tree of blocks and chunks.

Quick start
-----------
>>> from gcodetree import parse_program
>>> program = parse_program("N10 G0 X10.5 Y-3.2 (rapid)\n")
>>> block = program[0]
>>> block.line_number, len(block)
(10, 4)
>>> print(block)
N10 G0 X10.5 Y-3.2 (rapid)
"""

import logging

from .core import (
    Address,
    AddressType,
    Block,
    Chunk,
    ChunkType,
    CommentChunk,
    ErrorKind,
    GCodeError,
    LexerError,
    ParserError,
    PercentChunk,
    Program,
    WordAddressChunk,
    WordChunk,
    lex_block,
    parse_block,
    parse_program,
    parse_program_with_debug_text,
)

__version__ = "0.1.0"
__all__ = [
    "Address",
    "AddressType",
    "Block",
    "Chunk",
    "ChunkType",
    "CommentChunk",
    "ErrorKind",
    "GCodeError",
    "LexerError",
    "ParserError",
    "PercentChunk",
    "Program",
    "WordAddressChunk",
    "WordChunk",
    "lex_block",
    "parse_block",
    "parse_program",
    "parse_program_with_debug_text",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
