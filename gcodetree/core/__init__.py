from gcodetree.core.ast_nodes import (
    Address,
    AddressTypeError,
    ASTVisitor,
    Block,
    Chunk,
    ChunkType,
    CommentChunk,
    PercentChunk,
    Program,
    WordAddressChunk,
    WordChunk,
    make_comment,
    make_double_address,
    make_int_address,
    make_isolated_word,
    make_percent_chunk,
    make_word_double,
    make_word_int,
)
from gcodetree.core.errors import ErrorKind, GCodeError, LexerError, ParserError
from gcodetree.core.formatter import GCodeFormatter
from gcodetree.core.lexer import AddressType, GCodeLexer, lex_block
from gcodetree.core.parser import (
    GCodeParser,
    parse_block,
    parse_program,
    parse_program_with_debug_text,
    parse_tokens,
)

__all__ = [
    "Address",
    "AddressType",
    "AddressTypeError",
    "ASTVisitor",
    "Block",
    "Chunk",
    "ChunkType",
    "CommentChunk",
    "PercentChunk",
    "Program",
    "WordAddressChunk",
    "WordChunk",
    "make_comment",
    "make_double_address",
    "make_int_address",
    "make_isolated_word",
    "make_percent_chunk",
    "make_word_double",
    "make_word_int",
    "ErrorKind",
    "GCodeError",
    "LexerError",
    "ParserError",
    "GCodeFormatter",
    "GCodeLexer",
    "lex_block",
    "GCodeParser",
    "parse_block",
    "parse_program",
    "parse_program_with_debug_text",
    "parse_tokens",
]
