"""
G-Code Lexer module: block text to string tokens.
"""

from .tokens import (
    AddressType,
    ADDRESS_TYPES,
    DOUBLE_ADDRESS_LETTERS,
    INTEGER_ADDRESS_LETTERS,
    NUMERIC_CHARS,
    get_address_type,
    is_num_char,
)
from .lexer import (
    GCodeLexer,
    lex_block,
)

__all__ = [
    # Tables
    "AddressType",
    "ADDRESS_TYPES",
    "DOUBLE_ADDRESS_LETTERS",
    "INTEGER_ADDRESS_LETTERS",
    "NUMERIC_CHARS",
    "get_address_type",
    "is_num_char",
    # Lexer
    "GCodeLexer",
    "lex_block",
]
