"""
G-code character classes and address typing tables.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional


class AddressType(Enum):
    """Numeric type carried by a word address."""
    INTEGER = auto()
    DOUBLE = auto()


# Characters that may start or continue a numeric token
NUMERIC_CHARS = frozenset("0123456789.-")

# Balanced comment delimiters kept as a single token by the lexer
COMMENT_DELIMITERS: dict[str, str] = {
    "(": ")",
    "[": "]",
}
CLOSING_DELIMITERS = frozenset(COMMENT_DELIMITERS.values())

LINE_COMMENT = ";"
PERCENT = "%"
BLOCK_DELETE = "/"
LINE_NUMBER = "N"

# Axes, arc offsets, feed, spindle, extrusion, ...
DOUBLE_ADDRESS_LETTERS = frozenset("XYZABCUVWIJKFRQSE")

# Modal codes, offsets, tool, line/program numbers, ...
INTEGER_ADDRESS_LETTERS = frozenset("GHMNOTPDL")


# Address letter (upper case) to value type mapping
ADDRESS_TYPES: dict[str, AddressType] = {
    **{letter: AddressType.DOUBLE for letter in DOUBLE_ADDRESS_LETTERS},
    **{letter: AddressType.INTEGER for letter in INTEGER_ADDRESS_LETTERS},
}


def is_num_char(char: str) -> bool:
    """True for characters that belong to a numeric token."""
    return char in NUMERIC_CHARS


def get_address_type(letter: str) -> Optional[AddressType]:
    """Get the value type for an address letter (case-insensitive)."""
    return ADDRESS_TYPES.get(letter.upper())
