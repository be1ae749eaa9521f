"""
AST (Abstract Syntax Tree) nodes for parsed G-code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator, Optional, Union

from .lexer.tokens import AddressType


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor."""
        pass

    def to_string(self) -> str:
        """Canonical G-code text for this node."""
        from .formatter import GCodeFormatter
        return self.accept(GCodeFormatter())

    def __str__(self) -> str:
        return self.to_string()


class ASTVisitor(ABC):
    """
    Base class for AST visitors.

    Every node kind has an abstract ``visit_*`` method, so a visitor that
    misses a chunk variant cannot be instantiated.
    """

    @abstractmethod
    def visit_program(self, node: Program) -> Any: ...

    @abstractmethod
    def visit_block(self, node: Block) -> Any: ...

    @abstractmethod
    def visit_comment(self, node: CommentChunk) -> Any: ...

    @abstractmethod
    def visit_word_address(self, node: WordAddressChunk) -> Any: ...

    @abstractmethod
    def visit_percent(self, node: PercentChunk) -> Any: ...

    @abstractmethod
    def visit_word(self, node: WordChunk) -> Any: ...


# ============================================================================
# Address
# ============================================================================

class AddressTypeError(TypeError):
    """Raised when an address is read as the wrong variant."""


@dataclass(frozen=True)
class Address:
    """Numeric payload of a word: an int or a float, tagged by ``type``."""
    type: AddressType
    value: Union[int, float]

    @property
    def is_integer(self) -> bool:
        return self.type is AddressType.INTEGER

    @property
    def is_double(self) -> bool:
        return self.type is AddressType.DOUBLE

    def int_value(self) -> int:
        if not self.is_integer:
            raise AddressTypeError(f"Address {self.value!r} is {self.type.name}, not INTEGER")
        return self.value

    def double_value(self) -> float:
        if not self.is_double:
            raise AddressTypeError(f"Address {self.value!r} is {self.type.name}, not DOUBLE")
        return self.value


def make_int_address(i: int) -> Address:
    return Address(AddressType.INTEGER, int(i))


def make_double_address(d: float) -> Address:
    return Address(AddressType.DOUBLE, float(d))


# ============================================================================
# Chunks
# ============================================================================

class ChunkType(Enum):
    """The closed set of chunk variants."""
    COMMENT = auto()
    WORD_ADDRESS = auto()
    PERCENT = auto()
    WORD = auto()


class Chunk(ASTNode):
    """One atomic element of a block."""

    chunk_type: ChunkType


@dataclass(frozen=True)
class CommentChunk(Chunk):
    """Comment: ``(text)``, ``[text]`` or ``;text`` to end of line."""
    left_delim: str
    right_delim: str
    text: str

    chunk_type = ChunkType.COMMENT

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_comment(self)


@dataclass(frozen=True)
class WordAddressChunk(Chunk):
    """Letter with a numeric value, e.g. X10.5 or G1."""
    letter: str
    address: Address

    chunk_type = ChunkType.WORD_ADDRESS

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_word_address(self)


@dataclass(frozen=True)
class PercentChunk(Chunk):
    """The ``%`` program boundary marker."""

    chunk_type = ChunkType.PERCENT

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_percent(self)


@dataclass(frozen=True)
class WordChunk(Chunk):
    """A single character with no value."""
    word: str

    chunk_type = ChunkType.WORD

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_word(self)


def make_comment(left_delim: str, right_delim: str, text: str) -> CommentChunk:
    return CommentChunk(left_delim, right_delim, text)


def make_word_int(letter: str, i: int) -> WordAddressChunk:
    return WordAddressChunk(letter, make_int_address(i))


def make_word_double(letter: str, d: float) -> WordAddressChunk:
    return WordAddressChunk(letter, make_double_address(d))


def make_percent_chunk() -> PercentChunk:
    return PercentChunk()


def make_isolated_word(c: str) -> WordChunk:
    return WordChunk(c)


# ============================================================================
# Program Structure
# ============================================================================

@dataclass
class Block(ASTNode):
    """
    A single block (line) of G-code.

    ``debug_text`` is a diagnostic annotation and does not take part in
    equality.
    """
    chunks: list[Chunk] = field(default_factory=list)
    line_number: Optional[int] = None
    deleted: bool = False
    debug_text: Optional[str] = field(default=None, compare=False)

    @property
    def has_line_number(self) -> bool:
        return self.line_number is not None

    def set_debug_text(self, text: Optional[str] = None) -> None:
        """Attach ``text``, or this block's canonical rendering."""
        self.debug_text = self.to_string() if text is None else text

    def __len__(self) -> int:
        return len(self.chunks)

    def __getitem__(self, i: int) -> Chunk:
        return self.chunks[i]

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_block(self)


@dataclass
class Program(ASTNode):
    """Root node: blocks in source line order (blank lines omitted)."""
    blocks: list[Block] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, i: int) -> Block:
        return self.blocks[i]

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_program(self)
