"""
Canonical G-code rendering of AST nodes.
"""

from __future__ import annotations

import numpy as np

from .ast_nodes import (
    Address, ASTVisitor, Block, CommentChunk, PercentChunk, Program,
    WordAddressChunk, WordChunk,
)
from .lexer.tokens import BLOCK_DELETE, LINE_NUMBER, PERCENT


def format_address(address: Address) -> str:
    """
    Integers print in decimal. Doubles print as the shortest positional
    string that reads back to the same float: 1.0 -> "1", 1e-05 -> "0.00001".
    """
    if address.is_integer:
        return str(address.int_value())
    return np.format_float_positional(address.double_value(), trim="-")


class GCodeFormatter(ASTVisitor):
    """Visitor that renders any node back to G-code text."""

    def visit_program(self, node: Program) -> str:
        return "".join(f"{block.accept(self)}\n" for block in node)

    def visit_block(self, node: Block) -> str:
        parts = []
        if node.has_line_number:
            parts.append(f"{LINE_NUMBER}{node.line_number}")
        parts.extend(chunk.accept(self) for chunk in node)
        text = " ".join(parts)
        if node.deleted:
            text = BLOCK_DELETE + text
        return text

    def visit_comment(self, node: CommentChunk) -> str:
        return f"{node.left_delim}{node.text}{node.right_delim}"

    def visit_word_address(self, node: WordAddressChunk) -> str:
        return f"{node.letter}{format_address(node.address)}"

    def visit_percent(self, node: PercentChunk) -> str:
        return PERCENT

    def visit_word(self, node: WordChunk) -> str:
        return node.word
