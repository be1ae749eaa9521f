"""
Generic scanning cursor shared by the lexer (characters) and the parser (tokens).
"""

from __future__ import annotations

from typing import Generic, Iterable, Optional, Sequence, TypeVar

from .errors import ErrorKind, GCodeError

T = TypeVar("T")


class Cursor(Generic[T]):
    """
    Position over an ordered sequence of elements.

    ``current`` does not check bounds; callers test ``has_remaining`` first.
    Errors built through :meth:`error` carry the cursor position and the
    unconsumed elements, joined with ``separator``.
    """

    def __init__(
        self,
        elements: Iterable[T],
        error_cls: type[GCodeError] = GCodeError,
        separator: str = "",
    ):
        self.elements: Sequence[T] = list(elements)
        self.pos = 0
        self.error_cls = error_cls
        self.separator = separator

    @property
    def has_remaining(self) -> bool:
        """True while unconsumed elements are left."""
        return self.pos < len(self.elements)

    @property
    def current(self) -> T:
        """Current element (no advance)."""
        return self.elements[self.pos]

    def peek(self, offset: int = 1) -> Optional[T]:
        """Element ``offset`` places ahead, or None past the end."""
        idx = self.pos + offset
        if idx >= len(self.elements):
            return None
        return self.elements[idx]

    def advance(self) -> T:
        """Consume and return the current element."""
        element = self.current
        self.pos += 1
        return element

    def consume_rest(self) -> list[T]:
        """Consume and return every remaining element."""
        rest = self.remaining
        self.pos = len(self.elements)
        return rest

    @property
    def remaining(self) -> list[T]:
        """Unconsumed elements from the current position."""
        return list(self.elements[self.pos:])

    def remaining_text(self) -> str:
        return self.separator.join(str(e) for e in self.remaining)

    def expect(self, element: T) -> T:
        """Consume ``element`` or raise an unexpected-character error."""
        if not self.has_remaining or self.current != element:
            found = repr(self.current) if self.has_remaining else "end of input"
            raise self.error(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Expected {element!r}, got {found}",
            )
        return self.advance()

    def error(self, kind: ErrorKind, message: str) -> GCodeError:
        """Build (not raise) an error positioned at the cursor."""
        return self.error_cls(kind, message, self.pos, self.remaining_text())

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, remaining={self.remaining!r})"
