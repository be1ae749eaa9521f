"""
Tests for the generic Cursor used by both lexer and parser.
"""
from __future__ import annotations

import pytest

from gcodetree.core.cursor import Cursor
from gcodetree.core.errors import ErrorKind, GCodeError, LexerError, ParserError


class TestCursorOverCharacters:
    @pytest.fixture
    def cursor(self):
        return Cursor("abc", LexerError)

    def test_current_does_not_advance(self, cursor):
        assert cursor.current == "a"
        assert cursor.current == "a"
        assert cursor.pos == 0

    def test_advance_returns_consumed_element(self, cursor):
        assert cursor.advance() == "a"
        assert cursor.current == "b"

    def test_has_remaining(self, cursor):
        for _ in range(3):
            assert cursor.has_remaining
            cursor.advance()
        assert not cursor.has_remaining

    def test_peek_is_bounded(self, cursor):
        cursor.advance()
        assert cursor.peek() == "c"
        assert cursor.peek(2) is None
        assert cursor.pos == 1

    def test_remaining(self, cursor):
        cursor.advance()
        assert cursor.remaining == ["b", "c"]
        assert cursor.remaining_text() == "bc"

    def test_expect_consumes_match(self, cursor):
        assert cursor.expect("a") == "a"
        assert cursor.pos == 1

    def test_expect_mismatch(self, cursor):
        with pytest.raises(LexerError) as exc_info:
            cursor.expect("x")
        err = exc_info.value
        assert err.kind is ErrorKind.UNEXPECTED_CHARACTER
        assert err.column == 0
        assert err.remaining == "abc"
        assert cursor.pos == 0

    def test_expect_at_end(self, cursor):
        cursor.consume_rest()
        with pytest.raises(LexerError, match="end of input"):
            cursor.expect("a")


class TestCursorOverTokens:
    @pytest.fixture
    def cursor(self):
        return Cursor(["G", "1", "X", "2.5"], ParserError, separator=" ")

    def test_error_is_positioned(self, cursor):
        cursor.advance()
        err = cursor.error(ErrorKind.MALFORMED_NUMBER, "bad")
        assert isinstance(err, ParserError)
        assert isinstance(err, GCodeError)
        assert err.token_index == 1
        assert err.remaining == "1 X 2.5"

    def test_consume_rest(self, cursor):
        cursor.advance()
        assert cursor.consume_rest() == ["1", "X", "2.5"]
        assert not cursor.has_remaining
        assert cursor.remaining == []

    def test_empty_sequence(self):
        cursor = Cursor([], ParserError)
        assert not cursor.has_remaining
        assert cursor.peek(0) is None

    def test_default_error_class(self):
        err = Cursor("x").error(ErrorKind.UNEXPECTED_TOKEN, "nope")
        assert type(err) is GCodeError
        assert "position 0" in str(err)
