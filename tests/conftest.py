"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from purpledino.scanner import Scanner, tokenize
from purpledino.tokens import Position, Span, Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the full token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def seeded():
    """Return a helper that scans source starting from a given accumulator."""

    def _seeded(source: str, tt: TokenType, value: int | float | str | None) -> list[Token]:
        scanner = Scanner(source)
        pos = Position(1, 1, 0)
        scanner._current = Token(tt, value, Span(pos, pos))
        return scanner.tokenize()

    return _seeded


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
