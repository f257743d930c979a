"""purpledino expression language tokenizer."""

from __future__ import annotations

from purpledino.errors import (
    InvalidTokenError,
    LexError,
    UnhandledCharacterError,
    UnterminatedProgramError,
)
from purpledino.scanner import Scanner, tokenize
from purpledino.tokens import Position, Span, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "InvalidTokenError",
    "LexError",
    "Position",
    "Scanner",
    "Span",
    "Token",
    "TokenType",
    "UnhandledCharacterError",
    "UnterminatedProgramError",
    "tokenize",
]
