"""Token stream dump for debugging."""

from __future__ import annotations

import sys
from typing import TextIO

from purpledino.tokens import Span, Token, TokenType


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for idx, tok in enumerate(tokens):
        file.write(f"{idx:>4}  {format_token(tok):<24} {_format_span(tok.span)}\n")


def format_token(tok: Token) -> str:
    """Render a token as ``Kind(value)``, or just ``Kind`` for markers."""
    name = _KIND_NAMES[tok.type]
    if tok.value is None:
        return name
    return f"{name}({tok.value!r})"


def _format_span(span: Span) -> str:
    start, end = span.start, span.end
    return f"{start.line}:{start.column}-{end.line}:{end.column}"


_KIND_NAMES = {
    TokenType.OPEN_PAREN: "OpenParen",
    TokenType.CLOSE_PAREN: "CloseParen",
    TokenType.ADD: "Add",
    TokenType.MINUS: "Minus",
    TokenType.MULTIPLY: "Multiply",
    TokenType.DIVIDE: "Divide",
    TokenType.MODULO: "Modulo",
    TokenType.END_STMT: "EndStmt",
    TokenType.DEC: "Dec",
    TokenType.INT: "Int",
    TokenType.STR: "Str",
    TokenType.CHAR: "Char",
    TokenType.VAR: "Var",
    TokenType.NONE: "None",
}
