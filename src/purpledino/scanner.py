"""purpledino scanner — converts source text into a flat token list."""

from __future__ import annotations

import logging

from purpledino.errors import (
    InvalidTokenError,
    LexError,
    UnhandledCharacterError,
    UnterminatedProgramError,
)
from purpledino.tokens import (
    TERMINATOR,
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_terminator,
    wrap_int64,
)

logger = logging.getLogger(__name__)

# Accumulators that are committed when a digit starts a new INT.
_COMMIT_BEFORE_INT = frozenset(
    {
        TokenType.OPEN_PAREN,
        TokenType.ADD,
        TokenType.MINUS,
        TokenType.MULTIPLY,
        TokenType.DIVIDE,
        TokenType.MODULO,
        TokenType.END_STMT,
    }
)


class Scanner:
    """Tokenize source text one character at a time, without lookahead.

    The scanner keeps a single accumulator, the token under construction.
    Digits merge into it; the statement terminator commits it to the output
    and resets it to NONE. Anything else is a fatal error.
    """

    def __init__(self, source: str, filename: str = "input.pd") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []
        self._current = self._none_token()

    def tokenize(self) -> list[Token]:
        """Scan the full source and return the token list."""
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if is_terminator(ch):
                self._lex_terminator()
            elif is_digit(ch):
                self._lex_digit()
            else:
                raise UnhandledCharacterError(
                    ch, self._current_pos(), self._source, self._filename
                )

        if self._current.type != TokenType.NONE:
            raise self._error(
                UnterminatedProgramError,
                f"missing terminator {TERMINATOR!r} after {self._current.type.name} token",
            )

        self._tokens.append(self._current)
        logger.debug("finished %s: %d tokens", self._filename, len(self._tokens))
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _error(
        self, cls: type[LexError], message: str, pos: Position | None = None
    ) -> LexError:
        if pos is None:
            pos = self._current_pos()
        return cls(message, pos, self._source, self._filename)

    # ------------------------------------------------------------------
    # Accumulator
    # ------------------------------------------------------------------

    def _none_token(self) -> Token:
        pos = self._current_pos()
        return Token(TokenType.NONE, None, Span(pos, pos))

    def _commit(self) -> None:
        logger.debug("commit %s %r", self._current.type.name, self._current.value)
        self._tokens.append(self._current)

    def _merge(self, value: int | float | str, start: Position) -> None:
        """Replace the accumulator with its merged value, extending its span."""
        self._current = Token(
            self._current.type, value, Span(start, self._current_pos())
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_terminator(self) -> None:
        # The terminator only closes the statement; it never becomes END_STMT.
        self._advance()
        self._commit()
        self._current = self._none_token()

    def _lex_digit(self) -> None:
        acc = self._current
        start = self._current_pos()
        ch = self._source[self._pos]
        digit = int(ch)

        if acc.type == TokenType.NONE:
            self._advance()
            self._current = Token(TokenType.INT, digit, Span(start, self._current_pos()))
            return

        if acc.type == TokenType.INT:
            self._advance()
            self._merge(wrap_int64(acc.value * 10 + digit), acc.span.start)
            return

        if acc.type == TokenType.DEC:
            # Same positional rule as INT; no fractional scaling.
            self._advance()
            self._merge(acc.value * 10.0 + digit, acc.span.start)
            return

        if acc.type in (TokenType.STR, TokenType.VAR):
            self._advance()
            self._merge(acc.value + ch, acc.span.start)
            return

        if acc.type == TokenType.CHAR:
            # Every character has a non-zero encoded length, so this always fails.
            if len(acc.value.encode("utf-8")) > 0:
                raise self._error(
                    InvalidTokenError,
                    f"invalid token in this position: digit {ch!r} "
                    f"after character literal {acc.value!r}",
                )
            self._advance()
            self._merge(ch, start)
            return

        if acc.type in _COMMIT_BEFORE_INT:
            self._commit()
            self._advance()
            self._current = Token(TokenType.INT, digit, Span(start, self._current_pos()))
            return

        raise self._error(
            InvalidTokenError,
            f"invalid token in this position: digit {ch!r} after {acc.type.name}",
        )


def tokenize(source: str, filename: str = "input.pd") -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Scanner(source, filename).tokenize()
