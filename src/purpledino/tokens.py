"""Token types, data structures, character helpers, and the statement grammar.

The grammar below is the contract for a parser that consumes the token
stream. The scanner does not enforce it.

    <PROGRAM>              ::= <STMT>
    <STMT>                 ::= <ARITHMETIC> END_STMT | <STR_CONCAT> END_STMT
    <STR_CONCAT>           ::= STR ADD <STR_CONCAT> | STR
    <ARITHMETIC>           ::= OPEN_PAREN <ARITHMETIC_OPERANDS> CLOSE_PAREN
                             | <ARITHMETIC_OPERANDS> <ARITHMETIC_OPERATORS> <ARITHMETIC_OPERANDS>
                             | <ARITHMETIC_OPERANDS>
    <ARITHMETIC_OPERANDS>  ::= VAR | DEC | INT | <ARITHMETIC>
    <ARITHMETIC_OPERATORS> ::= ADD | MINUS | MULTIPLY | DIVIDE | MODULO
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Markers (no payload)
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    ADD = auto()  # +
    MINUS = auto()  # -
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /
    MODULO = auto()  # %
    END_STMT = auto()  # ;

    # Literals
    DEC = auto()  # float value
    INT = auto()  # signed 64-bit value
    STR = auto()  # string buffer
    CHAR = auto()  # single character
    VAR = auto()  # identifier buffer

    # No token under construction
    NONE = auto()


MARKER_TYPES = frozenset(
    {
        TokenType.OPEN_PAREN,
        TokenType.CLOSE_PAREN,
        TokenType.ADD,
        TokenType.MINUS,
        TokenType.MULTIPLY,
        TokenType.DIVIDE,
        TokenType.MODULO,
        TokenType.END_STMT,
    }
)


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single token and the source range it was built from.

    ``value`` is ``None`` for markers and the NONE sentinel, an ``int`` for
    INT, a ``float`` for DEC, and a ``str`` for STR, CHAR and VAR.
    """

    type: TokenType
    value: int | float | str | None
    span: Span


# Statement terminator; commits the token under construction.
TERMINATOR = ";"

DIGITS = frozenset("0123456789")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in DIGITS


def is_terminator(ch: str) -> bool:
    """Return True if ch ends a statement."""
    return ch == TERMINATOR


def wrap_int64(value: int) -> int:
    """Reduce value to the signed 64-bit range with two's-complement wraparound."""
    return (value - INT64_MIN) % 2**64 + INT64_MIN


# ----------------------------------------------------------------------
# Grammar tables
# ----------------------------------------------------------------------

TERMINALS: tuple[TokenType, ...] = (
    TokenType.OPEN_PAREN,
    TokenType.CLOSE_PAREN,
    TokenType.ADD,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.MODULO,
    TokenType.DEC,
    TokenType.INT,
    TokenType.STR,
    TokenType.CHAR,
    TokenType.VAR,
    TokenType.END_STMT,
)

# Each alternative is a sequence of terminals (TokenType) or non-terminal names.
PRODUCTIONS: dict[str, tuple[tuple[TokenType | str, ...], ...]] = {
    "PROGRAM": (("STMT",),),
    "STMT": (
        ("ARITHMETIC", TokenType.END_STMT),
        ("STR_CONCAT", TokenType.END_STMT),
    ),
    "STR_CONCAT": (
        (TokenType.STR, TokenType.ADD, "STR_CONCAT"),
        (TokenType.STR,),
    ),
    "ARITHMETIC": (
        (TokenType.OPEN_PAREN, "ARITHMETIC_OPERANDS", TokenType.CLOSE_PAREN),
        ("ARITHMETIC_OPERANDS", "ARITHMETIC_OPERATORS", "ARITHMETIC_OPERANDS"),
        ("ARITHMETIC_OPERANDS",),
    ),
    "ARITHMETIC_OPERANDS": (
        (TokenType.VAR,),
        (TokenType.DEC,),
        (TokenType.INT,),
        ("ARITHMETIC",),
    ),
    "ARITHMETIC_OPERATORS": (
        (TokenType.ADD,),
        (TokenType.MINUS,),
        (TokenType.MULTIPLY,),
        (TokenType.DIVIDE,),
        (TokenType.MODULO,),
    ),
}

NON_TERMINALS: tuple[str, ...] = tuple(PRODUCTIONS)
