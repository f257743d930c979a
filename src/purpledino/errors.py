"""Error types with formatted source context."""

from __future__ import annotations

from purpledino.tokens import Position


class LexError(Exception):
    """Raised on the first scanning error, with position and source context.

    Every scanning failure is fatal: the scan stops and no tokens are returned.
    """

    def __init__(
        self, message: str, position: Position, source: str, filename: str = "input.pd"
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.filename = filename
        super().__init__(self.format(filename))

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class UnhandledCharacterError(LexError):
    """A character outside the recognized set (digits and the terminator)."""

    def __init__(
        self, char: str, position: Position, source: str, filename: str = "input.pd"
    ) -> None:
        self.char = char
        super().__init__(f"unhandled character {char!r}", position, source, filename)


class InvalidTokenError(LexError):
    """A character that the token under construction cannot absorb."""


class UnterminatedProgramError(LexError):
    """End of input reached while a token is still under construction."""
