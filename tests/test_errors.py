"""Test error conditions, position accuracy, and context snippets."""

import pytest

from purpledino.errors import (
    InvalidTokenError,
    LexError,
    UnhandledCharacterError,
    UnterminatedProgramError,
)
from purpledino.scanner import tokenize

UNHANDLED = list("abzXY+-*/%().\"' \t\n,=_#")


class TestUnhandledCharacters:
    @pytest.mark.parametrize("ch", UNHANDLED)
    def test_alone(self, ch):
        with pytest.raises(UnhandledCharacterError) as exc_info:
            tokenize(ch)
        assert exc_info.value.char == ch

    @pytest.mark.parametrize("ch", UNHANDLED)
    def test_after_digits(self, ch):
        with pytest.raises(UnhandledCharacterError):
            tokenize(f"12{ch}3;")

    @pytest.mark.parametrize("ch", UNHANDLED)
    def test_after_terminator(self, ch):
        with pytest.raises(UnhandledCharacterError):
            tokenize(f"1;{ch}")

    def test_expression_rejected(self):
        with pytest.raises(UnhandledCharacterError, match="unhandled character '\\+'"):
            tokenize("1+2;")

    def test_is_lex_error(self):
        with pytest.raises(LexError):
            tokenize("x;")


class TestMissingTerminator:
    def test_digit_run_without_terminator(self):
        with pytest.raises(UnterminatedProgramError, match="missing terminator"):
            tokenize("12")

    def test_second_statement_unterminated(self):
        with pytest.raises(UnterminatedProgramError):
            tokenize("1;2")

    def test_position_is_end_of_input(self):
        with pytest.raises(UnterminatedProgramError) as exc_info:
            tokenize("12")
        err = exc_info.value
        assert err.position.column == 3
        assert err.position.offset == 2


class TestErrorHierarchy:
    def test_subclasses(self):
        for cls in (UnhandledCharacterError, InvalidTokenError, UnterminatedProgramError):
            assert issubclass(cls, LexError)


class TestErrorPositions:
    def test_unhandled_position(self):
        with pytest.raises(UnhandledCharacterError) as exc_info:
            tokenize("12;3+4;")
        err = exc_info.value
        assert err.position.line == 1
        assert err.position.column == 5
        assert err.position.offset == 4

    def test_first_offender_reported(self):
        with pytest.raises(UnhandledCharacterError) as exc_info:
            tokenize("1a-b;")
        assert exc_info.value.char == "a"


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("123;45x6;")
        formatted = exc_info.value.format()
        assert "123;45x6;" in formatted

    def test_format_caret_under_offender(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("1;x")
        last_line = exc_info.value.format().splitlines()[-1]
        assert last_line == "  |   ^"

    def test_format_contains_error_prefix(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("x")
        assert exc_info.value.format().startswith("error: unhandled character 'x'")

    def test_format_contains_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("12")
        assert "input.pd:1:3" in exc_info.value.format()

    def test_str_is_formatted(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("x")
        assert str(exc_info.value) == exc_info.value.format()

    def test_filename_from_tokenize(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("x", filename="prog.pd")
        assert "prog.pd:1:1" in str(exc_info.value)

    def test_format_with_custom_filename(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("x")
        assert "other.pd" in exc_info.value.format("other.pd")
