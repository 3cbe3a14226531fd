"""Error-path tests.

Tests for ParseError construction and formatting, the error hierarchy, and
the excerpt attached to errors the parser records.
"""

import io

import pytest

from estilo import EstiloError, ParseConfig, ParseError, Parser, SerializationError
from estilo.config import parse_config_context
from estilo.location import SourceLocation

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing brace", lineno=10, col_offset=5)
        assert str(err) == "10:5 missing brace"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="theme.css")
        assert str(err) == "theme.css:1:1 error"

    def test_is_estilo_error(self) -> None:
        assert isinstance(ParseError("x"), EstiloError)

    def test_location(self) -> None:
        err = ParseError("x", lineno=3, col_offset=4, source_file="a.css")
        assert err.location == SourceLocation(lineno=3, col_offset=4, source_file="a.css")

    def test_unknown_location(self) -> None:
        assert ParseError("x").location == SourceLocation.unknown()


class TestParseErrorDiagnostic:
    """Verify the caret diagnostic produced by format() and print()."""

    def test_format_with_excerpt(self) -> None:
        err = ParseError("Expected ':' after property name.", 1, 11, excerpt="a { color red; }")
        assert err.format() == (
            "ParseError at 1:11:\n"
            "\n"
            "> a { color red; }\n"
            "            ^\n"
            "\n"
            "Error: Expected ':' after property name."
        )

    def test_format_without_location(self) -> None:
        err = ParseError("Expected property name.")
        assert err.format() == "ParseError:\n\nError: Expected property name."

    def test_print_to_stream(self) -> None:
        err = ParseError("boom", 1, 1, excerpt="x")
        stream = io.StringIO()
        err.print(file=stream)
        assert stream.getvalue() == err.format() + "\n"

    def test_print_defaults_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        ParseError("boom").print()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: boom" in captured.err


# =========================================================================
# Errors recorded by the parser
# =========================================================================


class TestRecordedErrors:
    """Errors from a parsing session carry a one-line excerpt."""

    def test_format_from_parser(self) -> None:
        parser = Parser("a { color red; }")
        parser.parse()
        text = parser.last_error.format()
        assert "> a { color red; }" in text
        assert "            ^" in text
        assert text.endswith("Error: Expected ':' after property name.")

    def test_long_line_excerpt_is_cut(self) -> None:
        source = "a { " + "x: 1; " * 30 + "y 2; }"
        parser = Parser(source)
        parser.parse()
        err = parser.last_error

        assert err.col_offset == 187
        assert len(err.excerpt) == 80
        assert err.excerpt[err.excerpt_col - 1] == "2"

    def test_excerpt_width_from_config(self) -> None:
        source = "a { " + "x: 1; " * 30 + "y 2; }"
        with parse_config_context(ParseConfig(excerpt_width=20)):
            parser = Parser(source)
            parser.parse()
        err = parser.last_error

        assert len(err.excerpt) == 20
        assert err.excerpt[err.excerpt_col - 1] == "2"

    def test_short_line_not_cut(self) -> None:
        parser = Parser("a { x 1; }")
        parser.parse()
        assert parser.last_error.excerpt == "a { x 1; }"
        assert parser.last_error.excerpt_col == parser.last_error.col_offset


# =========================================================================
# SerializationError
# =========================================================================


class TestSerializationError:
    """Verify SerializationError hierarchy."""

    def test_is_estilo_error(self) -> None:
        assert isinstance(SerializationError("x"), EstiloError)
