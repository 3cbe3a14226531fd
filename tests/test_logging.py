"""Tests for estilo's logging: module loggers and what they emit."""

import logging

import pytest


class TestLoggerNames:
    """Every module logs under the estilo namespace."""

    @pytest.mark.parametrize(
        ("module", "name"),
        [
            ("estilo", "estilo"),
            ("estilo.parser", "estilo.parser"),
            ("estilo.lexer.scanners", "estilo.lexer.scanners"),
        ],
    )
    def test_module_logger_name(self, module: str, name: str) -> None:
        import importlib

        assert importlib.import_module(module).logger.name == name

    def test_module_loggers_propagate_to_package(self) -> None:
        from estilo.parser import logger

        assert logger.parent is logging.getLogger("estilo")


class TestDebugLogging:
    """The lexer and parser log at DEBUG."""

    def test_unknown_character_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from estilo.lexer import Lexer

        with caplog.at_level(logging.DEBUG, logger="estilo"):
            list(Lexer("@").tokenize())
        assert "Unknown character '@' at 1:1" in caplog.text

    def test_invalid_color_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from estilo.lexer import Lexer

        with caplog.at_level(logging.DEBUG, logger="estilo"):
            list(Lexer("#fff;").tokenize())
        assert "Invalid hex color body 'fff' at 1:1" in caplog.text

    def test_parse_error_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from estilo import Parser

        with caplog.at_level(logging.DEBUG, logger="estilo"):
            Parser("a {").parse()
        assert "Parse error: 1:4 Expected '}' after declaration block." in caplog.text

    def test_nothing_logged_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        from estilo import Parser

        with caplog.at_level(logging.WARNING, logger="estilo"):
            Parser("a { @ }").parse()
        assert caplog.records == []
