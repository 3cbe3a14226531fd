"""
estilo: CSS-like stylesheet reader for Python

Parses a small subset of CSS syntax (named rules holding flat
``property: value;`` declarations) into a plain nested dict. No cascading,
no combinators, no units: every value is kept as text.

Quick Start:
    >>> from estilo import parse
    >>> parse("window { margin: 0; background-color: #08090E; }")
    {'window': {'margin': '0', 'background-color': '08090E'}}

    >>> # Or drive a parsing session and inspect the error yourself
    >>> from estilo import Parser
    >>> parser = Parser("a { x: 1;")
    >>> sheet = parser.parse()
    >>> parser.had_error, parser.last_error.message
    (True, "Expected '}' after declaration block.")

Installation:
    pip install estilo               # zero runtime dependencies
"""

import logging

from estilo.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from estilo.errors import EstiloError, ParseError, SerializationError
from estilo.lexer import Lexer
from estilo.location import SourceLocation
from estilo.parser import Parser
from estilo.printer import format_stylesheet, print_stylesheet
from estilo.serialization import from_json, to_json
from estilo.stylesheet import PropertyTable, Stylesheet
from estilo.tokens import Token, TokenType

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def parse(source: str, *, source_file: str | None = None) -> Stylesheet:
    """Parse stylesheet source into a selector -> properties mapping.

    Reads the active ParseConfig. In strict mode a syntax error is raised;
    otherwise it is logged and the partially built stylesheet is returned.
    Use Parser directly to inspect the error without raising.

    Args:
        source: Stylesheet source text
        source_file: Optional source file path for error messages

    Returns:
        The parsed Stylesheet

    Raises:
        ParseError: On a syntax error when ``ParseConfig.strict`` is set.

    Example:
        >>> parse("a { x: 1; } b { y: 2; }")
        {'a': {'x': '1'}, 'b': {'y': '2'}}
    """
    parser = Parser(source, source_file=source_file)
    stylesheet = parser.parse()
    if parser.last_error is not None:
        if get_parse_config().strict:
            raise parser.last_error
        logger.warning("Stylesheet parsed with errors: %s", parser.last_error)
    return stylesheet


__all__ = [
    # Main API
    "parse",
    "Parser",
    "Lexer",
    "__version__",
    # Data model
    "Stylesheet",
    "PropertyTable",
    "Token",
    "TokenType",
    "SourceLocation",
    # Errors
    "EstiloError",
    "ParseError",
    "SerializationError",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Output helpers
    "format_stylesheet",
    "print_stylesheet",
    "to_json",
    "from_json",
]
