"""Rule and declaration grammar for the estilo parser.

Grammar:
    stylesheet   := rule*
    rule         := IDENTIFIER BRACE_OPEN declaration* BRACE_CLOSE
    declaration  := IDENTIFIER COLON value SEMICOLON
    value        := NUMBER | STRING | IDENTIFIER | HEX_COLOR

Every failed expectation raises ParseError; the Parser catches it at the
top-level loop, so the rule in progress stops at its first error.
"""

from __future__ import annotations

from estilo.errors import ParseError
from estilo.stylesheet import PropertyTable, Stylesheet
from estilo.tokens import VALUE_TYPES, Token, TokenType

EXPECTED_BRACE_OPEN = "Expected '{' after selector."
EXPECTED_BRACE_CLOSE = "Expected '}' after declaration block."
EXPECTED_PROPERTY = "Expected property name."
EXPECTED_COLON = "Expected ':' after property name."
EXPECTED_VALUE = "Expected a value after '<property>:'."
EXPECTED_SEMICOLON = "Expected ';' after property value."


class RuleParsingMixin:
    """Mixin providing the recursive descent for rules and declarations.

    Required Host Attributes:
        - _stylesheet: Stylesheet

    Required Host Methods:
        - _at_end, _check, _match, _expect, _error (TokenNavigationMixin)

    """

    _stylesheet: Stylesheet

    def _at_end(self) -> bool:
        """Check if at end of token stream. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _check(self, token_type: TokenType) -> bool:
        """Check current token type. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _match(self, *token_types: TokenType) -> Token | None:
        """Consume a matching token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _expect(self, token_type: TokenType, message: str) -> Token:
        """Consume a required token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _error(self, message: str) -> ParseError:
        """Build a ParseError at the current token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _parse_rule(self) -> None:
        """Parse ``selector { declaration* }`` into the stylesheet.

        Redeclared selectors merge into the existing property table.
        """
        selector = self._parse_selector()
        self._expect(TokenType.BRACE_OPEN, EXPECTED_BRACE_OPEN)
        properties = self._stylesheet.setdefault(selector, {})
        self._parse_declaration_block(properties)
        self._expect(TokenType.BRACE_CLOSE, EXPECTED_BRACE_CLOSE)

    def _parse_selector(self) -> str:
        """Parse the optional selector; a missing one is the empty name."""
        token = self._match(TokenType.IDENTIFIER)
        return token.value if token is not None else ""

    def _parse_declaration_block(self, properties: PropertyTable) -> None:
        while not self._check(TokenType.BRACE_CLOSE) and not self._at_end():
            self._parse_declaration(properties)

    def _parse_declaration(self, properties: PropertyTable) -> None:
        """Parse ``property: value;``; the last write of a property wins."""
        name = self._expect(TokenType.IDENTIFIER, EXPECTED_PROPERTY).value
        self._expect(TokenType.COLON, EXPECTED_COLON)
        value = self._parse_value()
        self._expect(TokenType.SEMICOLON, EXPECTED_SEMICOLON)
        properties[name] = value

    def _parse_value(self) -> str:
        """Parse a value; every value kind is kept as its raw text."""
        token = self._match(*VALUE_TYPES)
        if token is None:
            raise self._error(EXPECTED_VALUE)
        return token.value
