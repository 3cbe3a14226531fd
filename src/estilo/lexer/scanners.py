"""Lexeme scanners for the estilo lexer.

Each scanner starts at the current position, finds the end of its lexeme
with plain string searches, and commits the position past it. Scanners
never fail: anything unexpected becomes an UNKNOWN token.
"""

from __future__ import annotations

import logging

from estilo.lexer.charsets import DIGITS, IDENT_CHARS, IDENT_START, PUNCTUATION, WHITESPACE
from estilo.tokens import Token, TokenType

logger = logging.getLogger(__name__)

# Value of the UNKNOWN token produced for a hex color with a bad body length
INVALID_COLOR = "<InvalidColor>"

HEX_COLOR_LENGTH = 6


class ScannerMixin:
    """Mixin with one scanner per lexical category.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _pos: int

    Required Host Methods:
        - _peek, _advance, _commit_to, _save_location, _make_token

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _saved_lineno: int
    _saved_col: int

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _commit_to(self, end: int) -> None:
        """Commit position to end. Implemented by Lexer."""
        raise NotImplementedError

    def _save_location(self) -> None:
        """Save current location for token creation. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _scan(self) -> Token | None:
        """Scan one lexeme at the current position.

        Returns:
            The token, or None when the lexeme produces no token
            (whitespace and comments).
        """
        char = self._peek()

        if char in WHITESPACE:
            self._skip_whitespace()
            return None

        if char == "/" and self._peek(1) == "*":
            self._skip_comment()
            return None

        self._save_location()

        if char in IDENT_START:
            return self._scan_run(TokenType.IDENTIFIER, IDENT_CHARS)
        if char in DIGITS:
            return self._scan_run(TokenType.NUMBER, DIGITS)
        if char == '"':
            return self._scan_string()
        if char == "#":
            return self._scan_hex_color()

        token_type = PUNCTUATION.get(char)
        if token_type is not None:
            self._advance()
            return self._make_token(token_type, char)

        self._advance()
        logger.debug("Unknown character %r at %d:%d", char, self._saved_lineno, self._saved_col)
        return self._make_token(TokenType.UNKNOWN, char)

    def _skip_whitespace(self) -> None:
        end = self._pos
        while end < self._source_len and self._source[end] in WHITESPACE:
            end += 1
        self._commit_to(end)

    def _skip_comment(self) -> None:
        """Skip a /* ... */ block; an unclosed comment runs to end of input."""
        end = self._source.find("*/", self._pos + 2)
        self._commit_to(self._source_len if end == -1 else end + 2)

    def _scan_run(self, token_type: TokenType, chars: frozenset[str]) -> Token:
        """Scan the longest run of ``chars`` (first char already classified)."""
        start = self._pos
        end = start + 1
        while end < self._source_len and self._source[end] in chars:
            end += 1
        self._commit_to(end)
        return self._make_token(token_type, self._source[start:end])

    def _scan_string(self) -> Token:
        """Scan a double-quoted string; the value excludes the quotes.

        An unterminated string takes the rest of the input.
        """
        start = self._pos + 1
        end = self._source.find('"', start)
        if end == -1:
            self._commit_to(self._source_len)
            return self._make_token(TokenType.STRING, self._source[start:])
        self._commit_to(end + 1)
        return self._make_token(TokenType.STRING, self._source[start:end])

    def _scan_hex_color(self) -> Token:
        """Scan ``#`` plus everything up to (not including) the next ``;``.

        The body must be exactly six characters; the digits themselves are
        not checked.
        """
        start = self._pos + 1
        end = self._source.find(";", start)
        if end == -1:
            end = self._source_len
        self._commit_to(end)

        body = self._source[start:end]
        if len(body) != HEX_COLOR_LENGTH:
            logger.debug(
                "Invalid hex color body %r at %d:%d", body, self._saved_lineno, self._saved_col
            )
            return self._make_token(TokenType.UNKNOWN, INVALID_COLOR)
        return self._make_token(TokenType.HEX_COLOR, body)

