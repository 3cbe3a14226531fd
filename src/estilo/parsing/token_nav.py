"""Token navigation utilities for the estilo parser.

Provides mixin for token stream navigation and the match/expect primitives
the grammar is written with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from estilo.config import get_parse_config
from estilo.errors import ParseError
from estilo.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Matching consumes exactly one token on success and none on failure.
    EOF never matches.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens))
        - _pos: int
        - _current: Token | None
        - _source: str
        - _source_file: str | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None
    _source: str
    _source_file: str | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None or self._current.type == TokenType.EOF

    def _advance(self) -> Token | None:
        """Consume the current token and return it."""
        token = self._current
        if not self._at_end():
            self._pos += 1
            self._current = self._tokens[self._pos] if self._pos < self._tokens_len else None
        return token

    def _check(self, token_type: TokenType) -> bool:
        """Check the current token's type without consuming it."""
        return not self._at_end() and self._current.type == token_type

    def _match(self, *token_types: TokenType) -> Token | None:
        """Consume and return the current token if it has one of ``token_types``."""
        if self._at_end() or self._current.type not in token_types:
            return None
        return self._advance()

    def _expect(self, token_type: TokenType, message: str) -> Token:
        """Consume a token of ``token_type`` or raise ParseError at the current token."""
        token = self._match(token_type)
        if token is None:
            raise self._error(message)
        return token

    def _error(self, message: str) -> ParseError:
        """Build a ParseError pointing at the current token."""
        token = self._current
        if token is None or token._lineno == 0:
            return ParseError(message, source_file=self._source_file)

        width = get_parse_config().excerpt_width
        line = self._get_line_at(token._start_offset)
        col = token._col
        excerpt_col = col
        if len(line) > width:
            start = max(0, min(col - 1 - width // 2, len(line) - width))
            line = line[start : start + width]
            excerpt_col = col - start

        return ParseError(
            message,
            lineno=token._lineno,
            col_offset=col,
            source_file=token._source_file or self._source_file,
            excerpt=line,
            excerpt_col=excerpt_col,
        )

    def _get_line_at(self, offset: int) -> str:
        """Get the full line content containing the given source offset."""
        start = self._source.rfind("\n", 0, offset) + 1
        end = self._source.find("\n", offset)
        if end == -1:
            end = len(self._source)
        return self._source[start:end]
