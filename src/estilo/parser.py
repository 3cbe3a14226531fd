"""Recursive descent parser producing a Stylesheet.

Consumes the token list from Lexer and fills a selector -> properties
mapping in place.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal, match and expect
- `RuleParsingMixin`: Rules, declarations and values

Errors:
A failed expectation raises ParseError inside the grammar. ``parse()``
catches it, stores it in ``last_error`` and sets the sticky ``had_error``
flag, then stops. ``parse()`` itself never raises. Nothing from the
failing token onward is stored: ``a { color red; }`` yields ``{"a": {}}``
and later declarations and rules are dropped.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
source string.

"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from estilo.errors import ParseError
from estilo.lexer import Lexer
from estilo.parsing import RuleParsingMixin, TokenNavigationMixin
from estilo.stylesheet import Stylesheet
from estilo.tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Parser(
    TokenNavigationMixin,
    RuleParsingMixin,
):
    """A parsing session over one source text.

    The source is tokenized at construction. ``parse()`` runs the grammar
    once; afterwards the stylesheet, ``had_error`` and ``last_error`` are
    readable.

    Usage:
            >>> parser = Parser("button { border: 1; border-color: blue; }")
            >>> parser.parse()
            {'button': {'border': '1', 'border-color': 'blue'}}
            >>> parser.had_error
            False

            >>> parser = Parser("a { color red; }")
            >>> parser.parse()
            {'a': {}}
            >>> parser.last_error.message
            "Expected ':' after property name."

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_stylesheet",
        "had_error",
        "last_error",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        tokens: Iterable[Token] | None = None,
    ) -> None:
        """Initialize parser and tokenize the source.

        Args:
            source: Stylesheet source text
            source_file: Optional source file path for error messages
            tokens: Pre-built token sequence to parse instead of lexing
                ``source``; a trailing EOF is added when missing

        """
        self._source = source
        self._source_file = source_file
        if tokens is None:
            self._tokens: tuple[Token, ...] = tuple(Lexer(source, source_file).tokenize())
        else:
            self._tokens = _terminated(tokens, len(source))
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current: Token | None = self._tokens[0]
        self._stylesheet: Stylesheet = {}
        self.had_error = False
        self.last_error: ParseError | None = None

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[Token],
        source: str = "",
        source_file: str | None = None,
    ) -> Parser:
        """Create a session over an existing token sequence, bypassing the lexer.

        Args:
            tokens: Tokens to parse
            source: Source the tokens came from, used for error excerpts

        Example:
            >>> tokens = [
            ...     Token(TokenType.IDENTIFIER, "a"),
            ...     Token(TokenType.BRACE_OPEN, "{"),
            ...     Token(TokenType.BRACE_CLOSE, "}"),
            ... ]
            >>> Parser.from_tokens(tokens).parse()
            {'a': {}}

        """
        return cls(source, source_file, tokens=tokens)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The token sequence this session parses."""
        return self._tokens

    @property
    def stylesheet(self) -> Stylesheet:
        """The stylesheet built so far (partial if an error occurred)."""
        return self._stylesheet

    def parse(self) -> Stylesheet:
        """Parse rules until the input ends or an error is recorded.

        Returns:
            The stylesheet. Check ``had_error`` before trusting it.
        """
        while not self._at_end() and not self.had_error:
            try:
                self._parse_rule()
            except ParseError as error:
                self._record_error(error)
        return self._stylesheet

    def _record_error(self, error: ParseError) -> None:
        """Store ``error`` as the session's last error and set the flag."""
        logger.debug("Parse error: %s", error)
        self.last_error = error
        self.had_error = True


def _terminated(tokens: Iterable[Token], end_offset: int) -> tuple[Token, ...]:
    """Return ``tokens`` up to the first EOF, adding one when missing."""
    result: list[Token] = []
    for token in tokens:
        result.append(token)
        if token.type == TokenType.EOF:
            return tuple(result)
    result.append(Token(TokenType.EOF, "", _start_offset=end_offset, _end_offset=end_offset))
    return tuple(result)
