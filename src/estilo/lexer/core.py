"""Single-pass lexer for estilo stylesheets.

Scans the source once, left to right, classifying characters into tokens.
Lexing never fails: unrecognized input becomes UNKNOWN tokens and
rejection is left to the parser.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from estilo.lexer.scanners import ScannerMixin
from estilo.tokens import Token, TokenType


class Lexer(ScannerMixin):
    """Single-pass lexer with line/column tracking.

    Usage:
            >>> lexer = Lexer("a { color: red; }")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(IDENTIFIER, 'a', 1:1)
        Token(BRACE_OPEN, '{', 1:3)
        Token(IDENTIFIER, 'color', 1:5)
        Token(COLON, ':', 1:10)
        Token(IDENTIFIER, 'red', 1:12)
        Token(SEMICOLON, ';', 1:15)
        Token(BRACE_CLOSE, '}', 1:17)
        Token(EOF, '', 1:18)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Stylesheet source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

        # Saved location of the token being scanned
        self._saved_pos: int = 0
        self._saved_lineno: int = 1
        self._saved_col: int = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects in source order, ending with exactly one EOF

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            token = self._scan()
            if token is not None:
                yield token

        self._save_location()
        yield self._make_token(TokenType.EOF, "")

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Peek at the character ``offset`` positions ahead without advancing.

        Returns:
            The character or empty string past end of input.
        """
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _commit_to(self, end: int) -> None:
        """Commit position to ``end``, updating line and column.

        Uses str.count/rfind on the skipped segment instead of a
        character-by-character loop.

        Args:
            end: Position to commit to.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            self._lineno += newline_count
            self._col = len(segment) - segment.rfind("\n")
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token.

        Call this BEFORE consuming the token's first character.
        """
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create a Token spanning the saved location to the current position.

        Args:
            token_type: The token type.
            value: The token value.

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
