"""Token and TokenType definitions for the estilo lexer.

The lexer produces a list of Token objects that the parser consumes.
Each Token has a type, value, and source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from estilo.location import SourceLocation


class TokenType(Enum):
    """Lexical categories produced by the lexer.

    UNKNOWN is the catch-all for anything the lexer cannot classify,
    including malformed hex colors. Rejection is left to the parser.

    """

    IDENTIFIER = auto()  # color, border-type, --background
    NUMBER = auto()  # 14 (digits only)
    STRING = auto()  # "text" (quotes stripped)
    COLON = auto()  # :
    SEMICOLON = auto()  # ;
    BRACE_OPEN = auto()  # {
    BRACE_CLOSE = auto()  # }
    HEX_COLOR = auto()  # #08090E (body only)
    UNKNOWN = auto()
    EOF = auto()


# Token types accepted as a declaration value
VALUE_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.NUMBER,
        TokenType.STRING,
        TokenType.IDENTIFIER,
        TokenType.HEX_COLOR,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The lexeme; quotes and ``#`` are stripped, EOF is empty
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    SourceLocation is created lazily on first access to `.location`.

    """

    type: TokenType
    value: str
    _lineno: int = 0
    _col: int = 0
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from estilo.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
