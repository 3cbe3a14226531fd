"""Exception classes for estilo.

Provides standardized exceptions for error handling throughout estilo.
"""

from __future__ import annotations

import sys
from typing import TextIO

from estilo.location import SourceLocation


class EstiloError(Exception):
    """Base exception for all estilo errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(EstiloError):
    """Syntax error in stylesheet source.

    The parser records one of these per session instead of letting it
    escape; ``estilo.parse()`` raises it only in strict mode.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        excerpt: str = "",
        excerpt_col: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
            excerpt: The source line the error points into
            excerpt_col: Column of the error inside ``excerpt`` when the
                excerpt was cut; defaults to ``col_offset``
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.excerpt = excerpt
        self.excerpt_col = excerpt_col if excerpt_col is not None else col_offset

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @property
    def location(self) -> SourceLocation:
        """Location of the offending token."""
        if self.lineno is None:
            return SourceLocation.unknown()
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset or 0,
            source_file=self.source_file,
        )

    def format(self) -> str:
        """Render a multi-line diagnostic with a caret under the error.

        Example:
            >>> err = ParseError("Expected ';' after property value.", 2, 14,
            ...                  excerpt="  color: red }")
            >>> print(err.format())
            ParseError at 2:14:
            <BLANKLINE>
            >   color: red }
                           ^
            <BLANKLINE>
            Error: Expected ';' after property value.
        """
        lines = [f"ParseError at {self.location}:" if self.lineno is not None else "ParseError:"]
        if self.excerpt:
            lines.append("")
            lines.append(f"> {self.excerpt}")
            if self.excerpt_col:
                lines.append("  " + " " * (self.excerpt_col - 1) + "^")
        lines.append("")
        lines.append(f"Error: {self.message}")
        return "\n".join(lines)

    def print(self, file: TextIO | None = None) -> None:
        """Write the formatted diagnostic to ``file`` (stderr by default)."""
        print(self.format(), file=file if file is not None else sys.stderr)


class SerializationError(EstiloError):
    """Error converting a stylesheet from JSON.

    Raised when the input is not valid JSON or not shaped like a
    stylesheet (object of objects of strings).
    """

    pass
