"""Character sets for O(1) classification.

Classification is ASCII-only: non-ASCII characters never start or continue
an identifier and fall through to UNKNOWN tokens.

Usage:
    from estilo.lexer.charsets import IDENT_START

    if char in IDENT_START:  # O(1) lookup
        ...
"""

from estilo.tokens import TokenType

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

DIGITS: frozenset[str] = frozenset("0123456789")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Hyphen-leading identifiers cover custom-property names like --background
IDENT_START: frozenset[str] = ASCII_LETTERS | frozenset("-")

IDENT_CHARS: frozenset[str] = ASCII_LETTERS | DIGITS | frozenset("-")

# Single-character punctuation tokens
PUNCTUATION: dict[str, TokenType] = {
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "{": TokenType.BRACE_OPEN,
    "}": TokenType.BRACE_CLOSE,
}
