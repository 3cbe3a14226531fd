"""Lexer for estilo stylesheets.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (navigation + location tracking)
├── scanners.py          # One scanner per lexical category
└── charsets.py          # ASCII character classes

Usage:
    >>> from estilo.lexer import Lexer
    >>> tokens = list(Lexer("a {}").tokenize())
    >>> [t.type.name for t in tokens]
    ['IDENTIFIER', 'BRACE_OPEN', 'BRACE_CLOSE', 'EOF']

"""

from estilo.lexer.core import Lexer

__all__ = ["Lexer"]
