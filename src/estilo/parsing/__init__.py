"""Parsing subsystem for the estilo parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal, match and expect
- `RuleParsingMixin`: Rules, declarations and values

Example:
    >>> from estilo.parsing import TokenNavigationMixin, RuleParsingMixin
    >>> class Parser(TokenNavigationMixin, RuleParsingMixin):
    ...     pass

"""

from estilo.parsing.rules import RuleParsingMixin
from estilo.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "RuleParsingMixin",
]
