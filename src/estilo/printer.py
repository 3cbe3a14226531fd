"""Debug pretty-printer for stylesheets.

Renders each selector on its own line followed by its indented
``property: value`` lines:

    window
      background-color: 08090E
      margin: 0
"""

from __future__ import annotations

import sys
from typing import TextIO

from estilo.stylesheet import Stylesheet

ANONYMOUS_SELECTOR = "<anonymous>"


def format_stylesheet(stylesheet: Stylesheet) -> str:
    """Render every entry of ``stylesheet`` as indented text.

    Example:
        >>> print(format_stylesheet({"a": {"color": "red"}, "b": {}}))
        a
          color: red
        b
    """
    lines: list[str] = []
    for selector, properties in stylesheet.items():
        lines.append(selector or ANONYMOUS_SELECTOR)
        for name, value in properties.items():
            lines.append(f"  {name}: {value}")
    return "\n".join(lines)


def print_stylesheet(stylesheet: Stylesheet, file: TextIO | None = None) -> None:
    """Write ``format_stylesheet(stylesheet)`` to ``file`` (stderr by default)."""
    if not stylesheet:
        return
    print(format_stylesheet(stylesheet), file=file if file is not None else sys.stderr)
