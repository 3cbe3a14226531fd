"""Stylesheet serialization: JSON round-trip.

Useful for caching parsed stylesheets, handing them to non-Python
consumers, and debugging. Output is deterministic (sorted keys).

Example:
    from estilo import parse
    from estilo.serialization import to_json, from_json

    sheet = parse("a { color: red; }")
    assert from_json(to_json(sheet)) == sheet

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from typing import Any

from estilo.errors import SerializationError
from estilo.stylesheet import Stylesheet


def to_json(stylesheet: Stylesheet, *, indent: int | None = None) -> str:
    """Serialize a stylesheet to a JSON string with sorted keys."""
    return json.dumps(stylesheet, indent=indent, sort_keys=True)


def from_json(text: str) -> Stylesheet:
    """Deserialize a stylesheet from JSON.

    Raises:
        SerializationError: If the text is not valid JSON or is not an
            object of objects of strings.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(f"Expected a JSON object, got {type(data).__name__}")

    stylesheet: Stylesheet = {}
    for selector, properties in data.items():
        if not isinstance(properties, dict):
            raise SerializationError(
                f"Selector {selector!r}: expected an object, got {type(properties).__name__}"
            )
        for name, value in properties.items():
            if not isinstance(value, str):
                raise SerializationError(
                    f"Property {selector!r}.{name!r}: expected a string, "
                    f"got {type(value).__name__}"
                )
        stylesheet[selector] = dict(properties)
    return stylesheet
