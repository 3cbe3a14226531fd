"""Stylesheet data model.

A stylesheet is a plain nested mapping: selector name to property table,
property name to value text. Values are never coerced; ``14`` stays the
string ``"14"``.

Redeclaring a selector merges into its existing table and redeclaring a
property overwrites its value, both as ordinary dict upserts.
"""

type PropertyTable = dict[str, str]
type Stylesheet = dict[str, PropertyTable]

__all__ = ["PropertyTable", "Stylesheet"]
