"""Parse a stylesheet and look up a property in three lines."""

from estilo import parse

sheet = parse("window { background-color: #08090E; margin: 0; }")
print(sheet["window"]["background-color"])
