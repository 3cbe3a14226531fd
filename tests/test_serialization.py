"""Tests for stylesheet JSON serialization."""

import json

import pytest

from estilo import SerializationError, from_json, parse, to_json


class TestToJson:
    """Serialization output."""

    def test_sorted_and_deterministic(self) -> None:
        sheet = parse("b { y: 2; x: 1; } a { z: 3; }")
        assert to_json(sheet) == '{"a": {"z": "3"}, "b": {"x": "1", "y": "2"}}'

    def test_indent(self) -> None:
        text = to_json({"a": {"x": "1"}}, indent=2)
        assert text == '{\n  "a": {\n    "x": "1"\n  }\n}'

    def test_empty(self) -> None:
        assert to_json({}) == "{}"


class TestFromJson:
    """Deserialization and shape validation."""

    def test_round_trip(self) -> None:
        sheet = parse('window { margin: 0; title: "Main"; bg: #08090E; } {}')
        assert from_json(to_json(sheet)) == sheet

    def test_tables_are_copies(self) -> None:
        sheet = from_json('{"a": {"x": "1"}}')
        assert sheet == {"a": {"x": "1"}}
        assert type(sheet["a"]) is dict

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("{not json")

    def test_invalid_json_chains_cause(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            from_json("[")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_top_level_must_be_object(self) -> None:
        with pytest.raises(SerializationError, match="got list"):
            from_json('[{"a": "b"}]')

    def test_table_must_be_object(self) -> None:
        with pytest.raises(SerializationError, match="Selector 'a'"):
            from_json('{"a": "red"}')

    def test_values_must_be_strings(self) -> None:
        with pytest.raises(SerializationError, match="expected a string, got int"):
            from_json('{"a": {"size": 14}}')
