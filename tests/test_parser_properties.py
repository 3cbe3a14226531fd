"""Property-based tests for the parser using Hypothesis.

Generates well-formed stylesheets and checks the parsed mapping against a
model built with plain dict upserts; arbitrary text must never raise.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from estilo import Parser

identifiers = st.from_regex(r"[a-z][a-z0-9-]{0,8}", fullmatch=True)

# (source text, stored value) pairs for each value kind
values = st.one_of(
    identifiers.map(lambda v: (v, v)),
    st.from_regex(r"[0-9]{1,5}", fullmatch=True).map(lambda v: (v, v)),
    st.from_regex(r"[0-9a-fA-F]{6}", fullmatch=True).map(lambda v: (f"#{v}", v)),
    st.text(alphabet="ab xy:;{}#/*", max_size=10).map(lambda v: (f'"{v}"', v)),
)

declarations = st.lists(st.tuples(identifiers, values), max_size=6)
rules = st.lists(st.tuples(identifiers, declarations), max_size=6)


def render(rule_list: list, separator: str) -> str:
    parts = []
    for selector, decls in rule_list:
        body = separator.join(f"{name}:{separator}{source};" for name, (source, _) in decls)
        parts.append(f"{selector}{separator}{{{separator}{body}{separator}}}")
    return separator.join(parts)


def expected(rule_list: list) -> dict[str, dict[str, str]]:
    sheet: dict[str, dict[str, str]] = {}
    for selector, decls in rule_list:
        table = sheet.setdefault(selector, {})
        for name, (_, stored) in decls:
            table[name] = stored
    return sheet


class TestWellFormedProperties:
    """Well-formed input parses to exactly the upserted model."""

    @given(rules, st.sampled_from([" ", "\n", "\t\n  ", " /* note */ "]))
    @settings(max_examples=200)
    def test_matches_upsert_model(self, rule_list: list, separator: str) -> None:
        parser = Parser(render(rule_list, separator))
        sheet = parser.parse()

        assert parser.had_error is False
        assert sheet == expected(rule_list)

    @given(rules)
    @settings(max_examples=100)
    def test_values_are_strings(self, rule_list: list) -> None:
        sheet = Parser(render(rule_list, " ")).parse()
        for table in sheet.values():
            assert all(isinstance(value, str) for value in table.values())


class TestRobustness:
    """Arbitrary input always terminates without raising."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        assert parser.had_error == (parser.last_error is not None)

    @given(st.text(alphabet='ab1 :;{}#"/*@\n', max_size=200))
    @settings(max_examples=300)
    def test_grammar_characters(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        if parser.had_error:
            assert parser.last_error.message.startswith("Expected ")

    @given(rules, rules)
    @settings(max_examples=100)
    def test_no_rules_after_error(self, before: list, after: list) -> None:
        source = render(before, " ") + " broken { x 1; } " + render(after, " ")
        parser = Parser(source)
        sheet = parser.parse()

        assert parser.had_error is True
        model = expected(before)
        model.setdefault("broken", {})
        assert sheet == model
