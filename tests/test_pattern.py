"""Unit tests for template parsing and expansion."""

from __future__ import annotations

from bindql.compile.expander import BoundFragment, Expansion, PatternExpander
from bindql.schema.pattern import (
    DEFAULT_CONDITION_PATTERN,
    FieldToken,
    OperatorToken,
    Pattern,
    TextToken,
    ValueToken,
)


def test_default_condition_pattern_tokens():
    p = Pattern.parse(DEFAULT_CONDITION_PATTERN)
    assert p.tokens == (
        FieldToken(),
        TextToken(" "),
        OperatorToken(),
        TextToken(" "),
        ValueToken(),
    )
    assert p.value_count == 1


def test_between_pattern_counts_two_values():
    p = Pattern.parse("{cam} BETWEEN {val} AND {val}")
    assert p.value_count == 2
    assert p.tokens[0] == FieldToken()
    assert p.tokens[-1] == ValueToken()


def test_unknown_markers_stay_text():
    p = Pattern.parse("{foo} = {val}")
    assert p.tokens == (TextToken("{foo} = "), ValueToken())


def test_pattern_without_markers():
    p = Pattern.parse("deleted_at IS NULL")
    assert p.tokens == (TextToken("deleted_at IS NULL"),)
    assert p.value_count == 0


def test_parse_is_cached():
    assert Pattern.parse("{cam} = {val}") is Pattern.parse("{cam} = {val}")


def test_expand_default_pattern():
    text, count = PatternExpander().expand(DEFAULT_CONDITION_PATTERN, "age", ">")
    assert text == "age > ?"
    assert count == 1


def test_expand_substitutes_every_field_occurrence():
    result = PatternExpander().expand("({cam} IS NULL OR {cam} {rel} {val})", "deleted", "<")
    assert result == Expansion("(deleted IS NULL OR deleted < ?)", 1)


def test_expand_repeated_value_marker():
    result = PatternExpander().expand("{cam} BETWEEN {val} AND {val}", "age", "")
    assert result.text == "age BETWEEN ? AND ?"
    assert result.placeholder_count == 2


def test_expand_without_markers_returns_template():
    assert PatternExpander().expand("1 = 1") == Expansion("1 = 1", 0)


def test_expand_keeps_markers_without_substitute():
    result = PatternExpander().expand("COALESCE({cam}, {val}) {rel}")
    assert result == Expansion("COALESCE({cam}, ?) {rel}", 1)


def test_expand_empty_substitutes_are_applied():
    assert PatternExpander().expand("{cam}{rel}{val}", "", "").text == "?"


def test_expand_uses_dialect_placeholder():
    text, count = PatternExpander("%s").expand("DATE({val})")
    assert text == "DATE(%s)"
    assert count == 1


def test_bound_fragment_separator_only_after_first():
    expander = PatternExpander()
    frag = BoundFragment()
    frag = frag.append(expander.expand("{val}"), "a")
    frag = frag.append(expander.expand("UPPER({val})"), "b")
    assert frag.text == "?, UPPER(?)"
    assert frag.ledger.snapshot() == ("a", "b")


def test_bound_fragment_binds_nothing_for_literal_pattern():
    frag = BoundFragment().append(PatternExpander().expand("NOW()"), "ignored")
    assert frag.text == "NOW()"
    assert len(frag.ledger) == 0
