"""Unit tests for WHERE / HAVING clause accumulation."""

from __future__ import annotations

import pytest

from bindql.compile.clause import Clause, ClauseState, wrap_like
from bindql.compile.expander import PatternExpander
from bindql.errors import CallOrderError


def test_first_condition_gets_keyword():
    c = Clause.where().chain("", "age", ">", 18)
    assert c.text == "WHERE age > ?"
    assert c.ledger.snapshot() == (18,)
    assert c.state is ClauseState.INITIALIZED


def test_and_or_chaining_order():
    c = (
        Clause.where()
        .chain("", "age", ">", 18)
        .chain("AND", "age", "<", 65)
        .chain("OR", "vip", "=", True)
    )
    assert c.text == "WHERE age > ? AND age < ? OR vip = ?"
    assert c.ledger.snapshot() == (18, 65, True)
    assert c.state is ClauseState.CHAINED


def test_connector_is_case_insensitive():
    c = Clause.having().chain("", "COUNT(*)", ">", 1).chain("or", "SUM(x)", "<", 9)
    assert c.text == "HAVING COUNT(*) > ? OR SUM(x) < ?"


def test_like_wraps_value_once():
    c = Clause.where().chain("", "name", "LIKE", "bob")
    assert c.text == "WHERE name LIKE ?"
    assert c.ledger.snapshot() == ("%bob%",)


def test_like_wraps_once_with_repeated_placeholders():
    c = Clause.where().chain("", "name", "LIKE", "bob", "({cam} {rel} {val} OR nick {rel} {val})")
    assert c.text == "WHERE (name LIKE ? OR nick LIKE ?)"
    assert c.ledger.snapshot() == ("%bob%", "%bob%")


def test_like_wrapping_skipped_without_placeholder():
    c = Clause.where().chain("", "name", "LIKE", "bob", "{cam} IS NOT NULL")
    assert c.text == "WHERE name IS NOT NULL"
    assert c.ledger.snapshot() == ()


def test_wrap_like_leaves_other_operators():
    assert wrap_like("=", "bob") == "bob"
    assert wrap_like("like", "bob") == "%bob%"
    assert wrap_like("NOT LIKE", "bob") == "bob"


def test_between_binds_value_twice_in_text_order():
    c = Clause.where().chain("", "id", "=", 3).chain("AND", "age", "", 30, "{cam} BETWEEN {val} AND {val}")
    assert c.text == "WHERE id = ? AND age BETWEEN ? AND ?"
    assert c.ledger.snapshot() == (3, 30, 30)


def test_chain_before_start_raises():
    with pytest.raises(CallOrderError) as exc_info:
        Clause.where().chain("AND", "age", ">", 18)
    assert exc_info.value.operation == "where_and"
    assert exc_info.value.state == "EMPTY"


def test_second_start_raises():
    c = Clause.having().chain("", "COUNT(*)", ">", 1)
    with pytest.raises(CallOrderError) as exc_info:
        c.chain("", "COUNT(*)", "<", 9)
    assert exc_info.value.operation == "having"


def test_rejected_call_leaves_clause_unchanged():
    c = Clause.where().chain("", "age", ">", 18)
    with pytest.raises(CallOrderError):
        c.chain("", "age", "<", 65)
    assert c.text == "WHERE age > ?"
    assert c.ledger.snapshot() == (18,)


def test_unknown_connector_raises():
    with pytest.raises(ValueError):
        Clause.where().chain("", "a", "=", 1).chain("XOR", "b", "=", 2)


def test_placeholder_parity_after_every_call():
    patterns = [
        ("", "{cam} {rel} {val}"),
        ("AND", "{cam} BETWEEN {val} AND {val}"),
        ("OR", "{cam} IS NULL"),
        ("AND", "({cam} {rel} {val} OR {cam} {rel} {val} OR {cam} {rel} {val})"),
        ("OR", "{cam} {rel} {val}"),
    ]
    c = Clause.where()
    for i, (connector, pattern) in enumerate(patterns):
        c = c.chain(connector, f"f{i}", "=", i, pattern)
        assert c.text.count("?") == len(c.ledger)
    assert c.ledger.snapshot() == (0, 1, 1, 3, 3, 3, 4)


def test_uses_expander_placeholder():
    c = Clause.where(PatternExpander("%s")).chain("", "id", "=", 1)
    assert c.text == "WHERE id = %s"


def test_add_condition_is_the_unchecked_primitive():
    c = Clause.where().add_condition("a", "=", 1).add_condition("b", "=", 2, connector="AND")
    assert c.text == "WHERE a = ? AND b = ?"
    assert c.ledger.snapshot() == (1, 2)
