"""Integration tests: build → execute against a real MySQL instance.

Uses BINDQL_MYSQL_URL (e.g. ``mysql+pymysql://root:pw@localhost/bindql_test``).
Skips all tests if the env var is unset or the connection fails.
"""
from __future__ import annotations

import os

import pytest

pytest.importorskip("pymysql", reason="pymysql required for MySQL integration tests")

from bindql import MySQLDialect, connect  # noqa: E402

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def my_conn():
    url = os.environ.get("BINDQL_MYSQL_URL")
    if not url:
        pytest.skip("BINDQL_MYSQL_URL not set")
    conn = connect(url)
    try:
        conn.query("DROP TABLE IF EXISTS bindql_people")
    except Exception as e:
        pytest.skip(f"Cannot connect to MySQL: {e}")
    conn.query(
        "CREATE TABLE bindql_people ("
        " id INT AUTO_INCREMENT PRIMARY KEY,"
        " name VARCHAR(64) NOT NULL,"
        " age INT"
        ")"
    )
    yield conn
    conn.query("DROP TABLE IF EXISTS bindql_people")
    conn.close()


def test_dialect_is_mysql(my_conn):
    assert isinstance(my_conn.dialect, MySQLDialect)


def test_round_trip(my_conn):
    my_conn.set_utf8()
    assert my_conn.insert("bindql_people", "name, age").value("Ana").value(31).execute() == 1
    assert my_conn.insert("bindql_people", "name, age").value("Ben").value(45).execute() == 1

    rows = my_conn.select("bindql_people", "name").where("name", "LIKE", "n").orderby("name").execute()
    assert [r["name"] for r in rows] == ["Ana", "Ben"]

    n = my_conn.update("bindql_people").set("age", 1, "{cam} + {val}").where("name", "=", "Ana").execute()
    assert n == 1
    assert my_conn.select("bindql_people", "age").where("name", "=", "Ana").execute() == [{"age": 32}]

    assert my_conn.delete("bindql_people").where("age", ">", 40).execute() == 1
    my_conn.reset_auto_increment("bindql_people", "id")
    assert my_conn.select("bindql_people", "id").execute() == [{"id": 1}]
