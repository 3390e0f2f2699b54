"""PostgreSQL dialect."""

from __future__ import annotations

from bindql.compile.base import SQLDialect


class PostgresDialect(SQLDialect):
    """PostgreSQL-flavoured positional placeholders.

    Placeholder style: ``%s`` – compatible with ``psycopg2`` and
    ``psycopg`` positional-parameter execution.

    Note: with ``%s`` drivers a literal ``%`` written directly in caller
    SQL text must be doubled.  Values bound through the builders (including
    ``LIKE`` wildcards) are unaffected.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    @property
    def placeholder(self) -> str:
        return "%s"
