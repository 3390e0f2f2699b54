"""MySQL dialect."""

from __future__ import annotations

from bindql.compile.base import SQLDialect


class MySQLDialect(SQLDialect):
    """MySQL-flavoured positional placeholders and session helpers.

    Placeholder style: ``%s`` – compatible with ``PyMySQL`` and
    ``mysql-connector-python`` positional-parameter execution.

    Note: with ``%s`` drivers a literal ``%`` written directly in caller
    SQL text must be doubled.  Values bound through the builders (including
    ``LIKE`` wildcards) are unaffected.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    @property
    def placeholder(self) -> str:
        return "%s"

    def utf8_statements(self) -> list[str]:
        return ["SET NAMES 'utf8'"]

    def group_by_statements(self) -> list[str]:
        return ["SET sql_mode=(SELECT REPLACE(@@sql_mode,'ONLY_FULL_GROUP_BY',''))"]

    def reset_auto_increment_statements(self, table: str, column: str) -> list[str]:
        # Three separate round trips; PyMySQL rejects multi-statement strings
        # unless the client flag is set.
        return [
            "SET @num := 0",
            f"UPDATE {table} SET {column} = @num := (@num+1)",
            f"ALTER TABLE {table} AUTO_INCREMENT = 1",
        ]
