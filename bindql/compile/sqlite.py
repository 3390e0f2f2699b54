"""SQLite dialect."""
from __future__ import annotations

from bindql.compile.base import SQLDialect


class SQLiteDialect(SQLDialect):
    """SQLite-flavoured positional placeholders.

    Placeholder style: ``?`` – Python's built-in ``sqlite3`` qmark style
    (``cursor.execute(sql, tuple)``).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    @property
    def placeholder(self) -> str:
        return "?"
