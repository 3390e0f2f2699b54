"""SQL Server dialect."""
from __future__ import annotations

from bindql.compile.base import SQLDialect


class SQLServerDialect(SQLDialect):
    """SQL Server-flavoured positional placeholders.

    Placeholder style: ``?`` – the qmark style used by ``pyodbc``.

    Note: SQL Server has no ``LIMIT``; callers targeting it pass a
    ``TOP``-style column list or an ``OFFSET … FETCH`` expression to
    :meth:`~bindql.statements.select.Select.orderby` instead.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlserver"

    @property
    def placeholder(self) -> str:
        return "?"
