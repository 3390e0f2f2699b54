"""bindQL – incremental SQL statement builders with positional binding.

Build statements. Bind values.

Every value passed to ``value``, ``set``, ``where`` or ``having`` is bound
as a positional parameter; only identifiers and caller-written templates
reach the SQL text.

Public API
----------
``connect``
    Open a :class:`Connection` from :class:`ConnectionOptions`, a mapping, or
    a SQLAlchemy URL.

``Connection``
    Factory for ``insert`` / ``select`` / ``update`` / ``delete`` builders.

Example::

    import bindql

    with bindql.connect("sqlite:///shop.db") as conn:
        conn.update("users").set("name", "Alice").where("id", "=", 3).execute()
        rows = (
            conn.select("users")
            .where("age", ">", 18)
            .where_or("vip", "=", True)
            .execute()
        )

Extensibility
-------------
New dialects can be registered via::

    from bindql.compile.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(SQLDialect):
        ...
"""

from __future__ import annotations

from bindql.compile.base import CompiledStatement, SQLDialect
from bindql.compile.clause import Clause, ClauseState
from bindql.compile.expander import Expansion, PatternExpander
from bindql.compile.ledger import BindLedger
from bindql.compile.mysql import MySQLDialect
from bindql.compile.postgres import PostgresDialect
from bindql.compile.registry import DialectFactory
from bindql.compile.sqlite import SQLiteDialect
from bindql.compile.sqlserver import SQLServerDialect
from bindql.connection import Connection, connect
from bindql.driver.base import Driver, PreparedStatement, StatementResult
from bindql.driver.sqlalchemy import SQLAlchemyDriver
from bindql.errors import (
    BindError,
    BindQLError,
    CallOrderError,
    ConfigurationError,
    UnsupportedFeatureError,
)
from bindql.schema.options import ConnectionOptions
from bindql.schema.pattern import Pattern
from bindql.statements import Delete, Insert, Select, StatementBuilder, Update

# ---------------------------------------------------------------------------
# Register built-in dialects under their option names and SQLAlchemy names
# ---------------------------------------------------------------------------

DialectFactory.register_class(MySQLDialect, "mysql", "mariadb")
DialectFactory.register_class(PostgresDialect, "postgres", "postgresql")
DialectFactory.register_class(SQLServerDialect, "sqlserver", "sqlsrv", "mssql")
DialectFactory.register_class(SQLiteDialect, "sqlite")

__all__ = [
    # Entry points
    "connect",
    "Connection",
    "ConnectionOptions",
    # Builders
    "StatementBuilder",
    "Insert",
    "Select",
    "Update",
    "Delete",
    # Compilation
    "BindLedger",
    "Clause",
    "ClauseState",
    "CompiledStatement",
    "Expansion",
    "Pattern",
    "PatternExpander",
    # Dialects
    "DialectFactory",
    "SQLDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLServerDialect",
    "SQLiteDialect",
    # Driver
    "Driver",
    "PreparedStatement",
    "SQLAlchemyDriver",
    "StatementResult",
    # Errors
    "BindQLError",
    "BindError",
    "CallOrderError",
    "ConfigurationError",
    "UnsupportedFeatureError",
]
