"""bindQL compilation layer: templates + values → positional SQL."""
from bindql.compile.base import CompiledStatement, SQLDialect
from bindql.compile.clause import Clause, ClauseState
from bindql.compile.expander import BoundFragment, Expansion, PatternExpander
from bindql.compile.ledger import BindLedger
from bindql.compile.mysql import MySQLDialect
from bindql.compile.postgres import PostgresDialect
from bindql.compile.sqlite import SQLiteDialect
from bindql.compile.sqlserver import SQLServerDialect

__all__ = [
    "BindLedger",
    "BoundFragment",
    "Clause",
    "ClauseState",
    "CompiledStatement",
    "Expansion",
    "MySQLDialect",
    "PatternExpander",
    "PostgresDialect",
    "SQLDialect",
    "SQLiteDialect",
    "SQLServerDialect",
]
