"""Dialect abstractions: CompiledStatement and the SQLDialect ABC.

The Template Method pattern (GoF) is used:
- ``SQLDialect`` fixes what a backend must provide (placeholder token,
  canonical name) and supplies refusing defaults for backend-specific
  session helpers.
- ``MySQLDialect``, ``PostgresDialect``, ``SQLServerDialect`` and
  ``SQLiteDialect`` override the steps that differ.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from bindql.errors import UnsupportedFeatureError


@dataclass(frozen=True)
class CompiledStatement:
    """The output of compiling a statement builder.

    Attributes:
        sql: The finalized SQL text with positional placeholders.
        params: Values for the placeholders; ``params[i]`` binds to
            position ``i + 1``.
        dialect: The dialect the placeholders were rendered for.
    """

    sql: str
    params: tuple[Any, ...]
    dialect: str

    @property
    def positions(self) -> list[tuple[int, Any]]:
        """``(position, value)`` pairs with 1-based positions."""
        return list(enumerate(self.params, start=1))


class SQLDialect(ABC):
    """Abstract base for backend dialects.

    Statement builders only ever ask a dialect for its placeholder token;
    the :class:`~bindql.connection.Connection` facade additionally asks for
    the session statements behind its MySQL-only helpers.
    """

    @property
    @abstractmethod
    def placeholder(self) -> str:
        """Return the positional placeholder token for the DBAPI driver.

        ``'?'`` for qmark drivers (sqlite3, pyodbc), ``'%s'`` for
        format/pyformat drivers (PyMySQL, psycopg).
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'mysql'``, ``'sqlite'``, ...)."""

    def utf8_statements(self) -> list[str]:
        """Statements that switch the session character set to UTF-8."""
        raise UnsupportedFeatureError("set_utf8", self.dialect_name)

    def group_by_statements(self) -> list[str]:
        """Statements that relax strict GROUP BY checking for the session."""
        raise UnsupportedFeatureError("support_group_by", self.dialect_name)

    def reset_auto_increment_statements(self, table: str, column: str) -> list[str]:
        """Statements that renumber ``column`` from 1 and reset the counter.

        Args:
            table: Caller-trusted table name.
            column: Caller-trusted auto-increment column name.
        """
        raise UnsupportedFeatureError("reset_auto_increment", self.dialect_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
