"""Shared statement-builder machinery.

``StatementBuilder`` is the orchestrator every statement kind inherits: it
holds the driver, the dialect and the expander, joins the non-empty text
segments a subclass supplies, and drives the prepare / bind / execute
round trip.

WHERE and HAVING are *not* part of the base class.  Builders that filter
hold :class:`~bindql.compile.clause.Clause` values and expose them through
the small :class:`WhereMixin` / :class:`HavingMixin` call surfaces, so
INSERT carries no clause state at all.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from bindql.compile.base import CompiledStatement, SQLDialect
from bindql.compile.clause import Clause
from bindql.compile.expander import PatternExpander
from bindql.compile.ledger import BindLedger
from bindql.driver.base import Driver, StatementResult
from bindql.errors import ConfigurationError
from bindql.schema.pattern import DEFAULT_CONDITION_PATTERN

logger = logging.getLogger(__name__)

_W = TypeVar("_W", bound="WhereMixin")
_H = TypeVar("_H", bound="HavingMixin")


class StatementBuilder(ABC):
    """Base class for INSERT / SELECT / UPDATE / DELETE builders.

    Args:
        driver: Driver that runs the statement; ``None`` allows
            :meth:`compile` but not :meth:`execute`.
        dialect: Dialect supplying the placeholder token.
        base_sql: Leading fragment, e.g. ``'DELETE FROM users'``.
    """

    def __init__(self, driver: Driver | None, dialect: SQLDialect, base_sql: str) -> None:
        self._driver = driver
        self._dialect = dialect
        self._expander = PatternExpander(dialect.placeholder)
        self._base_sql = base_sql

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _segments(self) -> list[str]:
        """Text segments in final order; empty strings are skipped."""

    @abstractmethod
    def _ledger(self) -> BindLedger:
        """All bound values, in the order their placeholders appear."""

    @abstractmethod
    def execute(self) -> Any:
        """Run the statement through the driver."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self) -> CompiledStatement:
        """Finalize SQL text and parameters without touching builder state."""
        sql = " ".join(seg for seg in self._segments() if seg)
        return CompiledStatement(
            sql=sql,
            params=self._ledger().snapshot(),
            dialect=self._dialect.dialect_name,
        )

    @property
    def sql(self) -> str:
        return self.compile().sql

    @property
    def params(self) -> tuple[Any, ...]:
        return self.compile().params

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._base_sql!r}>"

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _run(self) -> StatementResult:
        if self._driver is None:
            raise ConfigurationError(
                f"{type(self).__name__} has no driver attached; use compile() "
                "or build it from a Connection."
            )
        compiled = self.compile()
        statement = self._driver.prepare(compiled.sql)
        for position, value in compiled.positions:
            self._driver.bind(statement, position, value)
        logger.debug("%s: %s (%d bound)", type(self).__name__, compiled.sql, len(compiled.params))
        return self._driver.execute(statement)


class WhereMixin:
    """``where`` / ``where_and`` / ``where_or`` over a ``_where`` clause."""

    _where: Clause

    def where(
        self: _W,
        field: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> _W:
        """Start the WHERE clause with one condition."""
        self._where = self._where.chain("", field, operator, value, pattern)
        return self

    def where_and(
        self: _W,
        field: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> _W:
        """Add a condition joined with ``AND``."""
        self._where = self._where.chain("AND", field, operator, value, pattern)
        return self

    def where_or(
        self: _W,
        field: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> _W:
        """Add a condition joined with ``OR``."""
        self._where = self._where.chain("OR", field, operator, value, pattern)
        return self


class HavingMixin:
    """``having`` / ``having_and`` / ``having_or`` over a ``_having`` clause."""

    _having: Clause

    def having(
        self: _H,
        field: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> _H:
        self._having = self._having.chain("", field, operator, value, pattern)
        return self

    def having_and(
        self: _H,
        field: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> _H:
        self._having = self._having.chain("AND", field, operator, value, pattern)
        return self

    def having_or(
        self: _H,
        field: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> _H:
        self._having = self._having.chain("OR", field, operator, value, pattern)
        return self
