"""Driver implementation backed by a SQLAlchemy :class:`~sqlalchemy.engine.Engine`.

Statements run through :meth:`~sqlalchemy.engine.Connection.exec_driver_sql`,
so the SQL text reaches the DBAPI cursor untouched and the bound values are
passed positionally in the driver's own paramstyle.  Each execution runs in
its own ``engine.begin()`` block: committed on success, rolled back and
re-raised on failure.  :meth:`SQLAlchemyDriver.execute_script` runs a
sequence of statements inside one such block, so later statements see the
session state (variables, temp tables) the earlier ones created.

Example::

    from sqlalchemy import create_engine
    from bindql.driver.sqlalchemy import SQLAlchemyDriver

    driver = SQLAlchemyDriver(create_engine("sqlite:///shop.db"))
    stmt = driver.prepare("SELECT * FROM orders WHERE id = ?")
    driver.bind(stmt, 1, 42)
    driver.execute(stmt).rows
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import event

from bindql.driver.base import PreparedStatement, StatementResult

if TYPE_CHECKING:
    from sqlalchemy.engine import CursorResult, Engine

logger = logging.getLogger(__name__)


class SQLAlchemyDriver:
    """Runs prepared statements on a SQLAlchemy engine.

    Args:
        engine: The engine to execute on.  The driver owns it only as far as
            :meth:`close` disposing its pool.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._last_result: StatementResult | None = None
        self._session_hooks: list[Any] = []

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dialect_name(self) -> str:
        """SQLAlchemy's name for the backend (``'mysql'``, ``'mssql'``, ...)."""
        return self._engine.dialect.name

    def prepare(self, sql: str) -> PreparedStatement:
        return PreparedStatement(sql)

    def bind(self, statement: PreparedStatement, position: int, value: Any) -> None:
        statement.bind(position, value)

    def execute(self, statement: PreparedStatement) -> StatementResult:
        params = statement.parameters()
        logger.debug("Executing on %s: %s (%d params)", self.dialect_name, statement.sql, len(params))
        with self._engine.begin() as conn:
            if params:
                result = conn.exec_driver_sql(statement.sql, params)
            else:
                result = conn.exec_driver_sql(statement.sql)
            outcome = self._collect(result)
        self._last_result = outcome
        return outcome

    def execute_script(self, statements: Sequence[str]) -> list[StatementResult]:
        """Run unparameterized statements in order on a single connection."""
        outcomes: list[StatementResult] = []
        with self._engine.begin() as conn:
            for sql in statements:
                logger.debug("Executing on %s: %s", self.dialect_name, sql)
                outcomes.append(self._collect(conn.exec_driver_sql(sql)))
        if outcomes:
            self._last_result = outcomes[-1]
        return outcomes

    def add_session_statements(self, statements: Sequence[str]) -> None:
        """Run ``statements`` once on every pooled DBAPI connection.

        Connections already in the pool pick them up on their next checkout,
        new ones on their first.
        """
        statements = list(statements)
        key = f"bindql.session.{id(statements)}"

        def apply(dbapi_connection: Any, connection_record: Any, connection_proxy: Any) -> None:
            if connection_record.info.get(key):
                return
            cursor = dbapi_connection.cursor()
            try:
                for sql in statements:
                    cursor.execute(sql)
            finally:
                cursor.close()
            connection_record.info[key] = True

        event.listen(self._engine, "checkout", apply)
        self._session_hooks.append(apply)
        logger.debug("Registered %d session statement(s) on %s", len(statements), self.dialect_name)

    def last_insert_id(self) -> Any:
        """Return the id reported by the most recent execution, if any."""
        if self._last_result is None:
            return None
        return self._last_result.lastrowid

    def close(self) -> None:
        for hook in self._session_hooks:
            event.remove(self._engine, "checkout", hook)
        self._session_hooks.clear()
        self._engine.dispose()

    @staticmethod
    def _collect(result: CursorResult) -> StatementResult:
        if result.returns_rows:
            rows = [dict(row) for row in result.mappings().all()]
            return StatementResult(rowcount=len(rows), rows=rows)
        # pyodbc cursors have no lastrowid attribute at all.
        lastrowid = result.lastrowid if hasattr(result.context.cursor, "lastrowid") else None
        return StatementResult(rowcount=result.rowcount, lastrowid=lastrowid)
