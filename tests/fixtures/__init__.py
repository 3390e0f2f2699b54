"""Test fixtures: a recording driver and the sample DDL."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from bindql.driver.base import PreparedStatement, StatementResult

_FIXTURES_DIR = Path(__file__).parent


def load_ddl() -> list[str]:
    """Return the sample schema as individual SQLite DDL statements."""
    text = (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
    return [stmt.strip() for stmt in text.split(";") if stmt.strip()]


class RecordingDriver:
    """In-memory :class:`~bindql.driver.base.Driver` that records every call.

    Args:
        rowcount: Row count reported for every execution.
        rows: Rows returned for every execution (``None`` for DML).
        error: If set, raised by :meth:`execute` after recording the call.
    """

    def __init__(
        self,
        rowcount: int = 1,
        rows: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.rowcount = rowcount
        self.rows = rows
        self.error = error
        self.prepared: list[str] = []
        self.bound: list[tuple[int, Any]] = []
        self.executed: list[tuple[str, tuple[Any, ...]]] = []
        self.lastrowid: Any = None

    def prepare(self, sql: str) -> PreparedStatement:
        self.prepared.append(sql)
        return PreparedStatement(sql)

    def bind(self, statement: PreparedStatement, position: int, value: Any) -> None:
        self.bound.append((position, value))
        statement.bind(position, value)

    def execute(self, statement: PreparedStatement) -> StatementResult:
        self.executed.append((statement.sql, statement.parameters()))
        if self.error is not None:
            raise self.error
        return StatementResult(rowcount=self.rowcount, rows=self.rows, lastrowid=self.lastrowid)

    def execute_script(self, statements: Sequence[str]) -> list[StatementResult]:
        return [self.execute(self.prepare(sql)) for sql in statements]

    def last_insert_id(self) -> Any:
        return self.lastrowid

    @property
    def last(self) -> tuple[str, tuple[Any, ...]]:
        return self.executed[-1]
