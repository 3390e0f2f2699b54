"""DELETE builder."""
from __future__ import annotations

from bindql.compile.base import SQLDialect
from bindql.compile.clause import Clause
from bindql.compile.ledger import BindLedger
from bindql.driver.base import Driver
from bindql.statements.base import StatementBuilder, WhereMixin


class Delete(WhereMixin, StatementBuilder):
    """Builds ``DELETE FROM table [WHERE …]``.

    Without a ``where`` call every row of the table is deleted.
    """

    def __init__(self, driver: Driver | None, dialect: SQLDialect, table: str) -> None:
        super().__init__(driver, dialect, f"DELETE FROM {table}")
        self._where = Clause.where(self._expander)

    def _segments(self) -> list[str]:
        return [self._base_sql, self._where.text]

    def _ledger(self) -> BindLedger:
        return self._where.ledger

    def execute(self) -> int:
        return self._run().rowcount
