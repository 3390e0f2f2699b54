"""UPDATE builder."""
from __future__ import annotations

from typing import Any

from bindql.compile.base import SQLDialect
from bindql.compile.clause import Clause
from bindql.compile.expander import BoundFragment, Expansion
from bindql.compile.ledger import BindLedger
from bindql.driver.base import Driver
from bindql.errors import CallOrderError
from bindql.schema.pattern import DEFAULT_VALUE_PATTERN
from bindql.statements.base import StatementBuilder, WhereMixin


class Update(WhereMixin, StatementBuilder):
    """Builds ``UPDATE table SET … [WHERE …]``.

    SET assignments and WHERE conditions keep separate ledgers.  Because the
    SET list always precedes WHERE in the text, SET values take positions
    ``1..S`` and WHERE values ``S+1..S+W`` no matter how the calls were
    interleaved.
    """

    def __init__(self, driver: Driver | None, dialect: SQLDialect, table: str) -> None:
        super().__init__(driver, dialect, f"UPDATE {table}")
        self._sets = BoundFragment()
        self._where = Clause.where(self._expander)

    def set(self, field: str, value: Any, pattern: str = DEFAULT_VALUE_PATTERN) -> Update:
        """Append ``field = <pattern>`` to the SET list.

        Args:
            field: Caller-trusted column name.
            value: Bound once per ``{val}`` in ``pattern``.
            pattern: Template for the right-hand side, e.g. ``"{cam} + {val}"``.
        """
        rhs = self._expander.expand(pattern, field, "=")
        assignment = Expansion(f"{field} = {rhs.text}", rhs.placeholder_count)
        self._sets = self._sets.append(assignment, value)
        return self

    def _segments(self) -> list[str]:
        if not self._sets:
            raise CallOrderError(
                "UPDATE needs at least one set() call before it can be compiled.",
                operation="execute",
            )
        return [self._base_sql, f"SET {self._sets.text}", self._where.text]

    def _ledger(self) -> BindLedger:
        return self._sets.ledger.extend(self._where.ledger)

    def execute(self) -> int:
        """Run the UPDATE and return the affected-row count."""
        return self._run().rowcount
