"""SELECT builder."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from bindql.compile.base import SQLDialect
from bindql.compile.clause import Clause
from bindql.compile.ledger import BindLedger
from bindql.driver.base import Driver
from bindql.statements.base import HavingMixin, StatementBuilder, WhereMixin
from bindql.statements.insert import column_list


class Select(WhereMixin, HavingMixin, StatementBuilder):
    """Builds ``SELECT columns FROM table`` plus optional clauses.

    Segments are always emitted in this order, skipping empty ones::

        SELECT … FROM …  JOIN …  WHERE …  GROUP BY …  HAVING …  ORDER BY …  LIMIT …

    Joins accumulate (one per line); ``groupby``, ``orderby`` and ``limit``
    keep only the latest call.  WHERE values bind before HAVING values,
    matching their placeholder order in the text.
    """

    def __init__(
        self,
        driver: Driver | None,
        dialect: SQLDialect,
        table: str,
        columns: str | Sequence[str] = "*",
    ) -> None:
        super().__init__(driver, dialect, f"SELECT {column_list(columns)} FROM {table}")
        self._joins: list[str] = []
        self._where = Clause.where(self._expander)
        self._groupby = ""
        self._having = Clause.having(self._expander)
        self._orderby = ""
        self._limit = ""

    # ------------------------------------------------------------------
    # Joins
    # ------------------------------------------------------------------

    def innerjoin(self, expr: str) -> Select:
        """Append ``INNER JOIN expr`` (e.g. ``"orders o ON o.user_id = u.id"``)."""
        self._joins.append(f"INNER JOIN {expr}")
        return self

    def leftjoin(self, expr: str) -> Select:
        self._joins.append(f"LEFT JOIN {expr}")
        return self

    def rightjoin(self, expr: str) -> Select:
        self._joins.append(f"RIGHT JOIN {expr}")
        return self

    # ------------------------------------------------------------------
    # Single-assignment clauses
    # ------------------------------------------------------------------

    def groupby(self, expr: str) -> Select:
        self._groupby = f"GROUP BY {expr}"
        return self

    def orderby(self, expr: str) -> Select:
        self._orderby = f"ORDER BY {expr}"
        return self

    def limit(self, expr: str | int) -> Select:
        self._limit = f"LIMIT {expr}"
        return self

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def _segments(self) -> list[str]:
        return [
            self._base_sql,
            "\n".join(self._joins),
            self._where.text,
            self._groupby,
            self._having.text,
            self._orderby,
            self._limit,
        ]

    def _ledger(self) -> BindLedger:
        return self._where.ledger.extend(self._having.ledger)

    def execute(self) -> list[dict[str, Any]]:
        """Run the query and return every row as a field-name → value dict.

        Rows keep the driver's order; no match gives an empty list.
        """
        return list(self._run().rows or [])
