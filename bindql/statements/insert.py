"""INSERT builder."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from bindql.compile.base import SQLDialect
from bindql.compile.expander import BoundFragment
from bindql.compile.ledger import BindLedger
from bindql.driver.base import Driver
from bindql.schema.pattern import DEFAULT_VALUE_PATTERN
from bindql.statements.base import StatementBuilder


def column_list(columns: str | Sequence[str]) -> str:
    """Render a column list given as text or as a sequence of names."""
    if isinstance(columns, str):
        return columns
    return ", ".join(columns)


class Insert(StatementBuilder):
    """Builds ``INSERT INTO table(columns) VALUES(...)``.

    Example::

        conn.insert("users", ["name", "created"]) \\
            .value("Alice") \\
            .value("2024-01-01", "DATE({val})") \\
            .execute()
    """

    def __init__(
        self,
        driver: Driver | None,
        dialect: SQLDialect,
        table: str,
        columns: str | Sequence[str],
    ) -> None:
        super().__init__(driver, dialect, f"INSERT INTO {table}({column_list(columns)})")
        self._values = BoundFragment()

    def value(self, val: Any, pattern: str = DEFAULT_VALUE_PATTERN) -> Insert:
        """Append one entry to the VALUES list.

        Args:
            val: The value to bind; bound once per ``{val}`` in ``pattern``.
            pattern: Template for the entry, e.g. ``"UPPER({val})"``.  There
                is no field or operator here, so ``{cam}`` and ``{rel}`` stay
                as literal text.
        """
        self._values = self._values.append(self._expander.expand(pattern), val)
        return self

    def _segments(self) -> list[str]:
        return [self._base_sql, f"VALUES({self._values.text})"]

    def _ledger(self) -> BindLedger:
        return self._values.ledger

    def execute(self) -> int:
        """Run the INSERT and return the affected-row count."""
        return self._run().rowcount
