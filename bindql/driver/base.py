"""The driver contract consumed by statement builders.

Builders never talk to a DBAPI module directly.  They only need three
operations, expressed here as a :class:`typing.Protocol` so tests can plug
in a recording fake and applications can plug in anything that speaks the
same contract::

    statement = driver.prepare(sql)
    driver.bind(statement, 1, value)      # 1-based positions
    result = driver.execute(statement)

Helpers that issue several statements whose session state must carry over
from one to the next go through ``execute_script``, which keeps them on a
single connection.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from bindql.errors import BindError


@dataclass
class PreparedStatement:
    """SQL text plus the values bound to it so far.

    Attributes:
        sql: Finalized SQL text with positional placeholders.
        bindings: 1-based position → value.
    """

    sql: str
    bindings: dict[int, Any] = field(default_factory=dict)

    def bind(self, position: int, value: Any) -> None:
        if position < 1:
            raise BindError(
                f"Bind positions are 1-based; got {position}.",
                positions=sorted(self.bindings),
            )
        self.bindings[position] = value

    def parameters(self) -> tuple[Any, ...]:
        """Return bound values in position order.

        Raises:
            BindError: If the bound positions are not exactly ``1..N``.
        """
        positions = sorted(self.bindings)
        if positions != list(range(1, len(positions) + 1)):
            raise BindError(
                f"Bound positions must be contiguous from 1; got {positions}.",
                positions=positions,
            )
        return tuple(self.bindings[p] for p in positions)


@dataclass(frozen=True)
class StatementResult:
    """What one execution produced.

    Attributes:
        rowcount: Affected rows for DML; number of fetched rows for queries.
        rows: Fetched rows as field-name → value mappings, or ``None`` when
            the statement returns no result set.
        lastrowid: The driver's last inserted id, when it reports one.
    """

    rowcount: int
    rows: list[dict[str, Any]] | None = None
    lastrowid: Any = None


@runtime_checkable
class Driver(Protocol):
    """Minimal prepare / bind / execute contract, plus single-connection scripts."""

    def prepare(self, sql: str) -> PreparedStatement: ...

    def bind(self, statement: PreparedStatement, position: int, value: Any) -> None: ...

    def execute(self, statement: PreparedStatement) -> StatementResult: ...

    def execute_script(self, statements: Sequence[str]) -> list[StatementResult]: ...

    def last_insert_id(self) -> Any: ...