"""WHERE / HAVING clause accumulation.

A :class:`Clause` is an immutable value: keyword, bound fragment and state.
Each call returns a new clause, so a rejected call (``CallOrderError``)
leaves the caller's clause untouched.  Growth is always::

    KEYWORD cond1 [CONNECTOR cond2 [CONNECTOR cond3 ...]]

State machine
-------------
EMPTY ──chain("")──▶ INITIALIZED ──chain("AND"|"OR")──▶ CHAINED ─┐
                                                       ▲─────────┘

``chain("")`` is only valid from EMPTY; ``chain("AND")`` / ``chain("OR")``
only from INITIALIZED or CHAINED.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bindql.compile.expander import BoundFragment, Expansion, PatternExpander
from bindql.compile.ledger import BindLedger
from bindql.errors import CallOrderError
from bindql.schema.pattern import DEFAULT_CONDITION_PATTERN

#: Accepted connectors; ``""`` starts the clause.
CONNECTORS: frozenset[str] = frozenset({"", "AND", "OR"})


class ClauseState(str, Enum):
    EMPTY = "EMPTY"
    INITIALIZED = "INITIALIZED"
    CHAINED = "CHAINED"


def wrap_like(operator: str, value: Any) -> Any:
    """Wrap ``value`` as ``%value%`` when ``operator`` is ``LIKE``."""
    if operator.strip().upper() == "LIKE":
        return f"%{value}%"
    return value


@dataclass(frozen=True)
class Clause:
    """One boolean filter expression (WHERE or HAVING) and its ledger.

    Attributes:
        keyword: ``'WHERE'`` or ``'HAVING'``.
        expander: Expander carrying the dialect placeholder token.
        fragment: Clause text (keyword included) and its bind ledger.
        state: Position in the EMPTY → INITIALIZED → CHAINED machine.
    """

    keyword: str
    expander: PatternExpander = field(default_factory=PatternExpander, compare=False)
    fragment: BoundFragment = field(default_factory=BoundFragment)
    state: ClauseState = ClauseState.EMPTY

    @classmethod
    def where(cls, expander: PatternExpander | None = None) -> Clause:
        return cls("WHERE", expander or PatternExpander())

    @classmethod
    def having(cls, expander: PatternExpander | None = None) -> Clause:
        return cls("HAVING", expander or PatternExpander())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self.fragment.text

    @property
    def ledger(self) -> BindLedger:
        return self.fragment.ledger

    def chain(
        self,
        connector: str,
        field_name: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
    ) -> Clause:
        """Start the clause (``connector=""``) or extend it with AND / OR.

        Raises:
            ValueError: If ``connector`` is not ``""``, ``"AND"`` or ``"OR"``.
            CallOrderError: If the call is not valid in the current state.
        """
        connector = connector.upper()
        if connector not in CONNECTORS:
            raise ValueError(f"Unknown connector {connector!r}; expected '', 'AND' or 'OR'.")

        operation = self.keyword.lower() + (f"_{connector.lower()}" if connector else "")
        if connector and self.state is ClauseState.EMPTY:
            raise CallOrderError(
                f"{operation}() called before {self.keyword.lower()}(); "
                f"start the {self.keyword} clause first.",
                operation=operation,
                state=self.state.value,
            )
        if not connector and self.state is not ClauseState.EMPTY:
            raise CallOrderError(
                f"{operation}() called twice; use {operation}_and() or "
                f"{operation}_or() to add further conditions.",
                operation=operation,
                state=self.state.value,
            )

        return self.add_condition(field_name, operator, value, pattern, connector)

    def add_condition(
        self,
        field_name: str,
        operator: str,
        value: Any,
        pattern: str = DEFAULT_CONDITION_PATTERN,
        connector: str = "",
    ) -> Clause:
        """Append one expanded condition; the primitive behind :meth:`chain`.

        The keyword is emitted only when the clause is empty; otherwise the
        condition is joined with ``connector``.  ``value`` is LIKE-wrapped
        once and then recorded once per ``{val}`` in ``pattern``; a pattern
        without ``{val}`` binds nothing.
        """
        expansion = self.expander.expand(pattern, field_name, operator)
        if expansion.placeholder_count:
            value = wrap_like(operator, value)

        if self.fragment:
            fragment = self.fragment.append(expansion, value, separator=f" {connector} ")
            state = ClauseState.CHAINED
        else:
            head = Expansion(f"{self.keyword} {expansion.text}", expansion.placeholder_count)
            fragment = self.fragment.append(head, value)
            state = ClauseState.INITIALIZED

        return Clause(self.keyword, self.expander, fragment, state)

    def __bool__(self) -> bool:
        return bool(self.fragment)
