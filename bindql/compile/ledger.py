"""The bind ledger: values waiting for their positional placeholders.

A ledger is the parallel half of a SQL fragment.  Entry ``i`` is bound to
the ``i``-th placeholder (left to right) of the fragment it belongs to, so
entries must be appended in exactly the order the placeholders are emitted.
Ledgers are immutable; every append returns a new ledger, which lets a
fragment swap its text and its ledger in a single assignment.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BindLedger:
    """Ordered, immutable sequence of values to bind.

    Values are stored opaquely: no coercion, reordering or deduplication.
    """

    entries: tuple[Any, ...] = ()

    def append(self, value: Any) -> BindLedger:
        """Return a new ledger with ``value`` appended."""
        return BindLedger(self.entries + (value,))

    def append_repeated(self, value: Any, count: int) -> BindLedger:
        """Return a new ledger with ``value`` appended ``count`` times.

        Used when one logical value feeds several ``{val}`` placeholders,
        e.g. ``"{cam} BETWEEN {val} AND {val}"``.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return BindLedger(self.entries + (value,) * count)

    def extend(self, other: BindLedger) -> BindLedger:
        """Return a new ledger with ``other``'s entries after this one's."""
        return BindLedger(self.entries + other.entries)

    def snapshot(self) -> tuple[Any, ...]:
        return self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.entries)
