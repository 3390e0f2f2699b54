"""Pattern expansion and bound fragments.

``PatternExpander`` folds a parsed :class:`~bindql.schema.pattern.Pattern`
into SQL text: ``{cam}`` and ``{rel}`` become the field name and operator,
and every ``{val}`` becomes the dialect's placeholder token.

``BoundFragment`` pairs a growing piece of SQL text with its
:class:`~bindql.compile.ledger.BindLedger`.  Text and ledger only ever
change together, inside one method, so the number of placeholders in
``text`` always equals ``len(ledger)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from bindql.compile.ledger import BindLedger
from bindql.schema.pattern import (
    FieldToken,
    OperatorToken,
    Pattern,
    TextToken,
    ValueToken,
)


class Expansion(NamedTuple):
    """Result of expanding one template."""

    text: str
    placeholder_count: int


class PatternExpander:
    """Expands templates for a single placeholder style.

    Args:
        placeholder: Token emitted for every ``{val}`` (``'?'`` or ``'%s'``).
    """

    def __init__(self, placeholder: str = "?") -> None:
        self._placeholder = placeholder

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def expand(
        self,
        template: str,
        field_name: str | None = None,
        operator: str | None = None,
    ) -> Expansion:
        """Render ``template`` with the given field and operator.

        A ``{cam}`` or ``{rel}`` marker whose substitute is ``None`` is kept
        as literal text.  Templates without markers are returned unchanged
        with a count of 0.
        """
        pattern = Pattern.parse(template)
        parts: list[str] = []
        count = 0
        for tok in pattern.tokens:
            if isinstance(tok, TextToken):
                parts.append(tok.text)
            elif isinstance(tok, FieldToken):
                parts.append("{cam}" if field_name is None else field_name)
            elif isinstance(tok, OperatorToken):
                parts.append("{rel}" if operator is None else operator)
            elif isinstance(tok, ValueToken):
                parts.append(self._placeholder)
                count += 1
        return Expansion("".join(parts), count)


@dataclass(frozen=True)
class BoundFragment:
    """SQL text plus the values for its placeholders.

    Attributes:
        text: Fragment text, empty until the first append.
        ledger: One entry per placeholder in ``text``, in text order.
    """

    text: str = ""
    ledger: BindLedger = field(default_factory=BindLedger)

    def append(self, expansion: Expansion, value: Any, separator: str = ", ") -> BoundFragment:
        """Return a fragment with ``expansion`` appended and ``value`` bound.

        ``separator`` is only inserted when the fragment already has text.
        ``value`` is recorded once per placeholder the expansion produced.
        """
        text = f"{self.text}{separator}{expansion.text}" if self.text else expansion.text
        ledger = self.ledger.append_repeated(value, expansion.placeholder_count)
        return BoundFragment(text=text, ledger=ledger)

    def __bool__(self) -> bool:
        return bool(self.text)
