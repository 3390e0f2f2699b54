"""Condition / value templates parsed into a closed set of tokens.

A template such as ``"{cam} BETWEEN {val} AND {val}"`` is parsed once into::

    (FieldToken(), TextToken(" BETWEEN "), ValueToken(), TextToken(" AND "), ValueToken())

Three markers are recognised:

``{cam}``
    The field (column) name, substituted as literal text.
``{rel}``
    The relational operator, substituted as literal text.
``{val}``
    A value placeholder.  Each occurrence becomes its own bound parameter.

Anything else, including unknown ``{...}`` markers, is kept as plain text.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Union

#: Default template for WHERE / HAVING conditions.
DEFAULT_CONDITION_PATTERN = "{cam} {rel} {val}"

#: Default template for INSERT values and UPDATE assignments.
DEFAULT_VALUE_PATTERN = "{val}"

_MARKER_RE = re.compile(r"\{(cam|rel|val)\}")


@dataclass(frozen=True)
class TextToken:
    """Literal template text, copied verbatim."""

    text: str


@dataclass(frozen=True)
class FieldToken:
    """The ``{cam}`` marker."""


@dataclass(frozen=True)
class OperatorToken:
    """The ``{rel}`` marker."""


@dataclass(frozen=True)
class ValueToken:
    """The ``{val}`` marker."""


Token = Union[TextToken, FieldToken, OperatorToken, ValueToken]

_MARKERS: dict[str, Token] = {
    "cam": FieldToken(),
    "rel": OperatorToken(),
    "val": ValueToken(),
}


@dataclass(frozen=True)
class Pattern:
    """A parsed template.

    Attributes:
        source: The original template string.
        tokens: Tokens in left-to-right order.
    """

    source: str
    tokens: tuple[Token, ...]

    @classmethod
    def parse(cls, source: str) -> Pattern:
        """Parse ``source`` into tokens (cached per distinct template)."""
        return _parse(source)

    @property
    def value_count(self) -> int:
        """Number of ``{val}`` markers, i.e. parameters this pattern binds."""
        return sum(1 for tok in self.tokens if isinstance(tok, ValueToken))


@lru_cache(maxsize=256)
def _parse(source: str) -> Pattern:
    tokens: list[Token] = []
    pos = 0
    for match in _MARKER_RE.finditer(source):
        if match.start() > pos:
            tokens.append(TextToken(source[pos:match.start()]))
        tokens.append(_MARKERS[match.group(1)])
        pos = match.end()
    if pos < len(source):
        tokens.append(TextToken(source[pos:]))
    return Pattern(source=source, tokens=tuple(tokens))
