"""Custom exception hierarchy for bindQL.

All public errors inherit from BindQLError so callers can catch the base
class for any bindQL-specific failure.  Driver failures (SQLAlchemy
``DBAPIError`` and friends) are never wrapped; they reach the caller of
``execute()`` unchanged.
"""
from __future__ import annotations

from typing import Any


class BindQLError(Exception):
    """Base exception for all bindQL errors."""


class ConfigurationError(BindQLError):
    """Raised when connection options cannot produce a usable connection.

    Args:
        message: Human-readable description.
        details: Extra context (offending field names, the dialect asked for).
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


class CallOrderError(BindQLError):
    """Raised when builder calls arrive in an order that would emit broken SQL.

    Examples are ``where_and`` before any ``where``, a second ``where`` on an
    already-started clause, or executing an UPDATE with no ``set`` call.

    Args:
        message: Human-readable description.
        operation: The builder call that was rejected (e.g. ``'where_and'``).
        state: The clause/builder state at the time of the call.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        state: str | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.state = state


class BindError(BindQLError):
    """Raised when a prepared statement's bound positions are not ``1..N``.

    Args:
        message: Human-readable description.
        positions: The positions that were actually bound, sorted.
    """

    def __init__(self, message: str, positions: list[int]) -> None:
        super().__init__(message)
        self.positions = positions


class UnsupportedFeatureError(BindQLError):
    """Raised when a dialect-specific helper is used on the wrong backend.

    Args:
        feature: The helper that was requested (e.g. ``'set_utf8'``).
        dialect: The connection's dialect name.
    """

    def __init__(self, feature: str, dialect: str) -> None:
        super().__init__(f"'{feature}' is not supported by the '{dialect}' dialect.")
        self.feature = feature
        self.dialect = dialect
