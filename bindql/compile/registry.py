"""Dialect registry (Open/Closed Principle).

``DialectFactory`` maps dialect names to :class:`~bindql.compile.base.SQLDialect`
classes.  Register a new dialect once; :func:`bindql.connect` and
:meth:`bindql.connection.Connection.from_engine` look it up automatically.

Usage::

    from bindql.compile.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(SQLDialect):
        ...

Names are matched case-insensitively.  Aliases let one class answer to both
the connection-option name and the SQLAlchemy dialect name (``"sqlsrv"`` and
``"mssql"``, ``"postgres"`` and ``"postgresql"``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from bindql.compile.base import SQLDialect
from bindql.errors import ConfigurationError


class DialectFactory:
    """Registry mapping dialect names to :class:`SQLDialect` classes.

    Example::

        @DialectFactory.register("mysql", "mariadb")
        class MySQLDialect(SQLDialect):
            ...

        dialect = DialectFactory.create("mariadb")
    """

    _dialects: ClassVar[dict[str, type[SQLDialect]]] = {}

    @classmethod
    def register(cls, *names: str) -> Callable[[type[SQLDialect]], type[SQLDialect]]:
        """Decorator that registers a dialect class under every name in ``names``.

        Args:
            names: The dialect name and any aliases (e.g. ``"sqlsrv"``, ``"mssql"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[SQLDialect]) -> type[SQLDialect]:
            cls.register_class(dialect_cls, *names)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, dialect_cls: type[SQLDialect], *names: str) -> None:
        """Register a dialect class without using the decorator form."""
        for name in names:
            cls._dialects[name.lower()] = dialect_cls

    @classmethod
    def create(cls, name: str) -> SQLDialect:
        """Instantiate the dialect registered for ``name``.

        Raises:
            ConfigurationError: If no dialect is registered for ``name``.
        """
        dialect_cls = cls._dialects.get(name.lower())
        if dialect_cls is None:
            registered = cls.registered_names()
            raise ConfigurationError(
                f"Unsupported dialect: '{name}'. Registered dialects: {registered}.",
                details={"dialect": name, "registered": registered},
            )
        return dialect_cls()

    @classmethod
    def registered_names(cls) -> list[str]:
        """Return the sorted list of registered names and aliases."""
        return sorted(cls._dialects)
