"""Connection facade: statement factories plus a few session helpers.

A :class:`Connection` pairs one :class:`~bindql.driver.base.Driver` with one
:class:`~bindql.compile.base.SQLDialect` and hands both to every builder it
creates.  It can be reused sequentially by any number of builders; it adds
no pooling or locking of its own.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError

from bindql.compile.base import SQLDialect
from bindql.compile.registry import DialectFactory
from bindql.driver.base import Driver, PreparedStatement, StatementResult
from bindql.driver.sqlalchemy import SQLAlchemyDriver
from bindql.errors import ConfigurationError
from bindql.schema.options import ConnectionOptions
from bindql.statements.delete import Delete
from bindql.statements.insert import Insert
from bindql.statements.select import Select
from bindql.statements.update import Update

logger = logging.getLogger(__name__)


class Connection:
    """Creates statement builders bound to one driver and dialect.

    Args:
        driver: Anything satisfying the :class:`~bindql.driver.base.Driver`
            protocol.
        dialect: Dialect used to render placeholders.
    """

    def __init__(self, driver: Driver, dialect: SQLDialect) -> None:
        self._driver = driver
        self._dialect = dialect

    @classmethod
    def from_engine(cls, engine: Engine) -> Connection:
        """Wrap a SQLAlchemy engine, picking the dialect from its backend name."""
        return cls(SQLAlchemyDriver(engine), DialectFactory.create(engine.dialect.name))

    @property
    def driver(self) -> Driver:
        return self._driver

    @property
    def dialect(self) -> SQLDialect:
        return self._dialect

    # ------------------------------------------------------------------
    # Statement factories
    # ------------------------------------------------------------------

    def insert(self, table: str, columns: str | Sequence[str]) -> Insert:
        return Insert(self._driver, self._dialect, table, columns)

    def select(self, table: str, columns: str | Sequence[str] = "*") -> Select:
        return Select(self._driver, self._dialect, table, columns)

    def update(self, table: str) -> Update:
        return Update(self._driver, self._dialect, table)

    def delete(self, table: str) -> Delete:
        return Delete(self._driver, self._dialect, table)

    # ------------------------------------------------------------------
    # Driver passthroughs
    # ------------------------------------------------------------------

    def prepare(self, sql: str) -> PreparedStatement:
        return self._driver.prepare(sql)

    def query(self, sql: str) -> StatementResult:
        """Run caller-trusted SQL with no bound values."""
        return self._driver.execute(self._driver.prepare(sql))

    def last_insert_id(self) -> Any:
        return self._driver.last_insert_id()

    # ------------------------------------------------------------------
    # Session helpers (dialect-specific)
    # ------------------------------------------------------------------

    def set_utf8(self) -> None:
        """Switch the session to UTF-8 (fixes mangled characters on old servers)."""
        self._apply_to_sessions(self._dialect.utf8_statements())

    def support_group_by(self) -> None:
        """Drop ``ONLY_FULL_GROUP_BY`` from the session's ``sql_mode``."""
        self._apply_to_sessions(self._dialect.group_by_statements())

    def reset_auto_increment(self, table: str, column: str) -> None:
        """Renumber ``column`` from 1 and reset the table's auto-increment.

        Meant for small tables after deletions; rewrites every row.
        """
        self._run_all(self._dialect.reset_auto_increment_statements(table, column))

    def _run_all(self, statements: list[str]) -> None:
        self._driver.execute_script(statements)

    def _apply_to_sessions(self, statements: list[str]) -> None:
        # Pooled drivers reapply session settings on every connection they hand out.
        add = getattr(self._driver, "add_session_statements", None)
        if add is None:
            self._run_all(statements)
        else:
            add(statements)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        close = getattr(self._driver, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def connect(
    options: ConnectionOptions | Mapping[str, Any] | str | URL,
    **engine_kwargs: Any,
) -> Connection:
    """Open a :class:`Connection` from options, a mapping, or a database URL.

    Args:
        options: :class:`ConnectionOptions`, a mapping of its fields, or a
            SQLAlchemy URL (string or :class:`~sqlalchemy.engine.URL`).
        **engine_kwargs: Passed through to :func:`sqlalchemy.create_engine`.

    Returns:
        A ready :class:`Connection`.  No database round trip happens until
        the first statement executes.

    Raises:
        ConfigurationError: If the options are invalid, the URL cannot be
            parsed, the DBAPI driver is not installed, or the backend has no
            registered dialect.
    """
    try:
        if isinstance(options, Mapping):
            options = ConnectionOptions.model_validate(dict(options))
        url = options.to_url() if isinstance(options, ConnectionOptions) else make_url(options)
        engine = create_engine(url, **engine_kwargs)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid connection options: {exc}", details={"errors": exc.errors()}) from exc
    except ArgumentError as exc:
        raise ConfigurationError(f"Invalid database URL: {exc}") from exc
    except ImportError as exc:
        raise ConfigurationError(f"Database driver is not installed: {exc}") from exc

    logger.info("Connecting to %s on %s", engine.dialect.name, url.host or url.database or "memory")
    return Connection.from_engine(engine)
