"""Pydantic model for the options used to open a bindQL connection.

The options describe *where* statements run; nothing in the builder layer
depends on them.  They are turned into a SQLAlchemy :class:`~sqlalchemy.engine.URL`
so any SQLAlchemy-supported DBAPI driver can sit underneath::

    from bindql import ConnectionOptions, connect

    opts = ConnectionOptions(target="mysql", server="db.local", database="shop")
    with connect(opts) as conn:
        conn.select("orders").where("status", "=", "open").execute()

Per-target defaults mirror the classic MySQL / SQL Server setup:

* ``mysql`` - user ``root`` with an empty password when neither is given.
* ``sqlsrv`` - no user and no password (trusted / integrated auth).
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from sqlalchemy.engine import URL

#: Supported connection targets.
ConnectionTarget = Literal["mysql", "sqlsrv", "postgres", "sqlite"]

# SQLAlchemy backend + default DBAPI driver for each target.
_DRIVERNAMES: dict[str, tuple[str, str | None]] = {
    "mysql": ("mysql", "pymysql"),
    "sqlsrv": ("mssql", "pyodbc"),
    "postgres": ("postgresql", "psycopg"),
    "sqlite": ("sqlite", None),
}


class ConnectionOptions(BaseModel):
    """Connection parameters for one database.

    Attributes:
        target: Backend kind (``'mysql'``, ``'sqlsrv'``, ``'postgres'`` or
            ``'sqlite'``).
        server: Host name.  Ignored for SQLite.
        database: Database name, or a file path for SQLite (``None`` means an
            in-memory SQLite database).
        user: Login name.  Defaults depend on ``target``.
        password: Login password.  Defaults depend on ``target``.
        port: Optional TCP port.
        driver: Optional DBAPI driver override (e.g. ``'mysqlconnector'``).
        query: Extra URL query options, e.g.
            ``{"driver": "ODBC Driver 18 for SQL Server"}`` for pyodbc.
    """

    model_config = ConfigDict(extra="forbid")

    target: ConnectionTarget = "mysql"
    server: str = "localhost"
    database: str | None = None
    user: str | None = None
    password: str | None = None
    port: int | None = Field(default=None, gt=0, lt=65536)
    driver: str | None = None
    query: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _apply_target_defaults(self) -> ConnectionOptions:
        if self.target != "sqlite" and not self.database:
            raise ValueError(f"'database' is required for target '{self.target}'")
        if self.target == "mysql":
            if self.user is None:
                self.user = "root"
            if self.password is None:
                self.password = ""
        return self

    @property
    def drivername(self) -> str:
        """SQLAlchemy ``backend+driver`` string for these options."""
        backend, default_driver = _DRIVERNAMES[self.target]
        driver = self.driver or default_driver
        return f"{backend}+{driver}" if driver else backend

    def to_url(self) -> URL:
        """Build the SQLAlchemy URL for these options."""
        if self.target == "sqlite":
            return URL.create(self.drivername, database=self.database)
        return URL.create(
            self.drivername,
            username=self.user,
            password=self.password or None,
            host=self.server,
            port=self.port,
            database=self.database,
            query=self.query,
        )
