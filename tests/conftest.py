"""Shared pytest fixtures for bindQL unit and integration tests."""
from __future__ import annotations

import pytest

from bindql.compile.mysql import MySQLDialect
from bindql.compile.sqlite import SQLiteDialect
from bindql.connection import Connection
from tests.fixtures import RecordingDriver


@pytest.fixture()
def driver() -> RecordingDriver:
    """Fresh recording driver per test."""
    return RecordingDriver()


@pytest.fixture()
def conn(driver: RecordingDriver) -> Connection:
    """Qmark-style connection over the recording driver."""
    return Connection(driver, SQLiteDialect())


@pytest.fixture()
def mysql_conn(driver: RecordingDriver) -> Connection:
    """``%s``-style connection over the recording driver."""
    return Connection(driver, MySQLDialect())
