"""Shared pytest fixtures: file-backed SQLite engines and statement capture."""

from __future__ import annotations

import os
from typing import Generator, List, Tuple
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

# Ensure Settings() can initialize without a bespoke .env file.
os.environ.setdefault("DATABASE_URL", "sqlite:///dynamic_crud_dev.db")

from dynamic_crud.domain.dynamic_table import DynamicTableService  # noqa: E402


@pytest.fixture
def sqlite_engine(tmp_path) -> Generator[Engine, None, None]:
    """A fresh SQLite database per test."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def users_table(sqlite_engine: Engine) -> str:
    """Create and seed ``users`` (id, name, age)."""
    with sqlite_engine.begin() as conn:
        conn.exec_driver_sql(
            "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, age INTEGER)"
        )
        conn.exec_driver_sql(
            "INSERT INTO users (id, name, age) VALUES (1, 'Bob', 41), (2, 'Carol', 29)"
        )
    return "users"


@pytest.fixture
def executed_statements(sqlite_engine: Engine) -> List[Tuple[str, object]]:
    """Record every (statement, parameters) pair sent to the driver."""
    statements: List[Tuple[str, object]] = []

    @event.listens_for(sqlite_engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append((statement, parameters))

    return statements


@pytest.fixture
def service(sqlite_engine: Engine) -> DynamicTableService:
    return DynamicTableService(sqlite_engine)


@pytest.fixture
def mock_engine() -> MagicMock:
    """Engine double whose pooled connection is ``mock_engine.pooled_connection``."""
    engine = MagicMock()
    engine.dialect = MagicMock()
    engine.dialect.name = "mysql"
    engine.dialect.paramstyle = "format"
    connection = MagicMock()
    engine.connect.return_value.__enter__.return_value = connection
    engine.connect.return_value.__exit__.return_value = False
    engine.pooled_connection = connection
    return engine
