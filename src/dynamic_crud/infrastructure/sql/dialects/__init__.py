"""SQL dialects and lookup by SQLAlchemy dialect name."""

from typing import Dict, Type

from .base import SqlDialect
from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect
from .sqlite import SQLiteDialect

_DIALECTS: Dict[str, Type[SqlDialect]] = {
    "mysql": MySQLDialect,
    "mariadb": MySQLDialect,
    "postgresql": PostgreSQLDialect,
    "sqlite": SQLiteDialect,
}


def get_dialect(name: str) -> SqlDialect:
    """
    Return the dialect for a SQLAlchemy dialect name.

    Unknown engines fall back to the generic ``information_schema`` dialect.

    Examples:
        >>> get_dialect("sqlite").name
        'sqlite'
        >>> get_dialect("mssql").name
        'generic'
    """
    return _DIALECTS.get(name, SqlDialect)()


__all__ = [
    "SqlDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "get_dialect",
]
