"""
PostgreSQL-specific SQL dialect implementation.

Uses double-quote identifier quoting and ``information_schema.tables`` for
the catalogue probe.
"""

from .base import SqlDialect


class PostgreSQLDialect(SqlDialect):
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"
