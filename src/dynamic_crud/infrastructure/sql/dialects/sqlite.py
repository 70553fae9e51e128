"""SQLite dialect: catalogue lookups go through ``<schema>.sqlite_master``."""

from typing import List, Optional

from ..core.parameters import placeholder
from .base import SqlDialect


class SQLiteDialect(SqlDialect):
    """SQLite SQL dialect implementation."""

    name = "sqlite"

    def list_tables_sql(self, paramstyle: str = "qmark", schema: Optional[str] = None) -> str:
        catalogue = f"{schema}.sqlite_master" if schema else "sqlite_master"
        return (
            f"SELECT name FROM {catalogue} "
            f"WHERE type = 'table' AND name = {placeholder(0, paramstyle)}"
        )

    def lookup_parameters(self, table: str, schema: Optional[str] = None) -> List[str]:
        return [table]
