"""MySQL/MariaDB dialect: DESCRIBE and SHOW TABLES probes, backtick quoting."""

from typing import List, Optional

from ..core.parameters import placeholder
from .base import SqlDialect


def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards so the pattern matches ``value`` literally.

    Examples:
        >>> escape_like("user_s")
        'user\\\\_s'
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MySQLDialect(SqlDialect):
    """MySQL SQL dialect implementation."""

    name = "mysql"

    def describe_table_sql(self, table: str) -> str:
        return f"DESCRIBE {table}"

    def list_tables_sql(self, paramstyle: str = "format", schema: Optional[str] = None) -> str:
        source = f" FROM {schema}" if schema else ""
        return f"SHOW TABLES{source} LIKE {placeholder(0, paramstyle)}"

    def lookup_parameters(self, table: str, schema: Optional[str] = None) -> List[str]:
        return [escape_like(table)]
