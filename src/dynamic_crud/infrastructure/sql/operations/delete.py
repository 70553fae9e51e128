"""SQL DELETE and DROP TABLE statement builders."""

from typing import Sequence

from .conditions import build_where_clause


def build_delete_sql(
    table: str, condition_columns: Sequence[str], placeholders: Sequence[str]
) -> str:
    """
    Build ``DELETE FROM <table>`` with an optional equality WHERE clause.

    Examples:
        >>> build_delete_sql("users", ["id"], ["?"])
        'DELETE FROM users WHERE id = ?'
    """
    return f"DELETE FROM {table}{build_where_clause(condition_columns, placeholders)}"


def build_drop_table_sql(table: str) -> str:
    return f"DROP TABLE {table}"
