"""SQL SELECT statement builder."""

from typing import Sequence

from .conditions import build_where_clause


def build_select_sql(
    table: str, condition_columns: Sequence[str], placeholders: Sequence[str]
) -> str:
    """
    Build ``SELECT * FROM <table>`` with an optional equality WHERE clause.

    Examples:
        >>> build_select_sql("users", [], [])
        'SELECT * FROM users'
        >>> build_select_sql("users", ["id"], ["?"])
        'SELECT * FROM users WHERE id = ?'
    """
    return f"SELECT * FROM {table}{build_where_clause(condition_columns, placeholders)}"
