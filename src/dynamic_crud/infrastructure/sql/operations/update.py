"""SQL UPDATE statement builder."""

from typing import Sequence

from .conditions import build_assignments, build_where_clause


def build_update_sql(
    table: str,
    set_columns: Sequence[str],
    set_placeholders: Sequence[str],
    condition_columns: Sequence[str],
    condition_placeholders: Sequence[str],
) -> str:
    """
    Build an UPDATE statement.

    Bound parameters follow placeholder order: all SET values, then all
    WHERE values.

    Examples:
        >>> build_update_sql("t", ["a", "b"], ["?", "?"], ["c"], ["?"])
        'UPDATE t SET a = ?, b = ? WHERE c = ?'
    """
    assignments = build_assignments(set_columns, set_placeholders, ", ")
    where = build_where_clause(condition_columns, condition_placeholders)
    return f"UPDATE {table} SET {assignments}{where}"
