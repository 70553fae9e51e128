"""WHERE and SET clause fragments shared by the statement builders."""

from typing import Sequence


def build_assignments(columns: Sequence[str], placeholders: Sequence[str], separator: str) -> str:
    """Join ``col = ?`` pairs with ``separator``."""
    return separator.join(
        f"{column} = {param}" for column, param in zip(columns, placeholders)
    )


def build_where_clause(columns: Sequence[str], placeholders: Sequence[str]) -> str:
    """
    Build a conjunction of equality predicates.

    Returns an empty string when there are no conditions, so the statement
    has no WHERE clause at all.

    Examples:
        >>> build_where_clause(["a", "b"], ["?", "?"])
        ' WHERE a = ? AND b = ?'
        >>> build_where_clause([], [])
        ''
    """
    if not columns:
        return ""
    return " WHERE " + build_assignments(columns, placeholders, " AND ")
