"""SQL INSERT statement builder."""

from typing import Sequence


def build_insert_sql(table: str, columns: Sequence[str], placeholders: Sequence[str]) -> str:
    """
    Build a single-row INSERT statement.

    Examples:
        >>> build_insert_sql("users", ["name", "age"], ["?", "?"])
        'INSERT INTO users (name,age) VALUES (?,?)'
    """
    return f"INSERT INTO {table} ({','.join(columns)}) VALUES ({','.join(placeholders)})"
