"""
SQL identifier handling utilities.

Table and column names are interpolated into SQL text, so they are checked
against an identifier pattern before use. Unicode letters are accepted to
support Chinese column names. Quoting is optional and dialect specific.
"""

import re
from typing import Optional, Tuple

from ..exceptions import InvalidInputError

IDENTIFIER_PATTERN = re.compile(r"^[^\W\d]\w*$")


def is_valid_identifier(name: object) -> bool:
    """
    Check whether ``name`` is a plain SQL identifier.

    Examples:
        >>> is_valid_identifier("company_id")
        True
        >>> is_valid_identifier("年金计划号")
        True
        >>> is_valid_identifier("users; DROP TABLE users")
        False
    """
    return isinstance(name, str) and bool(IDENTIFIER_PATTERN.match(name))


def validate_identifier(name: object, kind: str = "column") -> str:
    """
    Return ``name`` unchanged if it is a valid identifier.

    Raises:
        InvalidInputError: If the name is empty or contains anything other
            than letters, digits and underscores
    """
    if not is_valid_identifier(name):
        raise InvalidInputError(f"Invalid {kind} name: {name!r}", field=kind)
    return name  # type: ignore[return-value]


def split_table_name(table: str) -> Tuple[Optional[str], str]:
    """
    Split an optionally schema-qualified table name.

    Examples:
        >>> split_table_name("mapping.年金计划")
        ('mapping', '年金计划')
        >>> split_table_name("users")
        (None, 'users')
    """
    if "." in table:
        schema, _, name = table.partition(".")
        return schema, name
    return None, table


def validate_table_name(table: object) -> str:
    """
    Validate a table name, allowing one ``schema.`` prefix.

    Raises:
        InvalidInputError: If either part is not a valid identifier
    """
    if not isinstance(table, str) or not table:
        raise InvalidInputError(f"Invalid table name: {table!r}", field="table")
    schema, name = split_table_name(table)
    if schema is not None:
        validate_identifier(schema, kind="schema")
    validate_identifier(name, kind="table")
    return table


def quote_identifier(name: str, dialect: str = "postgresql") -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote
        dialect: Database dialect ("postgresql", "mysql", "sqlite")

    Examples:
        >>> quote_identifier("年金计划号")
        '"年金计划号"'
        >>> quote_identifier("table", dialect="mysql")
        '`table`'
    """
    if dialect in ("mysql", "mariadb"):
        escaped = name.replace("`", "``")
        return f"`{escaped}`"
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def qualify_table(table: str, dialect: str = "postgresql") -> str:
    """
    Quote a table name, keeping an optional schema prefix.

    Examples:
        >>> qualify_table("mapping.年金计划")
        '"mapping"."年金计划"'
        >>> qualify_table("users", dialect="mysql")
        '`users`'
    """
    schema, name = split_table_name(table)
    quoted_table = quote_identifier(name, dialect)
    if schema:
        return f"{quote_identifier(schema, dialect)}.{quoted_table}"
    return quoted_table
