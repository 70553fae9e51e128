"""
Base SQL dialect.

A dialect knows how to quote identifiers and which two statements probe
for a table's existence: a cheap primary probe that fails when the table
is missing or inaccessible, and a catalogue lookup that returns one row
per matching table.
"""

from typing import List, Optional

from ..core.identifier import qualify_table, quote_identifier
from ..core.parameters import placeholder


class SqlDialect:
    """Generic dialect backed by ``information_schema``."""

    name = "generic"

    def quote(self, identifier: str) -> str:
        """Quote an identifier using this dialect's syntax."""
        return quote_identifier(identifier, dialect=self.name)

    def qualify(self, table: str) -> str:
        """Quote a (possibly schema-qualified) table reference."""
        return qualify_table(table, dialect=self.name)

    def describe_table_sql(self, table: str) -> str:
        """Primary probe: succeeds iff the table exists and is readable."""
        return f"SELECT * FROM {table} WHERE 1 = 0"

    def list_tables_sql(self, paramstyle: str = "qmark", schema: Optional[str] = None) -> str:
        """
        Fallback probe, bound with ``lookup_parameters``.

        A schema restricts the lookup to that schema only.
        """
        sql = (
            "SELECT table_name FROM information_schema.tables "
            f"WHERE table_name = {placeholder(0, paramstyle)}"
        )
        if schema:
            sql += f" AND table_schema = {placeholder(1, paramstyle)}"
        return sql

    def lookup_parameters(self, table: str, schema: Optional[str] = None) -> List[str]:
        """Values for ``list_tables_sql`` placeholders, in order."""
        if schema:
            return [table, schema]
        return [table]
