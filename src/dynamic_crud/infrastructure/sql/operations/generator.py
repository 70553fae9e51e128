"""
Dynamic SQL generator.

Pure, stateless translation of a table name and column mappings into SQL
text with placeholders plus the matching ordered parameters. No database
access happens here.

Every statement is derived from one ordered snapshot of the input mapping,
so the column order in the SQL text and the parameter order can never
drift apart.

Example:
    >>> generator = SqlGenerator()
    >>> statement = generator.build_insert("users", {"name": "Alice", "age": 30})
    >>> statement.sql
    'INSERT INTO users (name,age) VALUES (?,?)'
    >>> statement.parameters
    ('Alice', 30)
"""

from typing import List, Mapping, Optional, Sequence, Tuple

from ..core.identifier import validate_identifier, validate_table_name
from ..core.parameters import PARAMSTYLES, build_placeholders
from ..core.types import (
    BatchStatement,
    ColumnValueSet,
    ConditionSet,
    GeneratedStatement,
    Scalar,
    is_scalar,
)
from ..dialects.base import SqlDialect
from ..exceptions import InvalidInputError
from .delete import build_delete_sql, build_drop_table_sql
from .insert import build_insert_sql
from .select import build_select_sql
from .update import build_update_sql

Snapshot = Tuple[Tuple[str, ...], Tuple[Scalar, ...]]


class SqlGenerator:
    """
    Builds INSERT/SELECT/UPDATE/DELETE/DROP statements at runtime.

    Args:
        paramstyle: DB-API paramstyle for placeholders ("qmark" renders ``?``)
        dialect: Dialect used for identifier quoting
        validate_identifiers: Reject table/column names that are not plain
            identifiers before they are interpolated into SQL text
        quote_identifiers: Quote table/column names with the dialect's syntax
    """

    def __init__(
        self,
        paramstyle: str = "qmark",
        dialect: Optional[SqlDialect] = None,
        validate_identifiers: bool = True,
        quote_identifiers: bool = False,
    ):
        if paramstyle not in PARAMSTYLES:
            raise ValueError(f"Unsupported paramstyle: {paramstyle!r}")
        self.paramstyle = paramstyle
        self.dialect = dialect or SqlDialect()
        self.validate_identifiers = validate_identifiers
        self.quote_identifiers = quote_identifiers

    # -- identifier and value handling ---------------------------------

    def render_table(self, table: str) -> str:
        """Validate and optionally quote a table name for interpolation."""
        if self.validate_identifiers:
            validate_table_name(table)
        elif not isinstance(table, str) or not table:
            raise InvalidInputError(f"Invalid table name: {table!r}", field="table")
        if self.quote_identifiers:
            return self.dialect.qualify(table)
        return table

    def _render_columns(self, columns: Sequence[str]) -> List[str]:
        rendered = []
        for column in columns:
            if self.validate_identifiers:
                validate_identifier(column)
            if self.quote_identifiers:
                column = self.dialect.quote(column)
            rendered.append(column)
        return rendered

    @staticmethod
    def _snapshot(values: ConditionSet, kind: str, required: bool) -> Snapshot:
        """Freeze a mapping into parallel column/value tuples."""
        if values is None:
            values = {}
        if not isinstance(values, Mapping):
            raise InvalidInputError(
                f"{kind} must be a mapping of column name to value, "
                f"got {type(values).__name__}",
                field=kind,
            )
        items = list(values.items())
        if required and not items:
            raise InvalidInputError(f"{kind} must contain at least one column", field=kind)

        for column, value in items:
            if not isinstance(column, str) or not column:
                raise InvalidInputError(f"Invalid column name in {kind}: {column!r}", field=kind)
            if not is_scalar(value):
                raise InvalidInputError(
                    f"Unsupported value type for column {column!r}: {type(value).__name__}",
                    field=column,
                )

        return tuple(c for c, _ in items), tuple(v for _, v in items)

    # -- statement builders --------------------------------------------

    def build_insert(self, table: str, data: ColumnValueSet) -> GeneratedStatement:
        """Build a single-row INSERT with columns in ``data`` order."""
        columns, values = self._snapshot(data, "data", required=True)
        sql = build_insert_sql(
            self.render_table(table),
            self._render_columns(columns),
            build_placeholders(len(columns), self.paramstyle),
        )
        return GeneratedStatement(sql, values, self.paramstyle)

    def build_insert_many(
        self, table: str, rows: Sequence[ColumnValueSet]
    ) -> BatchStatement:
        """
        Build one INSERT executed once per row.

        All rows must carry the same columns in the same order.

        Raises:
            InvalidInputError: If there are no rows or the rows disagree on columns
        """
        if not rows:
            raise InvalidInputError("rows must contain at least one row", field="rows")

        columns, first_values = self._snapshot(rows[0], "data", required=True)
        batch = [first_values]
        for index, row in enumerate(rows[1:], start=1):
            row_columns, row_values = self._snapshot(row, "data", required=True)
            if row_columns != columns:
                raise InvalidInputError(
                    f"Row {index} columns {list(row_columns)} do not match "
                    f"first row columns {list(columns)}",
                    field="rows",
                )
            batch.append(row_values)

        sql = build_insert_sql(
            self.render_table(table),
            self._render_columns(columns),
            build_placeholders(len(columns), self.paramstyle),
        )
        return BatchStatement(sql, tuple(batch), self.paramstyle)

    def build_select(self, table: str, conditions: ConditionSet = None) -> GeneratedStatement:
        """Build ``SELECT *``; no conditions means no WHERE clause."""
        columns, values = self._snapshot(conditions, "conditions", required=False)
        sql = build_select_sql(
            self.render_table(table),
            self._render_columns(columns),
            build_placeholders(len(columns), self.paramstyle),
        )
        return GeneratedStatement(sql, values, self.paramstyle)

    def build_update(
        self, table: str, data: ColumnValueSet, conditions: ConditionSet
    ) -> GeneratedStatement:
        """
        Build an UPDATE; parameters are SET values followed by WHERE values.

        Raises:
            InvalidInputError: If ``data`` or ``conditions`` is empty
        """
        set_columns, set_values = self._snapshot(data, "data", required=True)
        where_columns, where_values = self._snapshot(conditions, "conditions", required=True)
        sql = build_update_sql(
            self.render_table(table),
            self._render_columns(set_columns),
            build_placeholders(len(set_columns), self.paramstyle),
            self._render_columns(where_columns),
            build_placeholders(len(where_columns), self.paramstyle, start=len(set_columns)),
        )
        return GeneratedStatement(sql, set_values + where_values, self.paramstyle)

    def build_delete(self, table: str, conditions: ConditionSet = None) -> GeneratedStatement:
        """Build ``DELETE FROM``; no conditions means every row."""
        columns, values = self._snapshot(conditions, "conditions", required=False)
        sql = build_delete_sql(
            self.render_table(table),
            self._render_columns(columns),
            build_placeholders(len(columns), self.paramstyle),
        )
        return GeneratedStatement(sql, values, self.paramstyle)

    def build_drop(self, table: str) -> GeneratedStatement:
        return GeneratedStatement(
            build_drop_table_sql(self.render_table(table)), (), self.paramstyle
        )

    # -- text-only API -------------------------------------------------

    def generate_insert_sql(self, data: ColumnValueSet, table: str) -> str:
        return self.build_insert(table, data).sql

    def get_insert_values(self, data: ColumnValueSet) -> List[Scalar]:
        """Values in the same order as the columns of ``generate_insert_sql``."""
        _, values = self._snapshot(data, "data", required=True)
        return list(values)

    def generate_select_sql(self, table: str, conditions: ConditionSet = None) -> str:
        return self.build_select(table, conditions).sql

    def generate_update_sql(
        self, table: str, data: ColumnValueSet, conditions: ConditionSet
    ) -> str:
        return self.build_update(table, data, conditions).sql

    def generate_delete_sql(self, table: str, conditions: ConditionSet = None) -> str:
        return self.build_delete(table, conditions).sql
