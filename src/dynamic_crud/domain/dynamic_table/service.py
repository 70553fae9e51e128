"""
Dynamic table service.

Executes runtime-generated CRUD and DDL statements against tables that are
only known by name. Every table-targeted operation runs the two-tier
existence probe on the same connection that then executes the statement,
so the probe and the write see one transaction.

Example:
    >>> from sqlalchemy import create_engine
    >>> engine = create_engine("sqlite:///app.db")
    >>> service = DynamicTableService(engine)
    >>> service.insert("users", {"name": "Alice", "age": 30})
    1
    >>> service.select("users", {"name": "Alice"})
    [(1, 'Alice', 30)]
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from sqlalchemy.engine import Connection, CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError

from dynamic_crud.config import Settings, get_settings
from dynamic_crud.infrastructure.database import build_engine
from dynamic_crud.infrastructure.sql.core.identifier import split_table_name
from dynamic_crud.infrastructure.sql.core.parameters import bind_parameters
from dynamic_crud.infrastructure.sql.core.types import (
    BatchStatement,
    ColumnValueSet,
    ConditionSet,
    GeneratedStatement,
    Scalar,
)
from dynamic_crud.infrastructure.sql.dialects import get_dialect
from dynamic_crud.infrastructure.sql.operations.generator import SqlGenerator
from dynamic_crud.utils.logging import get_logger

from .exceptions import StatementExecutionError, TableInaccessibleError, describe_error
from .models import TableCheck, TableStatus

logger = get_logger(__name__)

Row = Tuple[Scalar, ...]


class DynamicTableService:
    """
    Orchestrates existence checks, SQL generation and execution.

    The service holds no state beyond its collaborators; concurrent callers
    each get their own connection and transaction from the engine pool.

    Args:
        engine: SQLAlchemy Engine providing connections and transactions
        generator: SQL generator; defaults to one matching the engine's
            DB-API paramstyle and dialect
        validate_identifiers: Reject unsafe table/column names
        quote_identifiers: Quote table/column names with the dialect syntax
        read_isolation_level: Isolation level for read-only operations
    """

    def __init__(
        self,
        engine: Engine,
        generator: Optional[SqlGenerator] = None,
        validate_identifiers: bool = True,
        quote_identifiers: bool = False,
        read_isolation_level: Optional[str] = None,
    ):
        self.engine = engine
        self.dialect = get_dialect(engine.dialect.name)
        self.generator = generator or SqlGenerator(
            paramstyle=engine.dialect.paramstyle,
            dialect=self.dialect,
            validate_identifiers=validate_identifiers,
            quote_identifiers=quote_identifiers,
        )
        self.read_isolation_level = read_isolation_level

    # -- table existence -----------------------------------------------

    def check_table(self, table: str) -> TableCheck:
        """
        Probe whether ``table`` exists.

        The primary probe (DESCRIBE or an empty SELECT) cannot tell a missing
        table from any other failure, so when it fails a catalogue lookup
        decides: no rows means NOT_FOUND, an error means INACCESSIBLE. A
        connection that cannot be opened is INACCESSIBLE as well.

        Raises:
            InvalidInputError: If the table name fails identifier validation
        """
        rendered = self.generator.render_table(table)
        try:
            opened = self._connect(table)
        except TableInaccessibleError as exc:
            return TableCheck(table, TableStatus.INACCESSIBLE, exc.original_error)

        with opened as connection:
            return self._probe(connection, table, rendered)

    def validate_table_exists(self, table: str) -> None:
        """
        Raises:
            TableNotFoundError: If the table does not exist
            TableInaccessibleError: If existence could not be determined
        """
        self.check_table(table).raise_for_status()

    def table_exists(self, table: str) -> bool:
        return self.check_table(table).exists

    # -- generated statements ------------------------------------------

    def insert(self, table: str, data: ColumnValueSet) -> int:
        """Insert one row; returns the number of rows affected."""
        with self._table_connection(table) as connection:
            statement = self.generator.build_insert(table, data)
            return self._execute_write(connection, "insert", table, statement)

    def insert_many(self, table: str, rows: Sequence[ColumnValueSet]) -> int:
        """Insert several rows sharing one column layout in a single transaction."""
        with self._table_connection(table) as connection:
            statement = self.generator.build_insert_many(table, rows)
            return self._execute_write(connection, "insert_many", table, statement)

    def select(self, table: str, conditions: ConditionSet = None) -> List[Row]:
        """
        Select ``*`` rows matching all equality conditions.

        Rows are returned as raw tuples in table column order; no column
        names are attached.
        """
        with self._table_connection(table, read_only=True) as connection:
            statement = self.generator.build_select(table, conditions)
            try:
                result = self._run(connection, statement)
                rows = [tuple(row) for row in result.fetchall()]
            except SQLAlchemyError as exc:
                self._log_failure("select", table, exc)
                raise StatementExecutionError(table, "select", exc) from exc

        logger.info(
            "dynamic_table.select",
            table=table,
            param_count=len(statement.parameters),
            row_count=len(rows),
        )
        return rows

    def update(
        self, table: str, data: ColumnValueSet, conditions: ConditionSet
    ) -> int:
        """Update rows matching ``conditions``; SET values bind before WHERE values."""
        with self._table_connection(table) as connection:
            statement = self.generator.build_update(table, data, conditions)
            return self._execute_write(connection, "update", table, statement)

    def delete(self, table: str, conditions: ConditionSet = None) -> int:
        """Delete rows matching ``conditions``; no conditions deletes every row."""
        with self._table_connection(table) as connection:
            statement = self.generator.build_delete(table, conditions)
            return self._execute_write(connection, "delete", table, statement)

    def drop_table(self, table: str) -> None:
        """Drop ``table``. Irreversible."""
        with self._table_connection(table) as connection:
            statement = self.generator.build_drop(table)
            self._execute_write(connection, "drop_table", table, statement)

    # -- raw SQL -------------------------------------------------------
    # No validation and no error wrapping: database errors reach the caller
    # unchanged. The SQL text is trusted as-is.

    def execute_update_sql(self, sql: str) -> int:
        with self.engine.begin() as connection:
            rowcount = connection.exec_driver_sql(sql).rowcount
        logger.info("dynamic_table.execute_update_sql", rowcount=rowcount)
        return rowcount

    def execute_ddl_sql(self, sql: str) -> None:
        with self.engine.begin() as connection:
            connection.exec_driver_sql(sql)
        logger.info("dynamic_table.execute_ddl_sql")

    def execute_select_sql(self, sql: str) -> List[Union[Scalar, Row]]:
        """
        Run a raw query.

        Single-column results come back as a flat list of values, wider
        results as a list of row tuples.
        """
        with self._read_connection() as connection:
            result = connection.exec_driver_sql(sql)
            single_column = len(result.keys()) == 1
            rows = result.fetchall()

        logger.info("dynamic_table.execute_select_sql", row_count=len(rows))
        if single_column:
            return [row[0] for row in rows]
        return [tuple(row) for row in rows]

    # -- helpers -------------------------------------------------------

    def _connect(self, table: str) -> Connection:
        """
        Raises:
            TableInaccessibleError: If no connection could be opened
        """
        try:
            return self.engine.connect()
        except SQLAlchemyError as exc:
            logger.error(
                "dynamic_table.connect_failed", table=table, error=describe_error(exc)
            )
            raise TableInaccessibleError(table, exc) from exc

    def _probe(self, connection: Connection, table: str, rendered: str) -> TableCheck:
        try:
            connection.exec_driver_sql(
                self.dialect.describe_table_sql(rendered)
            ).fetchall()
            return TableCheck(table, TableStatus.EXISTS)
        except SQLAlchemyError as exc:
            logger.warning(
                "dynamic_table.describe_failed", table=table, error=describe_error(exc)
            )

        schema, bare_name = split_table_name(table)
        schema_sql = schema
        if schema and self.generator.quote_identifiers:
            schema_sql = self.dialect.quote(schema)
        paramstyle = self.generator.paramstyle
        values = self.dialect.lookup_parameters(bare_name, schema)
        try:
            # a failed statement can abort the transaction (PostgreSQL)
            connection.rollback()
            rows = connection.exec_driver_sql(
                self.dialect.list_tables_sql(paramstyle, schema_sql),
                bind_parameters(values, paramstyle),
            ).fetchall()
        except SQLAlchemyError as exc:
            logger.error(
                "dynamic_table.table_lookup_failed", table=table, error=describe_error(exc)
            )
            return TableCheck(table, TableStatus.INACCESSIBLE, exc)

        if not rows:
            return TableCheck(table, TableStatus.NOT_FOUND)
        return TableCheck(table, TableStatus.EXISTS)

    @contextmanager
    def _table_connection(self, table: str, read_only: bool = False) -> Iterator[Connection]:
        """
        Connection on which ``table`` is known to exist.

        Uncommitted work is rolled back when the block exits.

        Raises:
            InvalidInputError: If the table name fails identifier validation
            TableNotFoundError: If the table does not exist
            TableInaccessibleError: If existence could not be determined
        """
        rendered = self.generator.render_table(table)
        opened = self._connect(table)
        with opened as connection:
            if read_only and self.read_isolation_level:
                connection.execution_options(isolation_level=self.read_isolation_level)
            self._probe(connection, table, rendered).raise_for_status()
            yield connection

    @contextmanager
    def _read_connection(self) -> Iterator[Connection]:
        """Connection for read-only work; never committed."""
        with self.engine.connect() as connection:
            if self.read_isolation_level:
                connection.execution_options(isolation_level=self.read_isolation_level)
            yield connection

    @staticmethod
    def _run(
        connection: Connection, statement: Union[GeneratedStatement, BatchStatement]
    ) -> CursorResult:
        parameters = statement.bind()
        if parameters:
            return connection.exec_driver_sql(statement.sql, parameters)
        return connection.exec_driver_sql(statement.sql)

    def _execute_write(
        self,
        connection: Connection,
        operation: str,
        table: str,
        statement: Union[GeneratedStatement, BatchStatement],
    ) -> int:
        """Execute and commit; on error nothing is committed."""
        try:
            rowcount = self._run(connection, statement).rowcount
            connection.commit()
        except SQLAlchemyError as exc:
            self._log_failure(operation, table, exc)
            raise StatementExecutionError(table, operation, exc) from exc

        logger.info(f"dynamic_table.{operation}", table=table, rowcount=rowcount)
        return rowcount

    @staticmethod
    def _log_failure(operation: str, table: str, exc: Exception) -> None:
        logger.error(
            "dynamic_table.statement_failed",
            operation=operation,
            table=table,
            error_type=type(exc).__name__,
            error=describe_error(exc),
        )


def create_service(settings: Optional[Settings] = None) -> DynamicTableService:
    """Build an engine and service from settings."""
    settings = settings or get_settings()
    return DynamicTableService(
        build_engine(settings),
        validate_identifiers=settings.validate_identifiers,
        quote_identifiers=settings.quote_identifiers,
        read_isolation_level=settings.read_isolation_level,
    )
