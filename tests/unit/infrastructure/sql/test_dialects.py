"""
Unit tests for SQL dialects and their existence checks.
"""

import pytest

from dynamic_crud.infrastructure.sql.dialects import (
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SqlDialect,
    get_dialect,
)


class TestGetDialect:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("mysql", MySQLDialect),
            ("mariadb", MySQLDialect),
            ("postgresql", PostgreSQLDialect),
            ("sqlite", SQLiteDialect),
        ],
    )
    def test_known(self, name, expected):
        assert isinstance(get_dialect(name), expected)

    def test_unknown_falls_back_to_generic(self):
        dialect = get_dialect("mssql")
        assert type(dialect) is SqlDialect
        assert dialect.name == "generic"


class TestMySQLDialect:
    @pytest.fixture
    def dialect(self):
        return MySQLDialect()

    def test_describe(self, dialect):
        assert dialect.describe_table_sql("users") == "DESCRIBE users"

    def test_show_tables(self, dialect):
        assert dialect.list_tables_sql("format") == "SHOW TABLES LIKE %s"
        assert dialect.list_tables_sql("pyformat") == "SHOW TABLES LIKE %(col_0)s"

    def test_show_tables_in_schema(self, dialect):
        assert dialect.list_tables_sql("format", "crm") == "SHOW TABLES FROM crm LIKE %s"
        assert dialect.lookup_parameters("users", "crm") == ["users"]

    def test_lookup_value_escapes_like_wildcards(self, dialect):
        assert dialect.lookup_parameters("user_s") == ["user\\_s"]
        assert dialect.lookup_parameters("50%") == ["50\\%"]
        assert dialect.lookup_parameters("a\\b") == ["a\\\\b"]

    def test_quote(self, dialect):
        assert dialect.quote("users") == "`users`"


class TestPostgreSQLDialect:
    @pytest.fixture
    def dialect(self):
        return PostgreSQLDialect()

    def test_dialect_name(self, dialect):
        assert dialect.name == "postgresql"

    def test_describe_is_empty_select(self, dialect):
        assert dialect.describe_table_sql("users") == "SELECT * FROM users WHERE 1 = 0"

    def test_catalogue_lookup(self, dialect):
        sql = dialect.list_tables_sql("pyformat")
        assert "information_schema.tables" in sql
        assert sql.endswith("table_name = %(col_0)s")
        assert dialect.lookup_parameters("users") == ["users"]

    def test_catalogue_lookup_in_schema(self, dialect):
        sql = dialect.list_tables_sql("pyformat", "mapping")
        assert sql.endswith("table_name = %(col_0)s AND table_schema = %(col_1)s")
        assert dialect.lookup_parameters("users", "mapping") == ["users", "mapping"]
        assert dialect.lookup_parameters("user_s") == ["user_s"]

    def test_qualify_table(self, dialect):
        assert dialect.qualify("mapping.年金计划") == '"mapping"."年金计划"'


class TestSQLiteDialect:
    def test_catalogue_lookup(self):
        sql = SQLiteDialect().list_tables_sql("qmark")
        assert sql == "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?"

    def test_catalogue_lookup_in_schema(self):
        dialect = SQLiteDialect()
        sql = dialect.list_tables_sql("qmark", "temp")
        assert sql == "SELECT name FROM temp.sqlite_master WHERE type = 'table' AND name = ?"
        assert dialect.lookup_parameters("users", "temp") == ["users"]
