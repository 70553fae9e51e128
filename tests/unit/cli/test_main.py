"""Unit tests for the CLI front-end."""

import json
from unittest.mock import patch

import pytest

from dynamic_crud.cli.main import build_parser, main
from dynamic_crud.domain.dynamic_table import DynamicTableService


@pytest.fixture
def cli_service(sqlite_engine, users_table):
    service = DynamicTableService(sqlite_engine)
    with patch("dynamic_crud.cli.main.create_service", return_value=service):
        yield service


def _run(capsys, argv):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_insert_and_select(cli_service, capsys):
    code, out, _ = _run(capsys, ["insert", "--table", "users", "--data", '{"name": "Alice", "age": 30}'])
    assert code == 0
    assert json.loads(out) == {"rowcount": 1}

    code, out, _ = _run(capsys, ["select", "--table", "users", "--where", '{"name": "Alice"}'])
    assert code == 0
    assert json.loads(out) == [[3, "Alice", 30]]


def test_update_and_delete(cli_service, capsys):
    code, out, _ = _run(
        capsys, ["update", "--table", "users", "--data", '{"age": 50}', "--where", '{"id": 1}']
    )
    assert (code, json.loads(out)) == (0, {"rowcount": 1})

    code, out, _ = _run(capsys, ["delete", "--table", "users", "--where", '{"id": 5}'])
    assert (code, json.loads(out)) == (0, {"rowcount": 0})


def test_check_and_drop(cli_service, capsys):
    code, out, _ = _run(capsys, ["check", "--table", "users"])
    assert json.loads(out) == {"table": "users", "status": "exists"}

    code, out, _ = _run(capsys, ["drop", "--table", "users"])
    assert (code, json.loads(out)) == (0, {"dropped": "users"})

    code, out, _ = _run(capsys, ["check", "--table", "users"])
    assert json.loads(out)["status"] == "not_found"


def test_raw_sql_commands(cli_service, capsys):
    code, _, _ = _run(capsys, ["ddl", "--sql", "CREATE TABLE tags (name TEXT)"])
    assert code == 0

    code, out, _ = _run(capsys, ["exec", "--sql", "INSERT INTO tags VALUES ('x')"])
    assert json.loads(out) == {"rowcount": 1}

    code, out, _ = _run(capsys, ["query", "--sql", "SELECT name FROM tags"])
    assert json.loads(out) == ["x"]


def test_missing_table_exits_with_error(cli_service, capsys):
    code, out, err = _run(capsys, ["select", "--table", "ghosts"])

    assert code == 1
    assert out == ""
    assert "ghosts" in err


def test_invalid_input_exits_with_error(cli_service, capsys):
    code, _, err = _run(capsys, ["insert", "--table", "users", "--data", "{}"])
    assert code == 1
    assert "Error" in err


def test_raw_sql_error_exits_with_error(cli_service, capsys):
    code, _, err = _run(capsys, ["query", "--sql", "SELECT * FROM nowhere"])
    assert code == 1
    assert "Database error" in err


def test_bad_json_is_argument_error():
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["insert", "--table", "users", "--data", "[1, 2]"])
    assert exc_info.value.code == 2
