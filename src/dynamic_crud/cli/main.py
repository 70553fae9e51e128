"""
Command-line front-end for the dynamic table service.

Usage:
    python -m dynamic_crud.cli <command> [options]

Available commands:
    check    - Report whether a table exists
    insert   - Insert one row
    select   - Select rows matching equality conditions
    update   - Update rows matching equality conditions
    delete   - Delete rows matching equality conditions
    drop     - Drop a table
    exec     - Run raw mutating SQL
    ddl      - Run raw DDL
    query    - Run a raw SELECT

Examples:
    python -m dynamic_crud.cli insert --table users --data '{"name": "Alice", "age": 30}'
    python -m dynamic_crud.cli select --table users --where '{"name": "Alice"}'
    python -m dynamic_crud.cli update --table users --data '{"age": 31}' --where '{"id": 5}'
    python -m dynamic_crud.cli ddl --sql "CREATE TABLE t (id INTEGER PRIMARY KEY)"

The database comes from DATABASE_URL (environment or .env).
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from dynamic_crud.domain.dynamic_table import (
    DynamicTableError,
    DynamicTableService,
    create_service,
)
from dynamic_crud.infrastructure.sql.exceptions import InvalidInputError
from dynamic_crud.utils.logging import get_logger

logger = get_logger(__name__)


def _json_object(value: str) -> Dict[str, Any]:
    """argparse type: a JSON object, key order preserved."""
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynamic_crud.cli",
        description="DynamicCrud CLI - runtime CRUD against tables known by name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(
        title="commands", dest="command", required=True, help="Command to execute"
    )

    for name, help_text in (
        ("check", "Report whether a table exists"),
        ("drop", "Drop a table"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--table", required=True, help="Target table")

    insert_parser = subparsers.add_parser("insert", help="Insert one row")
    insert_parser.add_argument("--table", required=True, help="Target table")
    insert_parser.add_argument("--data", required=True, type=_json_object, help="Row as JSON object")

    for name, help_text in (
        ("select", "Select rows matching equality conditions"),
        ("delete", "Delete rows matching equality conditions"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--table", required=True, help="Target table")
        sub.add_argument("--where", type=_json_object, default=None, help="Conditions as JSON object")

    update_parser = subparsers.add_parser("update", help="Update rows matching equality conditions")
    update_parser.add_argument("--table", required=True, help="Target table")
    update_parser.add_argument("--data", required=True, type=_json_object, help="New values as JSON object")
    update_parser.add_argument("--where", required=True, type=_json_object, help="Conditions as JSON object")

    for name, help_text in (
        ("exec", "Run raw mutating SQL"),
        ("ddl", "Run raw DDL"),
        ("query", "Run a raw SELECT"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--sql", required=True, help="SQL text, executed without validation")

    return parser


def run_command(service: DynamicTableService, args: argparse.Namespace) -> Any:
    """Dispatch parsed arguments to the service and return a JSON-able result."""
    command = args.command
    if command == "check":
        check = service.check_table(args.table)
        return {"table": check.table, "status": check.status.value}
    if command == "insert":
        return {"rowcount": service.insert(args.table, args.data)}
    if command == "select":
        return [list(row) for row in service.select(args.table, args.where)]
    if command == "update":
        return {"rowcount": service.update(args.table, args.data, args.where)}
    if command == "delete":
        return {"rowcount": service.delete(args.table, args.where)}
    if command == "drop":
        service.drop_table(args.table)
        return {"dropped": args.table}
    if command == "exec":
        return {"rowcount": service.execute_update_sql(args.sql)}
    if command == "ddl":
        service.execute_ddl_sql(args.sql)
        return {"ok": True}
    if command == "query":
        return [
            list(row) if isinstance(row, tuple) else row
            for row in service.execute_select_sql(args.sql)
        ]
    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        0 on success, 1 when the operation fails (argparse exits with 2 on
        bad arguments)
    """
    args = build_parser().parse_args(argv)

    try:
        service = create_service()
        result = run_command(service, args)
    except (DynamicTableError, InvalidInputError) as exc:
        logger.error("cli.command_failed", command=args.command, **exc.to_dict())
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except SQLAlchemyError as exc:
        logger.error("cli.command_failed", command=args.command, error=str(exc))
        print(f"Database error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
