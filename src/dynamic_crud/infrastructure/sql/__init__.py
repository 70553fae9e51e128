"""
SQL module for runtime statement generation.

Builds parameterized INSERT/SELECT/UPDATE/DELETE/DROP statements from a table
name and ordered column mappings, with identifier validation, optional
quoting, and placeholders for any DB-API paramstyle.
"""

from .core.identifier import qualify_table, quote_identifier, validate_table_name
from .core.parameters import bind_parameters, build_placeholders
from .core.types import BatchStatement, GeneratedStatement
from .dialects import SqlDialect, get_dialect
from .exceptions import InvalidInputError
from .operations.generator import SqlGenerator

__all__ = [
    "quote_identifier",
    "qualify_table",
    "validate_table_name",
    "bind_parameters",
    "build_placeholders",
    "BatchStatement",
    "GeneratedStatement",
    "SqlDialect",
    "get_dialect",
    "InvalidInputError",
    "SqlGenerator",
]
