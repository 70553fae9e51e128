"""Dynamic table service: CRUD and DDL against tables known only by name."""

from .exceptions import (
    DynamicTableError,
    StatementExecutionError,
    TableInaccessibleError,
    TableNotFoundError,
)
from .models import TableCheck, TableStatus
from .service import DynamicTableService, create_service

__all__ = [
    "DynamicTableService",
    "create_service",
    "TableCheck",
    "TableStatus",
    "DynamicTableError",
    "TableNotFoundError",
    "TableInaccessibleError",
    "StatementExecutionError",
]
