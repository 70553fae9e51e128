"""SQL statement builders."""

from .delete import build_delete_sql, build_drop_table_sql
from .generator import SqlGenerator
from .insert import build_insert_sql
from .select import build_select_sql
from .update import build_update_sql

__all__ = [
    "SqlGenerator",
    "build_insert_sql",
    "build_select_sql",
    "build_update_sql",
    "build_delete_sql",
    "build_drop_table_sql",
]
