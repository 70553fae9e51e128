"""Errors raised by the dynamic table service.

Every error carries the table it concerns and converts to a structured dict
for logging.
"""

from typing import Dict, Optional


def describe_error(exc: BaseException) -> str:
    """
    Error text without bound parameter values.

    SQLAlchemy appends ``[parameters: ...]`` to its own message, so the
    underlying DB-API error is used when there is one.
    """
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


class DynamicTableError(Exception):
    """Base error for dynamic table operations."""

    def __init__(self, table: str, message: str):
        self.table = table
        super().__init__(message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "table": self.table,
            "message": str(self),
        }


class TableNotFoundError(DynamicTableError):
    """Both existence probes agree the table does not exist."""

    def __init__(self, table: str):
        super().__init__(table, f"Table '{table}' does not exist")


class TableInaccessibleError(DynamicTableError):
    """The fallback existence probe itself failed (permissions, connectivity)."""

    def __init__(self, table: str, original_error: Exception):
        self.original_error = original_error
        super().__init__(
            table,
            f"Table '{table}' does not exist or is not accessible: {describe_error(original_error)}",
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = super().to_dict()
        data["original_error_type"] = type(self.original_error).__name__
        data["original_error_message"] = describe_error(self.original_error)
        return data


class StatementExecutionError(DynamicTableError):
    """The database rejected a generated statement; the transaction was rolled back."""

    def __init__(self, table: str, operation: str, original_error: Exception):
        self.operation = operation
        self.original_error = original_error
        super().__init__(
            table, f"{operation} on table '{table}' failed: {describe_error(original_error)}"
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = super().to_dict()
        data["operation"] = self.operation
        data["original_error_type"] = type(self.original_error).__name__
        data["original_error_message"] = describe_error(self.original_error)
        return data
