"""Table existence probe outcome."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import TableInaccessibleError, TableNotFoundError


class TableStatus(str, Enum):
    EXISTS = "exists"
    NOT_FOUND = "not_found"
    INACCESSIBLE = "inaccessible"


@dataclass(frozen=True)
class TableCheck:
    """
    Result of the two-tier existence probe.

    Attributes:
        table: Table name that was probed
        status: Probe outcome
        cause: Error from the fallback probe when status is INACCESSIBLE
    """

    table: str
    status: TableStatus
    cause: Optional[Exception] = None

    @property
    def exists(self) -> bool:
        return self.status is TableStatus.EXISTS

    def raise_for_status(self) -> None:
        """Raise the matching service error unless the table exists."""
        if self.status is TableStatus.NOT_FOUND:
            raise TableNotFoundError(self.table)
        if self.status is TableStatus.INACCESSIBLE:
            raise TableInaccessibleError(self.table, self.cause)  # type: ignore[arg-type]
