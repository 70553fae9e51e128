"""
Value types shared by the SQL generator and the table service.

A ColumnValueSet is an ordered mapping of column name to scalar value. Its
iteration order decides both the column order in generated SQL and the
order of bound parameters.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .parameters import bind_parameters

Scalar = Union[str, int, float, Decimal, bool, None, date, datetime, time]

SCALAR_TYPES = (str, int, float, Decimal, bool, date, datetime, time)

ColumnValueSet = Mapping[str, Scalar]
ConditionSet = Optional[Mapping[str, Scalar]]


def is_scalar(value: Any) -> bool:
    """Return True if value belongs to the supported scalar variant."""
    return value is None or isinstance(value, SCALAR_TYPES)


@dataclass(frozen=True)
class GeneratedStatement:
    """
    SQL text plus its ordered parameters.

    Created per generator call and consumed immediately by the executor.

    Attributes:
        sql: Statement text with placeholders in ``paramstyle`` form
        parameters: Values in placeholder order
        paramstyle: DB-API paramstyle the placeholders were rendered in
    """

    sql: str
    parameters: Tuple[Scalar, ...] = ()
    paramstyle: str = "qmark"

    def bind(self) -> Union[Tuple[Scalar, ...], Dict[str, Scalar]]:
        """Return parameters in the shape the DB-API driver expects."""
        return bind_parameters(self.parameters, self.paramstyle)


@dataclass(frozen=True)
class BatchStatement:
    """One SQL text executed once per parameter row (executemany)."""

    sql: str
    rows: Tuple[Tuple[Scalar, ...], ...]
    paramstyle: str = "qmark"

    def bind(self) -> list:
        return [bind_parameters(row, self.paramstyle) for row in self.rows]
