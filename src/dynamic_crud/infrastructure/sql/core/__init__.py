"""Core SQL utilities package."""

from .identifier import (
    is_valid_identifier,
    qualify_table,
    quote_identifier,
    validate_identifier,
    validate_table_name,
)
from .parameters import bind_parameters, build_placeholders, placeholder
from .types import (
    BatchStatement,
    ColumnValueSet,
    ConditionSet,
    GeneratedStatement,
    Scalar,
    is_scalar,
)

__all__ = [
    "is_valid_identifier",
    "validate_identifier",
    "validate_table_name",
    "quote_identifier",
    "qualify_table",
    "bind_parameters",
    "build_placeholders",
    "placeholder",
    "BatchStatement",
    "ColumnValueSet",
    "ConditionSet",
    "GeneratedStatement",
    "Scalar",
    "is_scalar",
]
