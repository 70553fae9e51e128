"""Errors raised while assembling SQL statements."""

from typing import Dict, Optional


class InvalidInputError(ValueError):
    """Input that would produce malformed or unsafe SQL."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "InvalidInputError",
            "field": self.field,
            "message": str(self),
        }
