"""
Configuration management for DynamicCrud.

Environment-based configuration using Pydantic BaseSettings. Values come
from the process environment or a ``.env`` file at the project root
(override with ``DYNCRUD_ENV_FILE``).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("DYNCRUD_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Uppercase fields are read without prefix (DATABASE_URL, LOG_LEVEL, ...).
    Lowercase fields use the DYNCRUD_ prefix, e.g. DYNCRUD_QUOTE_IDENTIFIERS.
    """

    DATABASE_URL: str = Field(
        validation_alias="DATABASE_URL",
        description="SQLAlchemy database URL",
    )
    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    DB_POOL_SIZE: int = Field(
        default=5,
        validation_alias="DB_POOL_SIZE",
        description="Database connection pool size",
    )
    DB_ECHO: bool = Field(
        default=False,
        validation_alias="DB_ECHO",
        description="Echo SQL statements through SQLAlchemy's logger",
    )

    validate_identifiers: bool = Field(
        default=True,
        description="Reject table/column names that are not plain identifiers",
    )
    quote_identifiers: bool = Field(
        default=False,
        description="Quote table/column names using the engine dialect",
    )
    read_isolation_level: Optional[str] = Field(
        default=None,
        description="Isolation level for read-only operations (e.g. READ COMMITTED)",
    )

    @model_validator(mode="after")
    def validate_production_database_url(self) -> "Settings":
        """Reject SQLite in production.

        Raises:
            ValueError: If ENVIRONMENT is 'prod' and DATABASE_URL is SQLite
        """
        if self.ENVIRONMENT == "prod" and self.DATABASE_URL.startswith("sqlite"):
            raise ValueError(
                "Production environment requires a server database; "
                f"got: {self.DATABASE_URL[:20]}..."
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="DYNCRUD_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
