"""Configuration management for DynamicCrud.

Usage:
    >>> from dynamic_crud.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.DATABASE_URL)
"""

from dynamic_crud.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
