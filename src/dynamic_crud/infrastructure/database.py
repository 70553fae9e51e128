"""SQLAlchemy engine construction from settings."""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from dynamic_crud.config import Settings, get_settings
from dynamic_crud.utils.logging import get_logger

logger = get_logger(__name__)


def build_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Create an Engine for ``settings.DATABASE_URL``.

    Pool sizing is skipped for SQLite, whose default pools take no size.
    """
    settings = settings or get_settings()
    url = make_url(settings.DATABASE_URL)

    # bound values stay out of error messages and logs
    kwargs = {"echo": settings.DB_ECHO, "pool_pre_ping": True, "hide_parameters": True}
    if url.get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.DB_POOL_SIZE

    engine = create_engine(url, **kwargs)
    logger.info(
        "database.engine_created",
        backend=url.get_backend_name(),
        driver=url.get_driver_name(),
        host=url.host,
        database=url.database,
    )
    return engine
