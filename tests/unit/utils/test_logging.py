"""Unit tests for the structlog configuration."""

from dynamic_crud.utils.logging import (
    REDACTED_VALUE,
    get_logger,
    sanitization_processor,
    sanitize_for_logging,
)


def test_sanitize_redacts_sensitive_keys():
    data = {
        "password": "secret123",
        "DATABASE_URL": "mysql://user:pw@db/app",
        "table": "users",
        "nested": {"api_token": "abc", "rowcount": 1},
    }

    sanitized = sanitize_for_logging(data)

    assert sanitized["password"] == REDACTED_VALUE
    assert sanitized["DATABASE_URL"] == REDACTED_VALUE
    assert sanitized["table"] == "users"
    assert sanitized["nested"] == {"api_token": REDACTED_VALUE, "rowcount": 1}


def test_processor_keeps_event_name():
    event_dict = {"event": "dynamic_table.insert", "db_password": "x", "rowcount": 1}

    result = sanitization_processor(None, "info", event_dict)

    assert result == {
        "event": "dynamic_table.insert",
        "db_password": REDACTED_VALUE,
        "rowcount": 1,
    }


def test_get_logger_binds():
    logger = get_logger("dynamic_crud.test")
    assert logger.bind(table="users") is not None
