"""Tests for log level resolution and logging setup."""

import logging

import pytest

from todoist_mcp.logging_settings import configure_logging, resolve_level


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warn", logging.WARNING),
        (" warning ", logging.WARNING),
        ("error", logging.ERROR),
        ("off", None),
    ],
)
def test_resolve_level(name: str, expected) -> None:
    assert resolve_level(name) == expected


def test_resolve_level_defaults_to_error() -> None:
    assert resolve_level(None) == logging.ERROR
    assert resolve_level("") == logging.ERROR
    assert resolve_level("verbose") == logging.ERROR


def test_configure_logging_quiets_transport_loggers() -> None:
    try:
        level = configure_logging("info")

        assert level == logging.INFO
        assert logging.getLogger("todoist_mcp").level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        logging.disable(logging.NOTSET)


def test_configure_logging_off_disables_output() -> None:
    try:
        assert configure_logging("off") is None
        assert logging.getLogger("todoist_mcp").isEnabledFor(logging.CRITICAL) is False
    finally:
        logging.disable(logging.NOTSET)
