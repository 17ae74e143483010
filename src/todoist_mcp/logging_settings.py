"""Helpers for resolving the log level and configuring stderr logging."""

from __future__ import annotations

import logging
import sys

_LEVEL_MAP: dict[str, int | None] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": None,
}

_DEFAULT_LEVEL = "error"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _normalize_level(value: str) -> str:
    return value.strip().lower()


def resolve_level(value: str | None) -> int | None:
    """Map a human-readable level name to a logging level.

    Unknown names fall back to ``error``; ``off`` disables logging entirely.
    """

    if not value:
        return _LEVEL_MAP[_DEFAULT_LEVEL]
    return _LEVEL_MAP.get(_normalize_level(value), _LEVEL_MAP[_DEFAULT_LEVEL])


def configure_logging(level_name: str | None) -> int | None:
    """Configure root logging to stderr.

    stdout carries the MCP stdio transport, so every handler writes to stderr.
    Returns the resolved level (``None`` when logging is off).
    """

    level = resolve_level(level_name)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    logging.basicConfig(
        level=level if level is not None else logging.CRITICAL,
        handlers=[handler],
        force=True,  # Override any existing configuration
    )

    if level is None:
        logging.disable(logging.CRITICAL)
        return None

    logging.disable(logging.NOTSET)
    logging.getLogger("todoist_mcp").setLevel(level)

    # Quiet noisy transport loggers unless debugging
    transport_level = level if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(transport_level)
    logging.getLogger("httpcore").setLevel(transport_level)

    return level


__all__ = ["configure_logging", "resolve_level"]
