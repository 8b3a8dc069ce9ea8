"""Loguru setup and the `evt=... | key=value` message helper."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from loguru import logger

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# Third-party loggers and the env var that overrides each one's level.
_FOREIGN_LOGGERS: dict[str, tuple[str, str]] = {
    "uvicorn": ("ARTISAN_LOG_LEVEL", "INFO"),
    "uvicorn.error": ("ARTISAN_LOG_LEVEL", "INFO"),
    "uvicorn.access": ("ARTISAN_ACCESS_LOG_LEVEL", "WARNING"),
    "fastapi": ("ARTISAN_LOG_LEVEL", "INFO"),
    "httpx": ("ARTISAN_HTTPX_LOG_LEVEL", "WARNING"),
    "httpcore": ("ARTISAN_HTTPX_LOG_LEVEL", "WARNING"),
}

# Preambles and base64 images would otherwise flood a single log line.
FIELD_LIMIT = 160

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[where]: <30}</cyan> | "
    "<level>{message}</level>"
)


def _level_name(value: str | None, fallback: str) -> str:
    candidate = (value or "").strip().upper()
    return candidate if candidate in LEVELS else fallback


def _stdlib_level(name: str) -> int:
    if name == "TRACE":
        return logging.DEBUG
    if name == "SUCCESS":
        return logging.INFO
    return logging.getLevelName(name)


def _where(record: dict[str, Any]) -> None:
    extra = record["extra"]
    module = str(extra.get("origin") or record.get("name") or "-").rsplit(".", 1)[-1]
    line = extra.get("origin_line") or record.get("line")
    extra["where"] = f"{module}:{line}"


class InterceptHandler(logging.Handler):
    """Forward stdlib records (uvicorn, httpx) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.bind(origin=record.name, origin_line=record.lineno).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(default_level: str = "INFO") -> str:
    """
    Install the loguru sink and route third-party stdlib loggers through it.

    ARTISAN_LOG_LEVEL wins over `default_level`. Access and httpx logs have
    their own variables (ARTISAN_ACCESS_LOG_LEVEL, ARTISAN_HTTPX_LOG_LEVEL)
    and stay at WARNING unless raised. Returns the effective app level.
    """
    level = _level_name(os.getenv("ARTISAN_LOG_LEVEL"), _level_name(default_level, "INFO"))

    logger.remove()
    logger.configure(patcher=_where)
    logger.add(sys.stderr, level=level, format=_FORMAT, colorize=True, backtrace=False, diagnose=False)

    logging.basicConfig(handlers=[InterceptHandler()], level=_stdlib_level(level), force=True)
    for name, (env_var, fallback) in _FOREIGN_LOGGERS.items():
        fallback = level if env_var == "ARTISAN_LOG_LEVEL" else fallback
        foreign = logging.getLogger(name)
        foreign.handlers = [InterceptHandler()]
        foreign.propagate = False
        foreign.setLevel(_stdlib_level(_level_name(os.getenv(env_var), fallback)))

    return level


def _render(value: Any) -> str:
    if value is None or isinstance(value, (bool, int, float)):
        return str(value)
    text = str(value).replace("\n", "\\n")
    if len(text) > FIELD_LIMIT:
        text = f"{text[:FIELD_LIMIT]}...(+{len(text) - FIELD_LIMIT})"
    if not text or any(ch in text for ch in " |'"):
        return "'" + text.replace("'", "\\'") + "'"
    return text


def log_event(event: str, **fields: Any) -> str:
    """Build an `evt=<event> | key=value | ...` log line."""
    return " | ".join([f"evt={event}", *(f"{key}={_render(value)}" for key, value in fields.items())])
