"""Structured logging helpers with correlation and thread metadata."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from poeaa_registry.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

LEVEL_NAME = str(getattr(settings, "POEAA_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "POEAA_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    # Precedence: explicit override → repo root logs → package-local logs
    candidates.append(ROOT_DIR / "logs")
    candidates.append(BASE_DIR / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


LOGS_DIR = _resolve_logs_dir()
LOG_SCHEMA_VERSION = str(getattr(settings, "POEAA_LOG_SCHEMA_VERSION", "1.0.0"))
LOG_FILE_PATH = LOGS_DIR / "poeaa_registry.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        # Explicit overrides on the record win.
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach correlation and thread metadata to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.thread_tag = str(record.thread)
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the correlation id context variable."""

    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    """Reset the correlation id context variable to a previous state."""

    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


@contextmanager
def correlation_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a correlation id."""

    token = bind_correlation_id(value)
    try:
        yield
    finally:
        reset_correlation_id(token)


def _ensure_handlers(logger: logging.Logger) -> None:
    if logger.handlers:
        return

    formatter = VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(thread_tag)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "thread_tag": "thread",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )
    correlation_filter = CorrelationIdFilter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.addFilter(correlation_filter)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    file_handler = RotatingFileHandler(
        LOG_FILE_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.addFilter(correlation_filter)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with correlation id filtering."""

    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    _ensure_handlers(logger)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "VersionedJsonFormatter",
    "bind_correlation_id",
    "reset_correlation_id",
    "get_correlation_id",
    "correlation_id_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
