"""
Structured logging for dnsreconcile.

Emits single-line JSON records carrying reconciliation context (zone,
record, action, change id).  Every line written during one reconciliation
run shares a ``request_id`` so the read, the comparison and the write can
be correlated in a log aggregator.

The level defaults to ``INFO`` and can be set with the
``DNSRECONCILE_LOG_LEVEL`` environment variable or :meth:`ReconcileLogger.set_level`.
"""

from __future__ import annotations

import json
import logging
import os
import uuid
from typing import Any

LOG_LEVEL_ENV = "DNSRECONCILE_LOG_LEVEL"

_CONTEXT_KEYS = ("request_id", "zone_id", "record_name", "action", "change_id", "status")


def resolve_level(level: int | str | None) -> int:
    """Turn a level name (``"debug"``) or number into a :mod:`logging` level.

    ``None`` and the empty string map to ``INFO``.

    Raises:
        ValueError: If *level* is not a known level name.
    """
    if level is None or level == "":
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


class StructuredFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _CONTEXT_KEYS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry, default=str)


class ReconcileLogger:
    """Structured logger for reconciliation runs.

    Context passed to :meth:`bind` (or to the constructor) is attached to
    every record; per-call keyword arguments override it.
    """

    def __init__(self, name: str = "dnsreconcile", **context: Any) -> None:
        self.logger = logging.getLogger(name)
        self.context = context
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(resolve_level(os.environ.get(LOG_LEVEL_ENV)))

    def set_level(self, level: int | str) -> None:
        """Change the level of the underlying logger (name or number)."""
        self.logger.setLevel(resolve_level(level))

    def bind(self, **context: Any) -> ReconcileLogger:
        """Return a logger sharing this one's handlers with extra context.

        A ``request_id`` is generated when neither side supplies one.
        """
        merged = {**self.context, **context}
        merged.setdefault("request_id", uuid.uuid4().hex[:12])
        return ReconcileLogger(self.logger.name, **merged)

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        exc_info: bool = False,
        **context: Any,
    ) -> None:
        """Emit a structured log record with reconciliation context.

        Args:
            level: Logging level (e.g. logging.INFO).
            message: Human-readable message.
            exc_info: Whether to include exception info.
            **context: Any of ``request_id``, ``zone_id``, ``record_name``,
                ``action``, ``change_id``, ``status``.
        """
        unknown = set(context) - set(_CONTEXT_KEYS)
        if unknown:
            raise TypeError(f"Unknown log context keys: {sorted(unknown)}")
        extra = {**self.context, **{k: v for k, v in context.items() if v is not None}}
        extra.setdefault("request_id", uuid.uuid4().hex[:12])
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.DEBUG, message, **kwargs)


# Module-level singleton
rec_logger = ReconcileLogger()
