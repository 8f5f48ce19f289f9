"""Logging setup with structured, chainable context."""

from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping

from routestats.core.config import Settings

_LOGGER_NAME = "routestats"


class _ContextFormatter(logging.Formatter):
    """Append the record's context dict as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying context fields onto every record.

    Usage:
        log = logger.with_context(context_base="metrics_middleware", prefix="api")
        log.debug("Recorded metrics")
    """

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None) -> None:
        super().__init__(logger, dict(context or {}))

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["context"] = {**self.extra, **extra.get("context", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **context: Any) -> ContextualLogger:
        """Return a new logger with ``context`` merged over the current fields."""
        return ContextualLogger(self.logger, {**self.extra, **context})


def configure_logging(settings: Settings) -> ContextualLogger:
    """Attach a stdout handler to the package logger and apply the log level.

    Args:
        settings: Settings carrying ``LOG_LEVEL``.

    Returns:
        The package-wide contextual logger.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    base = logging.getLogger(_LOGGER_NAME)
    base.setLevel(log_level)
    if not base.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            _ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        base.addHandler(handler)

    logger.debug(f"Logging configured with level {logging.getLevelName(log_level)}")
    return logger


logger = ContextualLogger(logging.getLogger(_LOGGER_NAME))
