"""Structured logging.

Log lines are structlog events rendered through the stdlib root logger, so
uvicorn and SQLAlchemy output share one format. Per-request context (request
id, acting subject) lives in contextvars and is merged into every event
logged while the request is handled.
"""

import logging
import sys
from typing import Any

import structlog

from mediashare.config import settings

# Loggers that drown out application events at INFO
_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx")


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Safe to call more than once: the CLI and the app module both call it,
    and a previous handler installed here is replaced rather than stacked.

    Args:
        level: Root log level. Defaults to settings.log_level.
        log_format: "json" or "console". Defaults to settings.log_format.
    """
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format or settings.log_format),
            ],
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel((level or settings.log_level).upper())

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_request_context(**values: Any) -> None:
    """Attach key/values to every event logged for the current request."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
