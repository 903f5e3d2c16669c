"""
Structured logging with structlog.

Development gets a coloured console renderer; staging and production emit
one JSON object per line. Every event carries the app name, version and
environment.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from src.config.settings import get_settings

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = (
    "aiosqlite",
    "asyncpg",
    "fontTools",
    "httpcore",
    "httpx",
    "uvicorn.access",
)


def service_context(app: str, version: str, environment: str) -> Processor:
    """Processor stamping each event with where it came from."""

    def add_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app", app)
        event_dict.setdefault("version", version)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_context


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger; safe to call again."""
    settings = get_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        service_context(settings.app_name, settings.app_version, settings.environment),
    ]
    if settings.environment == "development":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, optionally with bound context."""
    return structlog.get_logger(name, **initial_values)
