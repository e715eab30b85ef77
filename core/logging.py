"""
Structured logging for the SDK.

Events are built with structlog but handed to stdlib loggers under the
"oxvs" namespace, so an embedding application that never configures
logging hears nothing (stdlib drops DEBUG/INFO by default). Calling
configure_logging() attaches a stderr handler to that namespace only;
the application's root logger and stdout are left alone.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from core.config import Settings, settings as default_settings


# Parent of every SDK logger
ROOT_LOGGER_NAME = "oxvs"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog processors and the SDK's stdlib handler.

    Development: Human-readable colored output
    Production: JSON output for log aggregation systems
    """
    settings = settings or default_settings
    level = logging.getLevelName(settings.log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.is_development:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    sdk_logger.handlers = [handler]
    sdk_logger.setLevel(level)
    sdk_logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging(): SDK loggers go quiet again."""
    structlog.reset_defaults()

    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    sdk_logger.handlers = []
    sdk_logger.setLevel(logging.NOTSET)
    sdk_logger.propagate = True


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a logger backed by the stdlib logger "oxvs.<name>".

    Args:
        name: Logger name (typically __name__)
        **initial_context: Initial context values to bind

    Usage:
        logger = get_logger(__name__, user_id="alice")
        logger.info("Session stored", key="oxvsUser")
    """
    stdlib_name = f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME
    logger = structlog.wrap_logger(logging.getLogger(stdlib_name))
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
