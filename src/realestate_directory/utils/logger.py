"""
Logging Configuration

structlog on top of the standard library root logger. Events are snake_case
names with keyword context: JSON lines when settings.log_format is "json",
coloured console output otherwise.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor

from config.settings import settings


def add_environment(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["environment"] = settings.environment
    return event_dict


def setup_logging() -> None:
    """Configure structlog once at process start (API lifespan, scripts)."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_environment,
    ]
    if settings.log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [structlog.processors.ExceptionRenderer(), structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Module logger; pass __name__."""
    return structlog.get_logger(name)
