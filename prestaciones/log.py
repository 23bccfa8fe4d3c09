"""
Centralized logging configuration.

Uses structlog on top of the standard library logging module. The
application configures it once with configure_logging(); importing the
package never touches logging configuration. Modules obtain loggers with
get_logger(__name__).
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger

from prestaciones.config import app_settings


def configure_logging(
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
    include_timestamp: bool = True,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to AppSettings.LOG_LEVEL
        format_json: If True, output JSON format; defaults to AppSettings.LOG_JSON
        include_timestamp: Include timestamp in log output
        extra_processors: Additional structlog processors to include
    """
    if level is None:
        level = app_settings.LOG_LEVEL
    if format_json is None:
        format_json = app_settings.LOG_JSON

    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )
    logging.getLogger("prestaciones").setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Does not configure anything: the application calls configure_logging()
    (or its own structlog setup) once at startup.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)
