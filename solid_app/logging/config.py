"""
Centralized logging configuration for the SOLID examples.

All examples log through structlog so that their debug output shares one
format. Console lines that are part of an example's behavior (such as the
basket search results) are printed directly and never go through here.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    cache_logger_on_first_use: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        cache_logger_on_first_use: Cache bound loggers; disable in tests that
            reconfigure structlog
    """
    log_level = getattr(logging, level.upper())

    # Log records go to stderr so they never mix with example output
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

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

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

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
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def get_logger(name: str, **context: Any) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)
        **context: Values bound to every event from this logger

    Returns:
        Configured structlog logger instance
    """
    # Initial values keep the proxy lazy; bind() would freeze the current config
    return structlog.get_logger(name, **context)


def get_principle_logger(name: str, principle: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the design principle an example demonstrates.

    Args:
        name: Logger name (typically __name__)
        principle: Short principle name, e.g. "dependency_inversion"

    Returns:
        Configured structlog logger with the principle bound
    """
    return get_logger(name, principle=principle)
