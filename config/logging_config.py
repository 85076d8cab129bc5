"""
Logging System for the Bracket Research Engine

Structlog-based application logging:
- Development: pretty console output with colors
- Production: JSON output for log aggregation

Features:
- Structured key-value context on every event
- Level filtering driven by settings.LOG_LEVEL
- Stage timing helper for the research boundary
"""

import logging
import sys
from datetime import datetime
from contextlib import contextmanager
import structlog

from config.settings import settings


# ============================================================================
# STRUCTLOG CONFIGURATION
# ============================================================================

def configure_structlog():
    """
    Configure structlog for application logging.

    Development: Pretty console output with colors
    Production: JSON output for log aggregation

    This is called automatically on import.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.ENVIRONMENT == "development":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.LOG_LEVEL.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)
              If None, returns root logger

    Returns:
        Configured structlog logger

    Example:
        >>> from config.logging_config import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Bracket parsed", rounds=4)
    """
    if name:
        return structlog.get_logger(name)
    else:
        return structlog.get_logger()


@contextmanager
def log_stage(logger, stage_name: str, **context):
    """
    Context manager for logging stage entry/exit with timing.

    Failures are logged with their type and re-raised unchanged.

    Example:
        >>> with log_stage(logger, "bracket_extraction", tournament="March Madness"):
        ...     build_bracket(text, "Basketball", "March Madness")
    """
    start_time = datetime.utcnow()
    logger.debug("stage_started", stage=stage_name, **context)

    try:
        yield
    except Exception as e:
        duration = (datetime.utcnow() - start_time).total_seconds()
        logger.error(
            "stage_failed",
            stage=stage_name,
            duration_seconds=round(duration, 3),
            error=str(e),
            error_type=type(e).__name__,
            **context
        )
        raise
    else:
        duration = (datetime.utcnow() - start_time).total_seconds()
        logger.debug(
            "stage_completed",
            stage=stage_name,
            duration_seconds=round(duration, 3),
            **context
        )


# ============================================================================
# INITIALIZATION
# ============================================================================

configure_structlog()

logger = get_logger(__name__)

logger.debug(
    "Logging system initialized",
    environment=settings.ENVIRONMENT,
    log_level=settings.LOG_LEVEL,
)


__all__ = [
    "get_logger",
    "logger",
    "configure_structlog",
    "log_stage",
]
