"""
Structured Logging - structlog Setup and Correlation IDs.

Provides:
    - configure_structlog(): JSON or console rendering of structured events
    - Correlation ID binding through structlog's context variables, so
      every event emitted while a pipeline run is active carries its id

Usage:
    configure_structlog(use_json=False)
    bind_correlation_id("5d1f...")
    get_logger("roster_pipeline.audit").info("stage_end", stage_name="sort")
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

DEFAULT_LOGGER_NAME = "roster_pipeline"

_CORRELATION_KEY = "correlation_id"


def configure_structlog(
    use_json: bool = True,
    log_level: int = logging.INFO,
) -> None:
    """
    Configure structlog processors and rendering.

    Args:
        use_json: Render events as JSON lines, else as coloured console text
        log_level: Minimum level passed through
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Any:
    """Structured logger bound to ``name``."""
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Replace the correlation id in the current context."""
    structlog.contextvars.unbind_contextvars(_CORRELATION_KEY)
    structlog.contextvars.bind_contextvars(**{_CORRELATION_KEY: correlation_id})


def get_correlation_id() -> Optional[str]:
    """Correlation id bound in the current context, if any."""
    return structlog.contextvars.get_contextvars().get(_CORRELATION_KEY)


def clear_correlation_id() -> None:
    structlog.contextvars.unbind_contextvars(_CORRELATION_KEY)
