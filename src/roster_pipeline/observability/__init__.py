"""
Observability Package - Structured Events.

Components:
    - configure_structlog: Rendering setup for structured audit events
    - Correlation ID helpers bound through structlog context variables
"""

from roster_pipeline.observability.structured_logging import (
    bind_correlation_id,
    clear_correlation_id,
    configure_structlog,
    get_correlation_id,
    get_logger,
)

__all__ = [
    "bind_correlation_id",
    "clear_correlation_id",
    "configure_structlog",
    "get_correlation_id",
    "get_logger",
]
