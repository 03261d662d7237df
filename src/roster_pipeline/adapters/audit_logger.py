"""
Structured Audit Logger.

Audit logger emitting one structlog event per pipeline step. Events are
also kept in memory so a page (or a test) can inspect the audit trail
of the latest runs.
"""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

from roster_pipeline.observability.structured_logging import (
    bind_correlation_id,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
)

_SEVERITY_LEVELS = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warning",
    "ERROR": "error",
}


class StructlogAuditLogger:
    """Audit logger backed by structlog."""

    def __init__(self, logger_name: str = "roster_pipeline.audit", max_events: int = 1000) -> None:
        """
        Initialize audit logger.

        Args:
            logger_name: structlog logger name
            max_events: Number of events kept in memory (oldest dropped first)
        """
        self._logger = get_logger(logger_name)
        self._max_events = max_events
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def set_correlation_id(self, correlation_id: str) -> None:
        """Bind correlation ID for subsequent events."""
        bind_correlation_id(correlation_id)

    def clear_correlation_id(self) -> None:
        """Unbind the correlation ID once a run is over."""
        clear_correlation_id()

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the start of a pipeline stage."""
        self._log_event(
            "stage_start",
            {"stage_name": stage_name, "input_count": input_count, **(metadata or {})},
            level="debug",
        )

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the end of a pipeline stage."""
        self._log_event(
            "stage_end",
            {
                "stage_name": stage_name,
                "output_count": output_count,
                "duration_seconds": duration_seconds,
                **(metadata or {}),
            },
        )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly such as an empty result."""
        self._log_event(
            "anomaly",
            {"message": message, "severity": severity, **(context or {})},
            level=_SEVERITY_LEVELS.get(severity.upper(), "warning"),
        )

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Recorded events, optionally only those of one type."""
        with self._lock:
            events = list(self._events)
        if event_type is None:
            return events
        return [e for e in events if e["event_type"] == event_type]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def _log_event(self, event_type: str, data: Dict[str, Any], level: str = "info") -> None:
        event = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            **data,
        }
        with self._lock:
            self._events.append(event)
            if len(self._events) > self._max_events:
                del self._events[0]

        # correlation_id is merged in from the bound context
        fields = {k: v for k, v in event.items() if k not in ("event_type", "correlation_id")}
        getattr(self._logger, level)(event_type, **fields)
