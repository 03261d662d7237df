"""
In-Memory Metrics Collector.

Stores pipeline timings and counts in memory, grouped by metric name.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a duration in seconds."""
        with self._lock:
            self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count, e.g. rows removed by a stage."""
        with self._lock:
            self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        with self._lock:
            self._record(name, "gauge", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric name: number of samples, total and last value."""
        with self._lock:
            summary = {}
            for name, entries in self._metrics.items():
                if entries:
                    values = [e["value"] for e in entries]
                    summary[name] = {
                        "count": len(values),
                        "total": sum(values),
                        "last": values[-1],
                    }
            return summary

    def get_samples(
        self,
        name: str,
        tags: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Raw samples of one metric.

        Args:
            name: Metric name
            tags: Only samples carrying all of these tags
        """
        with self._lock:
            entries = list(self._metrics.get(name, []))
        if not tags:
            return entries
        return [
            e for e in entries
            if all(e["tags"].get(k) == v for k, v in tags.items())
        ]

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        self._metrics.setdefault(name, []).append(
            {
                "type": metric_type,
                "value": value,
                "tags": tags or {},
                "timestamp": datetime.now().isoformat(),
            }
        )
