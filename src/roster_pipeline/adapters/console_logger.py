"""
Console Page Trace.

Audit logger for interactive use: prints one line per pipeline stage in
the form ``<view> | <stage>: <in> -> <out> records`` and a closing page
line such as ``teachers | page 2/7: 4 of 25 rows``.

Usage:
    pipeline = RecordPipeline(view, ConsoleAuditLogger(), metrics)
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO


class ConsoleAuditLogger:
    """Prints a compact per-run trace of a list page to a text stream."""

    def __init__(self, verbose: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Args:
            verbose: If False, only anomalies are printed.
            stream: Output stream (defaults to stdout at print time)
        """
        self._verbose = verbose
        self._stream = stream
        self._correlation_id: Optional[str] = None
        self._input_counts: Dict[str, int] = {}

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id
        self._input_counts.clear()

    def clear_correlation_id(self) -> None:
        self._correlation_id = None
        self._input_counts.clear()

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._input_counts[stage_name] = input_count

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self._verbose:
            return
        metadata = metadata or {}
        view = metadata.get("view", "?")
        input_count = self._input_counts.pop(stage_name, output_count)

        if "page_count" in metadata:
            self._log(
                "INFO",
                f"{view} | page {metadata.get('page')}/{metadata['page_count']}: "
                f"{output_count} of {input_count} rows",
            )
        else:
            self._log(
                "INFO",
                f"{view} | {stage_name}: {input_count} -> {output_count} records "
                f"({duration_seconds:.3f}s)",
            )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        prefix = f"{context['view']} | " if "view" in context else ""
        query = f" (query {context['query']!r})" if context.get("query") else ""
        self._log(severity, f"{prefix}ANOMALY: {message}{query}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(
            f"[{timestamp}] [{corr_id}] [{level:5}] {message}",
            file=self._stream or sys.stdout,
        )
