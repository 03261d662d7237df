"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the collaborator protocols declared by the
record pipeline, following the Ports & Adapters pattern.

Providers:
    - MockRecordProvider: Generated records for every built-in view

Loggers:
    - StructlogAuditLogger: Structured audit events via structlog
    - ConsoleAuditLogger: Plain console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Export:
    - CsvExporter: Spreadsheet-compatible CSV files

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No list view logic in adapters
"""

from roster_pipeline.adapters.audit_logger import StructlogAuditLogger
from roster_pipeline.adapters.console_logger import ConsoleAuditLogger
from roster_pipeline.adapters.csv_exporter import CsvExporter, export_filename
from roster_pipeline.adapters.metrics_collector import InMemoryMetricsCollector
from roster_pipeline.adapters.mock_provider import MockRecordProvider

__all__ = [
    "ConsoleAuditLogger",
    "CsvExporter",
    "InMemoryMetricsCollector",
    "MockRecordProvider",
    "StructlogAuditLogger",
    "export_filename",
]
