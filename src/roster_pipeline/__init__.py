"""
Roster Pipeline - List View Engine for a School Dashboard.

Derives the visible rows of the dashboard's list pages (subjects,
classes, teachers, admins, roles, students, tuition payments and the
student report settings) from an in-memory record set and the page's
view state:

    filter -> search -> sort -> paginate

and exports the filtered rows as spreadsheet-compatible CSV.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Declarative column descriptors instead of per-row type checks
    - Configuration-driven defaults via YAML

Main Components:
    - domain: Record types and pipeline results
    - columns: Column descriptors and collation keys
    - stages: Filter, search, sort and paginate
    - pipeline: Orchestration, view state and sessions
    - registry: List view definitions
    - datasets: Mock record factories
    - adapters: Providers, loggers, metrics, CSV export
    - config: Configuration models and loaders

Example:
    >>> from roster_pipeline.adapters import (
    ...     InMemoryMetricsCollector, MockRecordProvider, StructlogAuditLogger,
    ... )
    >>> from roster_pipeline.pipeline import ListViewSession, RecordPipeline
    >>> provider = MockRecordProvider()
    >>> view = provider.registry.require("teachers")
    >>> pipeline = RecordPipeline(view, StructlogAuditLogger(), InMemoryMetricsCollector())
    >>> session = ListViewSession(view, provider.get_records("teachers"), pipeline)
    >>> session.search("math").total_count
    8

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Roster Pipeline.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import roster_pipeline
        >>> roster_pipeline.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("roster_pipeline").setLevel(level)
