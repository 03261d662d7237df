"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List

import pytest
import structlog

from roster_pipeline.adapters.audit_logger import StructlogAuditLogger
from roster_pipeline.adapters.console_logger import ConsoleAuditLogger
from roster_pipeline.adapters.metrics_collector import InMemoryMetricsCollector
from roster_pipeline.adapters.mock_provider import MockRecordProvider
from roster_pipeline.config.models import RosterConfig
from roster_pipeline.domain.entities import ClassRecord, RecordStatus, SubjectRecord
from roster_pipeline.observability.structured_logging import configure_structlog
from roster_pipeline.pipeline.record_pipeline import RecordPipeline
from roster_pipeline.registry.catalog import default_registry
from roster_pipeline.registry.view_registry import ListView, ViewRegistry


@pytest.fixture(autouse=True)
def structured_logging():
    """Render structlog events as JSON and start every test without context."""
    configure_structlog(use_json=True, log_level=logging.DEBUG)
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> RosterConfig:
    """Create default roster configuration."""
    return RosterConfig()


@pytest.fixture
def registry() -> ViewRegistry:
    """Registry with the built-in views."""
    return default_registry()


@pytest.fixture
def mock_provider(registry: ViewRegistry) -> MockRecordProvider:
    """Create mock provider for testing."""
    return MockRecordProvider(target_count=25, registry=registry)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def audit_logger() -> StructlogAuditLogger:
    """Create structured audit logger for testing."""
    return StructlogAuditLogger()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def make_pipeline(
    registry: ViewRegistry,
    audit_logger: StructlogAuditLogger,
    metrics_collector: InMemoryMetricsCollector,
) -> Callable[[str], RecordPipeline]:
    """Factory building a pipeline for a built-in view by name."""

    def _make(view_name: str) -> RecordPipeline:
        return RecordPipeline(
            view=registry.require(view_name),
            audit_logger=audit_logger,
            metrics_collector=metrics_collector,
        )

    return _make


@pytest.fixture
def subjects_view(registry: ViewRegistry) -> ListView:
    return registry.require("subjects")


@pytest.fixture
def classes_view(registry: ViewRegistry) -> ListView:
    return registry.require("classes")


@pytest.fixture
def sample_subjects() -> List[SubjectRecord]:
    """Subjects with codes that only sort right when digit runs compare by value."""
    return [
        SubjectRecord(code="BIO010", name="Biology", description="Cells", status=RecordStatus.ACTIVE),
        SubjectRecord(code="ART001", name="Art", description="Drawing", status=RecordStatus.NON_ACTIVE),
        SubjectRecord(code="BIO002", name="biology", description="Plants", status=RecordStatus.ACTIVE),
        SubjectRecord(code="ENG001", name="Énglish", description="Grammar", status=RecordStatus.NON_ACTIVE),
    ]


@pytest.fixture
def sample_classes() -> List[ClassRecord]:
    """Classes, two of them without a known capacity."""
    return [
        ClassRecord(name="X-A", homeroom_teacher="Rina", capacity=None, total_students=0, total_subjects=5),
        ClassRecord(name="XI-A", homeroom_teacher="Budi", capacity=32, total_students=30, total_subjects=6),
        ClassRecord(name="X-B", homeroom_teacher="Sari", capacity=None, total_students=0, total_subjects=5),
        ClassRecord(name="XI-B", homeroom_teacher="Dewi", capacity=28, total_students=27, total_subjects=6),
        ClassRecord(name="XII-A", homeroom_teacher="Agus", capacity=36, total_students=35, total_subjects=7,
                    status=RecordStatus.NON_ACTIVE),
    ]
