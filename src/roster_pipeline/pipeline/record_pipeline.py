"""
Record Pipeline - Main Orchestrator.

The RecordPipeline derives the visible rows of a list view from a record
set and a view state, applying its stages in a fixed order:

    filter -> search -> sort -> paginate

Each run is synchronous and, for the same inputs, yields the same rows.
Every stage is timed and reported to the audit logger and the metrics
collector.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Protocol, Tuple

from roster_pipeline.domain.entities import ListViewResult, StageResult
from roster_pipeline.domain.value_objects import PageSlice, RecordList, RecordSequence
from roster_pipeline.pipeline.view_state import ViewState
from roster_pipeline.stages.paginate import PaginateStage
from roster_pipeline.stages.search import SearchStage
from roster_pipeline.stages.sort import SortStage
from roster_pipeline.stages.status_filter import CategoricalFilterStage, StatusFilterStage

if TYPE_CHECKING:
    from roster_pipeline.config.models import RosterConfig
    from roster_pipeline.registry.view_registry import ListView

logger = logging.getLogger(__name__)

PIPELINE_VERSION = "1.0.0"


class RecordStageProtocol(Protocol):
    """Protocol for filter, search and sort stages."""

    @property
    def name(self) -> str:
        ...

    def apply(self, records: RecordSequence, state: ViewState) -> RecordList:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def clear_correlation_id(self) -> None:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class ViewStateValidatorProtocol(Protocol):
    """Protocol for view state validators."""

    def validate(
        self, state: ViewState, view: "ListView", config: Optional["RosterConfig"] = None
    ) -> None:
        ...


def build_stages(view: "ListView") -> List[RecordStageProtocol]:
    """
    Default stage sequence for a view.

    Status filter first, then the view's extra categorical filters,
    then search and sort over the view's columns.
    """
    stages: List[RecordStageProtocol] = [StatusFilterStage()]
    for field in view.categorical_filters:
        column = view.column(field)
        accessor = column.accessor if column is not None else None
        stages.append(CategoricalFilterStage(field, accessor))
    stages.append(SearchStage(view.columns))
    stages.append(SortStage(view.columns))
    return stages


class RecordPipeline:
    """Orchestrates filter, search, sort and paginate for one list view."""

    def __init__(
        self,
        view: "ListView",
        audit_logger: AuditLoggerProtocol,
        metrics_collector: MetricsCollectorProtocol,
        stages: Optional[List[RecordStageProtocol]] = None,
        config: Optional["RosterConfig"] = None,
        validator: Optional[ViewStateValidatorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            view: List view definition (columns, filters)
            audit_logger: For audit trail
            metrics_collector: For performance metrics
            stages: Ordered filter/search/sort stages
                    (defaults to build_stages(view))
            config: Roster configuration (used by the validator)
            validator: Optional view state validator
        """
        self.view = view
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.stages = stages if stages is not None else build_stages(view)
        self.paginator = PaginateStage()
        self.config = config
        self.validator = validator

    def run(self, records: Iterable[Any], state: ViewState) -> ListViewResult:
        """
        Derive the visible rows for a view state.

        Args:
            records: Record set (or any iterable of records) of the view
            state: Current view state

        Returns:
            ListViewResult with visible rows and pagination metadata

        Raises:
            ValidationError: If a validator is configured and rejects the state
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)

        try:
            if self.validator:
                self.validator.validate(state, self.view, self.config)
                logger.debug(f"View state validated: {correlation_id}")

            current: RecordList = list(records)
            audit_trail: List[StageResult] = []

            for stage in self.stages:
                stage_result, current = self._execute_stage(stage, current, state)
                audit_trail.append(stage_result)

            page_result, page = self._execute_pagination(current, state)
            audit_trail.append(page_result)

            if page.total_count == 0:
                self.audit_logger.log_anomaly(
                    "No records matched the current view state",
                    severity="INFO",
                    context={"view": self.view.name, "query": state.query},
                )

            total_duration = time.perf_counter() - start_time
            self.metrics_collector.record_timing(
                "pipeline_total_seconds",
                total_duration,
                {"view": self.view.name},
            )
            self.metrics_collector.record_count(
                "visible_records_total",
                len(page.records),
                {"view": self.view.name},
            )

            return ListViewResult(
                visible_records=page.records,
                filtered_records=current,
                total_count=page.total_count,
                page_count=page.page_count,
                effective_page=page.effective_page,
                audit_trail=audit_trail,
                metadata=self._build_metadata(correlation_id, total_duration),
            )
        finally:
            self.audit_logger.clear_correlation_id()

    def _execute_stage(
        self,
        stage: RecordStageProtocol,
        records: RecordList,
        state: ViewState,
    ) -> Tuple[StageResult, RecordList]:
        """Execute a single filter, search or sort stage."""
        stage_start = time.perf_counter()
        self.audit_logger.log_stage_start(
            stage.name, len(records), {"view": self.view.name}
        )

        output = stage.apply(records, state)

        stage_duration = time.perf_counter() - stage_start
        self.audit_logger.log_stage_end(
            stage.name, len(output), stage_duration, {"view": self.view.name}
        )
        self.metrics_collector.record_timing(
            "stage_duration_seconds",
            stage_duration,
            {"stage": stage.name},
        )
        self.metrics_collector.record_count(
            "records_removed_total",
            len(records) - len(output),
            {"stage": stage.name},
        )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=len(output),
            duration_seconds=stage_duration,
        )
        return stage_result, output

    def _execute_pagination(
        self,
        records: RecordList,
        state: ViewState,
    ) -> Tuple[StageResult, PageSlice]:
        """Cut the requested page; the page number is clamped, never rejected."""
        stage_start = time.perf_counter()
        self.audit_logger.log_stage_start(
            self.paginator.name, len(records), {"view": self.view.name}
        )

        page = self.paginator.apply(records, state)

        stage_duration = time.perf_counter() - stage_start
        self.audit_logger.log_stage_end(
            self.paginator.name,
            len(page.records),
            stage_duration,
            {
                "view": self.view.name,
                "page": page.effective_page,
                "page_count": page.page_count,
            },
        )
        if page.effective_page != state.page:
            logger.debug(
                f"Requested page {state.page} clamped to {page.effective_page} "
                f"of {page.page_count}"
            )

        stage_result = StageResult(
            stage_name=self.paginator.name,
            input_count=len(records),
            output_count=len(page.records),
            duration_seconds=stage_duration,
        )
        return stage_result, page

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        """Build result metadata."""
        return {
            "correlation_id": correlation_id,
            "view": self.view.name,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": PIPELINE_VERSION,
        }
