"""
List View Session - The Presentation-Side Owner of a View State.

A session binds one list view, its record set and its pipeline to the
view state of a single page instance. Every interaction replaces the
state and recomputes synchronously:

    Idle -> (query / filter / sort / page edit) -> Recomputing -> Idle

After each recomputation the stored page is clamped to the new page
count, so the state never points past the last page.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from roster_pipeline.domain.entities import ListViewResult
from roster_pipeline.domain.value_objects import PageWindow
from roster_pipeline.pipeline.record_pipeline import RecordPipeline
from roster_pipeline.pipeline.record_set import RecordSet
from roster_pipeline.pipeline.view_state import ViewState
from roster_pipeline.stages.paginate import page_window

if TYPE_CHECKING:
    from roster_pipeline.adapters.csv_exporter import CsvExporter
    from roster_pipeline.config.models import RosterConfig
    from roster_pipeline.registry.view_registry import ListView

logger = logging.getLogger(__name__)


class ListViewSession:
    """Interactive state of one mounted list page."""

    def __init__(
        self,
        view: "ListView",
        record_set: RecordSet,
        pipeline: RecordPipeline,
        config: Optional["RosterConfig"] = None,
        state: Optional[ViewState] = None,
    ) -> None:
        """
        Mount a list page.

        Args:
            view: List view definition
            record_set: Records built for this page instance
            pipeline: Pipeline configured for ``view``
            config: Roster configuration for initial defaults
            state: Explicit initial state (defaults to ViewState.initial)
        """
        self.view = view
        self.record_set = record_set
        self.pipeline = pipeline
        self._state = state or ViewState.initial(view, config)
        self._result = self._recompute(self._state)

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def result(self) -> ListViewResult:
        """Result of the latest recomputation."""
        return self._result

    def refresh(self) -> ListViewResult:
        return self._apply(self._state)

    def search(self, query: str) -> ListViewResult:
        return self._apply(self._state.with_query(query))

    def filter_status(self, status: str) -> ListViewResult:
        return self._apply(self._state.with_status_filter(status))

    def filter_by(self, field: str, value: str) -> ListViewResult:
        return self._apply(self._state.with_filter(field, value))

    def sort_by(self, key: str) -> ListViewResult:
        return self._apply(self._state.toggle_sort(key))

    def go_to_page(self, page: int) -> ListViewResult:
        return self._apply(self._state.with_page(page))

    def set_page_size(self, page_size: int) -> ListViewResult:
        return self._apply(self._state.with_page_size(page_size))

    def pager(self) -> PageWindow:
        """Pager items for the current page."""
        return page_window(self._result.effective_page, self._result.page_count)

    def export_csv(
        self,
        exporter: "CsvExporter",
        directory: Union[str, Path],
        now: Optional[datetime] = None,
    ) -> Optional[Path]:
        """
        Write every filtered record (all pages) to a CSV file.

        Returns:
            Path of the written file, or None when nothing matched
        """
        return exporter.write(directory, self.view, self._result.filtered_records, now)

    def _apply(self, state: ViewState) -> ListViewResult:
        self._result = self._recompute(state)
        return self._result

    def _recompute(self, state: ViewState) -> ListViewResult:
        result = self.pipeline.run(self.record_set, state)
        self._state = state.clamped(result.page_count)
        if self._state.page != state.page:
            logger.debug(
                f"{self.view.name}: page {state.page} clamped to {self._state.page}"
            )
        return result
