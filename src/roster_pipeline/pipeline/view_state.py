"""
View State - Interactive Control Parameters of a List Page.

The view state is owned by the presentation layer. It is immutable:
every interaction produces a new state via one of the transition
methods below.

Transition rules:
    - Changing query, filters, sort or page size resets to page 1
    - Changing only the page number does not
    - Toggling the current sort key flips its direction; a new key
      always starts ascending
    - Every transition is validated, so a page size below 1 is
      rejected before it reaches pagination
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import BaseModel, Field

from roster_pipeline.domain.value_objects import ALL_STATUSES, SortDirection
from roster_pipeline.stages.paginate import clamp_page

if TYPE_CHECKING:
    from roster_pipeline.config.models import RosterConfig
    from roster_pipeline.registry.view_registry import ListView

DEFAULT_PAGE_SIZE = 4


class ViewState(BaseModel):
    """Query, filters, sort and page of one list view."""

    query: str = ""
    status_filter: str = ALL_STATUSES
    filters: Dict[str, str] = Field(default_factory=dict)
    sort_key: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def initial(
        cls,
        view: "ListView",
        config: Optional["RosterConfig"] = None,
    ) -> "ViewState":
        """
        Default state of a freshly mounted view.

        Sort, filters and page size come from the view definition.
        Per-view config settings override them; the global default page
        size applies to views that declare none. The page is always 1.
        """
        sort_key = view.default_sort_key
        direction = view.default_sort_direction
        page_size = view.default_page_size or DEFAULT_PAGE_SIZE

        if config is not None:
            settings = config.view_settings(view.name)
            sort_key = settings.default_sort_key or sort_key
            direction = settings.default_sort_direction or direction
            page_size = (
                settings.default_page_size
                or view.default_page_size
                or config.global_settings.default_page_size
            )

        return cls(
            filters=dict(view.default_filters),
            sort_key=sort_key,
            sort_direction=direction,
            page=1,
            page_size=page_size,
        )

    def with_query(self, query: str) -> "ViewState":
        return self._replace(query=query, page=1)

    def with_status_filter(self, status: str) -> "ViewState":
        return self._replace(status_filter=status, page=1)

    def with_filter(self, field: str, value: str) -> "ViewState":
        """Select a value for an extra categorical filter ("All" clears it)."""
        filters = dict(self.filters)
        if value == ALL_STATUSES:
            filters.pop(field, None)
        else:
            filters[field] = value
        return self._replace(filters=filters, page=1)

    def toggle_sort(self, key: str) -> "ViewState":
        """Header click: flip direction on the same key, else sort ascending."""
        if key == self.sort_key:
            direction = SortDirection(self.sort_direction).flipped()
        else:
            direction = SortDirection.ASC
        return self._replace(sort_key=key, sort_direction=direction, page=1)

    def with_page(self, page: int) -> "ViewState":
        return self._replace(page=max(page, 1))

    def with_page_size(self, page_size: int) -> "ViewState":
        return self._replace(page_size=page_size, page=1)

    def clamped(self, page_count: int) -> "ViewState":
        """State with the page pulled back into ``1..page_count``."""
        page = clamp_page(self.page, page_count)
        if page == self.page:
            return self
        return self._replace(page=page)

    def _replace(self, **changes: Any) -> "ViewState":
        """Copy with ``changes`` applied, re-running field validation."""
        return type(self).model_validate({**self.model_dump(), **changes})
