"""
Pagination.

    page_count     = max(1, ceil(total / page_size))
    effective_page = min(requested_page, page_count)
    visible        = records[(effective_page - 1) * size : effective_page * size]

An empty result is a valid terminal state: one (empty) page.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from roster_pipeline.domain.value_objects import (
    ELLIPSIS,
    PageSlice,
    PageWindow,
    RecordSequence,
)

if TYPE_CHECKING:
    from roster_pipeline.pipeline.view_state import ViewState


def page_count_for(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` rows, at least 1."""
    return max(1, math.ceil(total_count / page_size))


def clamp_page(page: int, page_count: int) -> int:
    """Clamp a requested page into ``1..page_count``."""
    return min(max(page, 1), max(page_count, 1))


def paginate(records: RecordSequence, page: int, page_size: int) -> PageSlice:
    """
    Slice one page out of a sorted sequence.

    Args:
        records: Filtered and sorted records
        page: Requested 1-based page
        page_size: Rows per page

    Returns:
        PageSlice with the visible records and pagination metadata
    """
    total = len(records)
    page_count = page_count_for(total, page_size)
    effective = clamp_page(page, page_count)
    start = (effective - 1) * page_size
    return PageSlice(
        records=list(records[start:start + page_size]),
        total_count=total,
        page_count=page_count,
        effective_page=effective,
        page_size=page_size,
    )


def page_window(page: int, page_count: int) -> PageWindow:
    """
    Compact pager items: first, neighbours of the current page, last.

    Gaps between consecutive numbers are marked with "ellipsis", e.g.
    page 5 of 9 -> [1, "ellipsis", 4, 5, 6, "ellipsis", 9].
    A single page needs no pager and yields [].
    """
    if page_count <= 1:
        return []

    numbers = {1, page_count}
    numbers.update(p for p in range(page - 1, page + 2) if 1 < p < page_count)

    items: PageWindow = []
    previous: Optional[int] = None
    for number in sorted(numbers):
        if previous is not None and number - previous > 1:
            items.append(ELLIPSIS)
        items.append(number)
        previous = number
    return items


def parse_page_size(raw: Optional[str], default: int = 20, maximum: int = 100) -> int:
    """
    Parse a page size from a query string value.

    Non-numeric, non-finite or non-positive values fall back to the
    default; fractions are floored; results are capped at ``maximum``.
    """
    try:
        value = float(raw) if raw else float(default)
    except ValueError:
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return max(1, min(math.floor(value), maximum))


class PaginateStage:
    """Final stage: cut the page selected in the view state."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "paginate"

    def apply(self, records: RecordSequence, state: "ViewState") -> PageSlice:
        """Slice ``state.page`` of ``state.page_size`` rows."""
        return paginate(records, state.page, state.page_size)
