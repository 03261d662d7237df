"""
Stages Package - The Record Pipeline Stages.

Every list page derives its visible rows with the same fixed sequence:

    filter -> search -> sort -> paginate

Stages:
    - StatusFilterStage: Active / Non Active / All
    - CategoricalFilterStage: Extra exact-match filters (class, flag)
    - SearchStage: Substring search over the searchable columns
    - SortStage: Stable sort by one column, nulls last
    - PaginateStage: Page slice with clamped page number

Design Principles:
    - Pure functions of (records, view state); inputs are never mutated
    - Columns injected via constructor
    - Total over well-typed input: no stage raises
"""

from roster_pipeline.stages.paginate import (
    PaginateStage,
    clamp_page,
    page_count_for,
    page_window,
    paginate,
    parse_page_size,
)
from roster_pipeline.stages.search import SearchStage, build_haystack, search_records
from roster_pipeline.stages.sort import SortStage, sort_records
from roster_pipeline.stages.status_filter import (
    CategoricalFilterStage,
    StatusFilterStage,
    filter_by_value,
)

__all__ = [
    "CategoricalFilterStage",
    "PaginateStage",
    "SearchStage",
    "SortStage",
    "StatusFilterStage",
    "build_haystack",
    "clamp_page",
    "filter_by_value",
    "page_count_for",
    "page_window",
    "paginate",
    "parse_page_size",
    "search_records",
    "sort_records",
]
