"""
Value Objects for Domain Layer.

Small immutable values shared by the stages, the view state and the
pagination helpers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel, Field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Rows flowing through the pipeline (concrete Record subclasses)
RecordList = List[Any]

# Read-only input to a stage
RecordSequence = Sequence[Any]

# Extra categorical filters: field -> selected value
CategoricalFilters = Dict[str, str]

# Pager items: page numbers with "ellipsis" markers in gaps
PageWindow = List[Union[int, str]]

# Sentinel filter value matching every record
ALL_STATUSES = "All"

ELLIPSIS = "ellipsis"


class SortDirection(str, Enum):
    """Sort direction of a list view column."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        """Return the opposite direction."""
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class PageSlice(BaseModel):
    """One page of an already filtered and sorted sequence."""

    records: RecordList = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    page_count: int = Field(default=1, ge=1)
    effective_page: int = Field(default=1, ge=1)
    page_size: int = Field(default=4, ge=1)

    model_config = {"frozen": True}

    @property
    def start_index(self) -> int:
        """Zero-based offset of the first visible record."""
        return (self.effective_page - 1) * self.page_size
