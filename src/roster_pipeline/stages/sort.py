"""
Sort Stage.

Stable sort by one column:
    - Numeric columns compare by value
    - String columns compare case- and accent-insensitively, with digit
      runs compared by value for natural columns ("BIO2" < "BIO10")
    - Null values land after all non-null values in both directions
    - Ties keep their prior relative order
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional, Sequence

from roster_pipeline.columns.descriptors import Column
from roster_pipeline.domain.value_objects import RecordList, RecordSequence, SortDirection

if TYPE_CHECKING:
    from roster_pipeline.pipeline.view_state import ViewState

logger = logging.getLogger(__name__)


def sort_records(
    records: RecordSequence,
    column: Column,
    direction: SortDirection = SortDirection.ASC,
) -> RecordList:
    """
    Sort records by a column.

    Python's sort is stable also with ``reverse=True``, so descending
    order keeps ties in their input order as well.

    Args:
        records: Records to sort (not modified)
        column: Column providing value and comparison key
        direction: asc or desc

    Returns:
        New sorted list with null values at the end
    """
    present = []
    nulls = []
    for record in records:
        if column.value(record) is None:
            nulls.append(record)
        else:
            present.append(record)

    ordered = sorted(
        present,
        key=lambda record: column.sort_key(column.value(record)),
        reverse=SortDirection(direction) is SortDirection.DESC,
    )
    return ordered + nulls


class SortStage:
    """Sort by the column selected in the view state."""

    def __init__(self, columns: Sequence[Column]) -> None:
        """
        Initialize with the view's columns.

        Args:
            columns: All columns of the view; only sortable ones are used
        """
        self._columns: Dict[str, Column] = {c.key: c for c in columns if c.sortable}

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "sort"

    def column_for(self, key: Optional[str]) -> Optional[Column]:
        """Sortable column for a key, or None."""
        if key is None:
            return None
        return self._columns.get(key)

    def apply(self, records: RecordSequence, state: "ViewState") -> RecordList:
        """Sort by ``state.sort_key``; unknown keys keep the input order."""
        column = self.column_for(state.sort_key)
        if column is None:
            if state.sort_key is not None:
                logger.debug(f"Sort key {state.sort_key!r} is not sortable, keeping order")
            return list(records)
        return sort_records(records, column, state.sort_direction)
