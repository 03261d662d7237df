"""
Categorical Filter Stages.

A record passes a categorical filter iff the selected value is the "All"
sentinel or the record's field equals the selected value exactly
(case-sensitive, no partial matching).

The status filter is the one every list page has; the students page
adds class and flag filters using the same contract.
"""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING, Any, Callable, Optional

from roster_pipeline.domain.value_objects import ALL_STATUSES, RecordList, RecordSequence

if TYPE_CHECKING:
    from roster_pipeline.pipeline.view_state import ViewState


def filter_by_value(
    records: RecordSequence,
    accessor: Callable[[Any], Any],
    selected: str,
) -> RecordList:
    """
    Keep records whose field equals the selected value.

    Args:
        records: Records to filter
        accessor: Reads the categorical field from a record
        selected: Selected value, or "All" to keep everything

    Returns:
        New list of matching records in input order
    """
    if selected == ALL_STATUSES:
        return list(records)
    return [record for record in records if accessor(record) == selected]


class CategoricalFilterStage:
    """Filter records by an extra categorical field (e.g. class, flag)."""

    def __init__(
        self,
        field: str,
        accessor: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        """
        Initialize with the field to filter on.

        Args:
            field: Field name, also the key in ViewState.filters
            accessor: Custom reader (defaults to the attribute ``field``)
        """
        self.field = field
        self._accessor = accessor or attrgetter(field)

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return f"{self.field}_filter"

    def selected_value(self, state: "ViewState") -> str:
        """Value selected for this field in the view state."""
        return state.filters.get(self.field, ALL_STATUSES)

    def apply(self, records: RecordSequence, state: "ViewState") -> RecordList:
        """Apply the filter for the value selected in ``state``."""
        return filter_by_value(records, self._accessor, self.selected_value(state))


class StatusFilterStage(CategoricalFilterStage):
    """Filter records by their Active / Non Active status."""

    def __init__(self, field: str = "status") -> None:
        super().__init__(field)

    @property
    def name(self) -> str:
        return "status_filter"

    def selected_value(self, state: "ViewState") -> str:
        return state.status_filter
