"""
Free Text Search Stage.

The query is trimmed and lower-cased; an empty query matches everything.
A record matches iff the lower-cased haystack built from the view's
searchable columns contains the query as a substring. No tokenization,
no fuzzy matching, no field weighting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from roster_pipeline.columns.descriptors import Column
from roster_pipeline.domain.value_objects import RecordList, RecordSequence

if TYPE_CHECKING:
    from roster_pipeline.pipeline.view_state import ViewState


def normalize_query(query: str) -> str:
    """Trim and lower-case a raw query."""
    return query.strip().lower()


def build_haystack(record: object, columns: Sequence[Column]) -> str:
    """Join the searchable fields of a record with single spaces, lower-cased."""
    return " ".join(column.search_text(record) for column in columns).lower()


def search_records(
    records: RecordSequence,
    columns: Sequence[Column],
    query: str,
) -> RecordList:
    """
    Keep records whose haystack contains the normalized query.

    Args:
        records: Records to search
        columns: Searchable columns contributing to the haystack
        query: Raw query as typed

    Returns:
        New list of matching records in input order
    """
    needle = normalize_query(query)
    if not needle:
        return list(records)
    return [record for record in records if needle in build_haystack(record, columns)]


class SearchStage:
    """Substring search over the searchable columns of a view."""

    def __init__(self, columns: Sequence[Column]) -> None:
        """
        Initialize with the view's columns.

        Args:
            columns: All columns of the view; only searchable ones are used
        """
        self.columns: List[Column] = [c for c in columns if c.searchable]

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "search"

    @property
    def searchable_keys(self) -> List[str]:
        return [c.key for c in self.columns]

    def apply(self, records: RecordSequence, state: "ViewState") -> RecordList:
        """Apply the query held by ``state``."""
        return search_records(records, self.columns, state.query)
