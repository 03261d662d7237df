"""
Column Descriptors.

A Column binds a record field to everything the pipeline needs to know
about it: how to read it, how to compare it, whether it takes part in the
search haystack and how it is written to CSV.

The comparison strategy is resolved once when the column is declared,
based on its kind, so the sort stage never inspects value types per row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from operator import attrgetter
from typing import Any, Callable, Optional

from roster_pipeline.columns.collation import natural_key, text_key


class ColumnKind(str, Enum):
    """How values of a column are compared."""

    NUMERIC = "numeric"
    STRING_NATURAL = "string-natural"
    STRING_EXACT = "string-exact"


Accessor = Callable[[Any], Any]

SEARCH_LIST_SEPARATOR = ", "
EXPORT_LIST_SEPARATOR = "; "


def _as_text(value: Any, separator: str) -> str:
    if isinstance(value, (list, tuple)):
        return separator.join(str(item) for item in value)
    return str(value)


def _numeric_key(value: Any) -> Any:
    return value


def _exact_key(value: Any) -> Any:
    return text_key(_as_text(value, SEARCH_LIST_SEPARATOR))


def _natural_key(value: Any) -> Any:
    return natural_key(_as_text(value, SEARCH_LIST_SEPARATOR))


_KEY_FUNCTIONS = {
    ColumnKind.NUMERIC: _numeric_key,
    ColumnKind.STRING_EXACT: _exact_key,
    ColumnKind.STRING_NATURAL: _natural_key,
}


@dataclass(frozen=True)
class Column:
    """
    Declarative description of one list page column.

    Attributes:
        key: Field name used as sort key and filter field
        label: Header label (table and CSV)
        accessor: Reads the raw value from a record (defaults to the
                  attribute named ``key``)
        kind: Comparison strategy
        nullable: Whether the field may be None (nulls always sort last)
        searchable: Part of the free text search haystack
        sortable: Header can be clicked to sort
        exportable: Written to CSV export
        export_empty: CSV text for a None value
    """

    key: str
    label: str
    accessor: Optional[Accessor] = None
    kind: ColumnKind = ColumnKind.STRING_EXACT
    nullable: bool = False
    searchable: bool = True
    sortable: bool = True
    exportable: bool = True
    export_empty: str = ""
    _key_function: Callable[[Any], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.accessor is None:
            object.__setattr__(self, "accessor", attrgetter(self.key))
        object.__setattr__(self, "_key_function", _KEY_FUNCTIONS[ColumnKind(self.kind)])

    def value(self, record: Any) -> Any:
        """Raw field value of a record."""
        return self.accessor(record)

    def sort_key(self, value: Any) -> Any:
        """Comparison key for a non-null value."""
        return self._key_function(value)

    def search_text(self, record: Any) -> str:
        """Text contributed to the search haystack."""
        value = self.value(record)
        if value is None:
            return ""
        return _as_text(value, SEARCH_LIST_SEPARATOR)

    def export_text(self, record: Any) -> str:
        """Cell text written to CSV."""
        value = self.value(record)
        if value is None:
            return self.export_empty
        return _as_text(value, EXPORT_LIST_SEPARATOR)
