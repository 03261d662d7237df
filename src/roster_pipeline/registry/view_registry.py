"""
View Registry - List View Definitions.

A ListView describes one list page of the dashboard: its columns, the
default sort, the filter menus and the factories that build its records.
The registry is thread-safe and holds the views available to the
presentation layer.

Usage:
    registry = ViewRegistry()
    registry.register(subjects_view)

    view = registry.require("subjects")
    records = view.build_record_set(count=25)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from roster_pipeline.columns.descriptors import Column
from roster_pipeline.domain.value_objects import ALL_STATUSES, SortDirection
from roster_pipeline.errors import ViewNotFound
from roster_pipeline.pipeline.record_set import RecordSet

logger = logging.getLogger(__name__)

DEFAULT_STATUS_OPTIONS: Tuple[str, ...] = (ALL_STATUSES, "Active", "Non Active")


@dataclass(frozen=True, eq=False)
class ListView:
    """Definition of one list page."""

    name: str
    entity: str
    title: str
    columns: Tuple[Column, ...]
    default_sort_key: Optional[str]
    record_factory: Callable[[int], List[Any]]
    seed_factory: Callable[[], List[Any]]
    default_sort_direction: SortDirection = SortDirection.ASC
    status_options: Tuple[str, ...] = DEFAULT_STATUS_OPTIONS
    categorical_filters: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    default_filters: Mapping[str, str] = field(default_factory=dict)
    default_page_size: Optional[int] = None
    description: str = ""

    def column(self, key: str) -> Optional[Column]:
        """Column with the given key, or None."""
        for column in self.columns:
            if column.key == key:
                return column
        return None

    @property
    def searchable_keys(self) -> List[str]:
        return [c.key for c in self.columns if c.searchable]

    @property
    def sortable_keys(self) -> List[str]:
        return [c.key for c in self.columns if c.sortable]

    @property
    def exportable_columns(self) -> List[Column]:
        return [c for c in self.columns if c.exportable]

    def build_record_set(self, count: int) -> RecordSet:
        """Build a fresh record set of ``count`` records for one page view."""
        return RecordSet(self.record_factory(count), entity=self.entity)

    def seed_records(self) -> List[Any]:
        """Static seed rows, used as the fallback source for detail lookups."""
        return self.seed_factory()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "entity": self.entity,
            "title": self.title,
            "columns": [c.key for c in self.columns],
            "searchable": self.searchable_keys,
            "sortable": self.sortable_keys,
            "default_sort": {
                "key": self.default_sort_key,
                "direction": SortDirection(self.default_sort_direction).value,
            },
            "status_options": list(self.status_options),
            "default_filters": dict(self.default_filters),
            "default_page_size": self.default_page_size,
            "categorical_filters": {
                k: list(v) for k, v in self.categorical_filters.items()
            },
            "description": self.description,
        }


class ViewRegistry:
    """
    Thread-safe registry of list views.

    Supports:
        - Registration and removal of views
        - Lookup by name, optional or required
        - Listing in registration order
    """

    def __init__(self, views: Optional[Sequence[ListView]] = None) -> None:
        """
        Initialize registry.

        Args:
            views: Views to register right away
        """
        self._views: Dict[str, ListView] = {}
        self._lock = RLock()
        for view in views or ():
            self.register(view)
        logger.debug(f"ViewRegistry initialized with {len(self._views)} views")

    def register(self, view: ListView) -> None:
        """
        Register a view.

        Raises:
            ValueError: If a view with this name is already registered, its
                        default sort key is not a sortable column or a
                        default filter value is not one of its options
        """
        if view.default_sort_key is not None and view.default_sort_key not in view.sortable_keys:
            raise ValueError(
                f"View '{view.name}': default sort key "
                f"'{view.default_sort_key}' is not a sortable column"
            )
        for field_name, value in view.default_filters.items():
            if value not in view.categorical_filters.get(field_name, ()):
                raise ValueError(
                    f"View '{view.name}': default filter {field_name}={value!r} "
                    f"is not one of its filter options"
                )
        with self._lock:
            if view.name in self._views:
                raise ValueError(
                    f"View '{view.name}' is already registered. "
                    f"Use unregister() first."
                )
            self._views[view.name] = view
            logger.info(f"Registered list view: {view.name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a view by name.

        Returns:
            True if the view was removed, False if not found
        """
        with self._lock:
            if name not in self._views:
                logger.warning(f"Cannot unregister: view '{name}' not found")
                return False
            del self._views[name]
            logger.info(f"Unregistered list view: {name}")
            return True

    def get(self, name: str) -> Optional[ListView]:
        """Get a view by name, or None."""
        with self._lock:
            return self._views.get(name)

    def require(self, name: str) -> ListView:
        """
        Get a view by name.

        Raises:
            ViewNotFound: If no such view is registered
        """
        view = self.get(name)
        if view is None:
            raise ViewNotFound(name)
        return view

    def list_all(self) -> Dict[str, ListView]:
        """All registered views, in registration order."""
        with self._lock:
            return dict(self._views)

    @property
    def names(self) -> List[str]:
        with self._lock:
            return list(self._views)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._views

    def __len__(self) -> int:
        with self._lock:
            return len(self._views)
