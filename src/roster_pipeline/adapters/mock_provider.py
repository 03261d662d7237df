"""
Mock Record Provider.

Development data source for the list pages. Builds the record set of a
view from its factory on first request and keeps it for the lifetime of
the provider, so every page mount served by one provider sees the same
rows. Create a new provider to get fresh data.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import TYPE_CHECKING, Any, Dict, Optional

from roster_pipeline.errors import RecordNotFound
from roster_pipeline.pipeline.record_set import RecordSet
from roster_pipeline.registry.catalog import default_registry
from roster_pipeline.registry.view_registry import ViewRegistry

if TYPE_CHECKING:
    from roster_pipeline.config.models import RosterConfig

logger = logging.getLogger(__name__)


class MockRecordProvider:
    """Fake record source for development and testing."""

    def __init__(
        self,
        target_count: int = 25,
        registry: Optional[ViewRegistry] = None,
        config: Optional["RosterConfig"] = None,
    ) -> None:
        """
        Initialize mock provider.

        Args:
            target_count: Records per view (seed rows plus generated filler)
            registry: View definitions (defaults to the built-in views)
            config: Per-view record counts; takes precedence over
                    ``target_count``
        """
        self.target_count = target_count
        self.config = config
        self.registry = registry or default_registry()
        self._record_sets: Dict[str, RecordSet] = {}
        self._lock = Lock()

    @classmethod
    def from_config(
        cls,
        config: "RosterConfig",
        registry: Optional[ViewRegistry] = None,
    ) -> "MockRecordProvider":
        """Provider sized by ``target_record_count`` of a loaded configuration."""
        return cls(
            target_count=config.global_settings.target_record_count,
            registry=registry,
            config=config,
        )

    def record_count(self, view_name: str) -> int:
        """Number of records built for a view."""
        if self.config is not None:
            return self.config.record_count(view_name)
        return self.target_count

    def get_records(self, view_name: str) -> RecordSet:
        """
        Record set of a view.

        Raises:
            ViewNotFound: If the view is not registered
        """
        view = self.registry.require(view_name)
        with self._lock:
            record_set = self._record_sets.get(view_name)
            if record_set is None:
                record_set = view.build_record_set(self.record_count(view_name))
                self._record_sets[view_name] = record_set
                logger.debug(f"Built {len(record_set)} records for {view_name}")
            return record_set

    def find(self, view_name: str, record_id: str) -> Any:
        """
        Detail lookup of one record.

        Raises:
            ViewNotFound: If the view is not registered
            RecordNotFound: If no record has this id
        """
        record = self.get_records(view_name).get(record_id)
        if record is None:
            raise RecordNotFound(self.registry.require(view_name).entity, record_id)
        return record
