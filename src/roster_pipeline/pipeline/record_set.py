"""
Record Set - Immutable In-Memory Snapshot.

The RecordSet holds the rows of one list page for the lifetime of a view.
It is built once (per page mount, per request) and passed down to the
pipeline and the detail lookups; nothing mutates it afterwards.

Design Notes:
    - Identifiers must be unique; duplicates raise ConflictError
    - O(1) lookup by record id for detail pages
    - Exposes a tuple so callers cannot mutate the snapshot in place
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from roster_pipeline.errors import ConflictError

logger = logging.getLogger(__name__)


class RecordSet:
    """Ordered, immutable collection of records with id lookup."""

    def __init__(self, records: Iterable[Any], entity: str = "record") -> None:
        """
        Initialize record set.

        Args:
            records: Records in display order
            entity: Entity name used in log and error messages

        Raises:
            ConflictError: If two records share an identifier
        """
        self._records: Tuple[Any, ...] = tuple(records)
        self._entity = entity
        self._by_id: Dict[str, Any] = {}

        for record in self._records:
            record_id = record.record_id
            if record_id in self._by_id:
                raise ConflictError(
                    f"Duplicate {entity} id '{record_id}' in record set"
                )
            self._by_id[record_id] = record

        logger.debug(f"RecordSet built: {len(self._records)} {entity} records")

    @property
    def entity(self) -> str:
        return self._entity

    @property
    def records(self) -> Tuple[Any, ...]:
        """All records in display order."""
        return self._records

    def get(self, record_id: str) -> Optional[Any]:
        """Get record by id, or None."""
        return self._by_id.get(str(record_id))

    def get_many(self, record_ids: Iterable[str]) -> List[Any]:
        """Get multiple records by id, skipping unknown ids."""
        return [self._by_id[r] for r in map(str, record_ids) if r in self._by_id]

    def __contains__(self, record_id: object) -> bool:
        return str(record_id) in self._by_id

    def __iter__(self) -> Iterator[Any]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordSet(entity={self._entity!r}, records={len(self._records)})"
