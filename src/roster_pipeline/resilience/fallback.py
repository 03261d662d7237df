"""
Fallback Resolver - Primary Source, Then Static Seed.

Detail pages look a record up in the page's data source first and fall
back to a secondary static source. On total failure the caller shows a
"not found" message.

Design Notes:
    - Sources are tried once each, in order: no retries, no backoff
    - A source "misses" by returning None or raising a fallback exception
    - Any other exception propagates unchanged
    - Every attempt is recorded for inspection
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Tuple, Type

from roster_pipeline.errors import RecordNotFound, TransientError
from roster_pipeline.pipeline.record_set import RecordSet

if TYPE_CHECKING:
    from roster_pipeline.registry.view_registry import ListView

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[Any]]


@dataclass
class LookupAttempt:
    """Outcome of asking one source for a record."""

    source: str
    found: bool
    error: Optional[Exception] = None


@dataclass
class LookupTrace:
    """Attempts made for the latest lookup."""

    record_id: str
    attempts: List[LookupAttempt] = field(default_factory=list)

    @property
    def resolved_by(self) -> Optional[str]:
        """Name of the source that returned the record, if any."""
        for attempt in self.attempts:
            if attempt.found:
                return attempt.source
        return None

    @property
    def used_fallback(self) -> bool:
        return self.resolved_by is not None and self.resolved_by != self.attempts[0].source


class FallbackResolver:
    """Resolves a record id against named sources in order."""

    def __init__(
        self,
        sources: Sequence[Tuple[str, Lookup]],
        fallback_on: Tuple[Type[Exception], ...] = (TransientError,),
        entity: str = "record",
    ) -> None:
        """
        Initialize resolver.

        Args:
            sources: (name, lookup) pairs, primary first
            fallback_on: Exceptions that hand over to the next source
            entity: Entity name for the not-found error

        Raises:
            ValueError: If no source is given
        """
        if not sources:
            raise ValueError("FallbackResolver needs at least one source")
        self.sources = list(sources)
        self.fallback_on = fallback_on
        self.entity = entity
        self.last_trace: Optional[LookupTrace] = None

    def resolve(self, record_id: str) -> Any:
        """
        Look a record up, falling back source by source.

        Raises:
            RecordNotFound: If no source has the record
        """
        trace = LookupTrace(record_id=str(record_id))
        self.last_trace = trace

        for name, lookup in self.sources:
            try:
                record = lookup(str(record_id))
            except self.fallback_on as e:
                logger.warning(f"Source {name} failed for {self.entity} '{record_id}': {e}")
                trace.attempts.append(LookupAttempt(source=name, found=False, error=e))
                continue

            if record is not None:
                trace.attempts.append(LookupAttempt(source=name, found=True))
                if trace.used_fallback:
                    logger.info(f"{self.entity} '{record_id}' resolved by fallback source {name}")
                return record

            trace.attempts.append(LookupAttempt(source=name, found=False))

        logger.info(
            f"{self.entity} '{record_id}' not found in "
            f"{len(self.sources)} sources"
        )
        raise RecordNotFound(self.entity, str(record_id))


def resolver_for(view: "ListView", record_set: RecordSet) -> FallbackResolver:
    """Resolver trying the page's record set, then the view's static seed rows."""
    seed = RecordSet(view.seed_records(), entity=view.entity)
    return FallbackResolver(
        sources=[("records", record_set.get), ("seed", seed.get)],
        entity=view.entity,
    )
