"""
Record Set Builder.

Pads a short hand-written seed list with generated filler rows up to a
target size, the way every mock list page fills its table.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Give up after this many factory calls per requested row
MAX_ATTEMPTS_PER_ROW = 10


def pad_records(
    seed: Iterable[T],
    target: int,
    make: Callable[[int], T],
) -> List[T]:
    """
    Build ``target`` records: the seed rows first, then ``make(0)``,
    ``make(1)``, ... Generated rows whose id is already taken are skipped.

    Args:
        seed: Hand-written rows kept at the top (truncated to ``target``)
        target: Number of rows to produce
        make: Filler factory taking a running index

    Returns:
        List of exactly ``target`` records with unique ids

    Raises:
        ValueError: If the factory cannot produce enough unique rows
    """
    if target < 0:
        raise ValueError(f"target must be >= 0, got {target}")

    rows: List[T] = list(seed)[:target]
    seen = {row.record_id for row in rows}
    max_attempts = max(target, 1) * MAX_ATTEMPTS_PER_ROW

    index = 0
    while len(rows) < target:
        if index >= max_attempts:
            raise ValueError(
                f"Could not generate {target} unique records "
                f"(got {len(rows)} after {index} attempts)"
            )
        row = make(index)
        index += 1
        if row.record_id in seen:
            logger.debug(f"Skipping duplicate generated id {row.record_id}")
            continue
        seen.add(row.record_id)
        rows.append(row)

    return rows
