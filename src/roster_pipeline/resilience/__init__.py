"""
Resilience Package - Detail Lookups with Fallback.

Components:
    - FallbackResolver: Tries a primary source, then static fallbacks
    - resolver_for: Record set first, seed rows second
"""

from roster_pipeline.resilience.fallback import (
    FallbackResolver,
    LookupAttempt,
    LookupTrace,
    resolver_for,
)

__all__ = [
    "FallbackResolver",
    "LookupAttempt",
    "LookupTrace",
    "resolver_for",
]
