"""
Test Suite for Roster Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Full pipeline runs over the built-in views
    - performance/: Timing benchmarks
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not slow"                    # Skip long benchmarks
"""
