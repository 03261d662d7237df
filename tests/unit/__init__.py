"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with small hand-built records.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_stages.py: Filter, search and sort stages
    - test_paginate.py: Pagination and pager items
    - test_columns.py: Column descriptors and collation
    - test_config_loader.py: Configuration loading/validation
"""
