"""
Integration Tests - End-to-End Pipeline Tests.

These tests run the registry, mock record provider, pipeline, session
and CSV exporter together over the built-in list views.

Test Files:
    - test_record_pipeline.py: Pipeline runs, audit trail, metrics
    - test_list_view_session.py: Interactions, clamping, export
    - test_builtin_views.py: Search scope, ordering, pagination per page
"""
