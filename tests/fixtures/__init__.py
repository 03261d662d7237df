"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration with view overrides

Usage:
    Use the ``sample_config_path`` fixture from conftest.py.
"""
