"""
Registry Package - List View Definitions.

Components:
    - ListView: Columns, default sort and filter menus of one list page
    - ViewRegistry: Thread-safe lookup of views by name
    - default_registry: The nine built-in dashboard views
"""

from roster_pipeline.registry.catalog import builtin_views, default_registry
from roster_pipeline.registry.view_registry import ListView, ViewRegistry

__all__ = [
    "ListView",
    "ViewRegistry",
    "builtin_views",
    "default_registry",
]
