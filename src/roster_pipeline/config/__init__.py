"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - RosterConfig: Root configuration object
    - GlobalConfig: Record counts and the page size menu
    - ExportConfig: CSV filename mode and BOM
    - ViewSettings: Per-view default sort and page size overrides

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (config/profiles/<name>.yaml)
"""

from roster_pipeline.config.loader import ConfigLoader, load_config
from roster_pipeline.config.models import (
    ExportConfig,
    GlobalConfig,
    RosterConfig,
    ViewSettings,
)

__all__ = [
    "ConfigLoader",
    "ExportConfig",
    "GlobalConfig",
    "RosterConfig",
    "ViewSettings",
    "load_config",
]
