"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from roster_pipeline.domain.value_objects import SortDirection


class GlobalConfig(BaseModel):
    """Global configuration settings."""

    target_record_count: int = Field(default=25, ge=0, le=10_000)
    page_size_options: List[int] = Field(default_factory=lambda: [4, 10, 25])
    default_page_size: int = Field(default=4, ge=1)

    @field_validator("page_size_options")
    @classmethod
    def _options_positive(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("page_size_options must not be empty")
        if any(size < 1 for size in value):
            raise ValueError("page sizes must be >= 1")
        return sorted(set(value))

    @model_validator(mode="after")
    def _default_in_options(self) -> "GlobalConfig":
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size={self.default_page_size} not in "
                f"page_size_options={self.page_size_options}"
            )
        return self


class ExportConfig(BaseModel):
    """Configuration for CSV export."""

    filename_mode: Literal["date", "timestamp"] = "date"
    include_bom: bool = True


class ViewSettings(BaseModel):
    """Per-view overrides of the view definition defaults."""

    default_sort_key: Optional[str] = None
    default_sort_direction: Optional[SortDirection] = None
    default_page_size: Optional[int] = Field(default=None, ge=1)
    target_record_count: Optional[int] = Field(default=None, ge=0, le=10_000)


class RosterConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    global_settings: GlobalConfig = Field(
        default_factory=GlobalConfig,
        alias="global",
    )
    export: ExportConfig = Field(default_factory=ExportConfig)
    views: Dict[str, ViewSettings] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def view_settings(self, view_name: str) -> ViewSettings:
        """Overrides for a view (empty settings if none configured)."""
        return self.views.get(view_name) or ViewSettings()

    def record_count(self, view_name: str) -> int:
        """Number of mock records to build for a view."""
        count = self.view_settings(view_name).target_record_count
        return self.global_settings.target_record_count if count is None else count
