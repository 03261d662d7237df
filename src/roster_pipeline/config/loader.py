"""
Configuration Loader - Roster Settings from YAML.

A roster configuration is one YAML document plus any number of profile
overlays stored beside it:

    config/default.yaml
    config/profiles/dev.yaml
    config/profiles/demo.yaml

Profiles are applied in the order given; nested mappings merge key by
key, everything else is replaced. When a view registry is supplied, the
``views:`` section is checked against it: every key must name a
registered view, sort overrides must name a sortable column and page
size overrides must be offered.

Usage:
    loader = ConfigLoader(registry=default_registry())
    config = loader.load("config/default.yaml", profile=["dev", "demo"])
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Union

import yaml

from roster_pipeline.config.models import RosterConfig
from roster_pipeline.errors import ValidationError

if TYPE_CHECKING:
    from roster_pipeline.registry.view_registry import ViewRegistry

logger = logging.getLogger(__name__)

PROFILE_DIRECTORY = "profiles"

Profiles = Union[str, Sequence[str], None]


def read_yaml(path: Path) -> Dict[str, Any]:
    """Parse a YAML mapping; an empty document yields an empty dict."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def overlay(base: Mapping[str, Any], patch: Mapping[str, Any]) -> Dict[str, Any]:
    """``base`` with ``patch`` laid over it, merging nested mappings."""
    merged = dict(base)
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = overlay(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Reads roster configuration files and checks them against the views."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        registry: Optional["ViewRegistry"] = None,
    ) -> None:
        """
        Args:
            base_path: Directory relative config paths are resolved from
            registry: Views the ``views:`` section is checked against
                      (no check when omitted)
        """
        self._base_path = Path(base_path) if base_path is not None else Path(".")
        self._registry = registry

    def load(self, config_path: Union[str, Path], profile: Profiles = None) -> RosterConfig:
        """
        Load a configuration file with optional profile overlays.

        Args:
            config_path: YAML file, absolute or relative to the base path
            profile: Profile name or names, looked up in ``profiles/``
                     next to the config file

        Raises:
            FileNotFoundError: If the file or a profile does not exist
            pydantic.ValidationError: If a value has the wrong shape
            ValidationError: If ``views:`` does not match the registry
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        data = read_yaml(path)
        for name in _profile_names(profile):
            data = overlay(data, read_yaml(self._profile_path(path, name)))
            logger.debug(f"Applied profile '{name}' to {path.name}")

        return self.load_from_dict(data)

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> RosterConfig:
        """Validate an already parsed configuration."""
        config = RosterConfig.model_validate(dict(config_dict))
        if self._registry is not None:
            self.check_views(config)
        return config

    def check_views(self, config: RosterConfig) -> None:
        """
        Check the per-view overrides against the registry.

        Raises:
            ValidationError: Listing every mismatch found
        """
        if self._registry is None:
            return
        problems: List[str] = []
        offered = config.global_settings.page_size_options

        for view_name, settings in config.views.items():
            view = self._registry.get(view_name)
            if view is None:
                problems.append(f"views.{view_name}: no such list view")
                continue
            sort_key = settings.default_sort_key
            if sort_key is not None and sort_key not in view.sortable_keys:
                problems.append(
                    f"views.{view_name}.default_sort_key: '{sort_key}' is not "
                    f"sortable ({', '.join(view.sortable_keys) or 'none'})"
                )
            size = settings.default_page_size
            if size is not None and size not in offered and size != view.default_page_size:
                problems.append(
                    f"views.{view_name}.default_page_size: {size} not in {offered}"
                )

        if problems:
            message = "; ".join(problems)
            logger.error(f"Configuration does not match the list views: {message}")
            raise ValidationError(message, field="views")

    def _profile_path(self, config_path: Path, name: str) -> Path:
        path = config_path.parent / PROFILE_DIRECTORY / f"{name}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {name} (looked in {path.parent})")
        return path


def _profile_names(profile: Profiles) -> List[str]:
    if profile is None:
        return []
    if isinstance(profile, str):
        return [name.strip() for name in profile.split(",") if name.strip()]
    return list(profile)


def load_config(
    config_path: Union[str, Path],
    profile: Profiles = None,
    base_path: Optional[Path] = None,
    registry: Optional["ViewRegistry"] = None,
) -> RosterConfig:
    """Shortcut for ``ConfigLoader(base_path, registry).load(config_path, profile)``."""
    return ConfigLoader(base_path=base_path, registry=registry).load(config_path, profile)
