"""
View State Validator - Validate Requested View States.

Validates a view state arriving from outside the UI controls (query
string, API call) before it is run:
    - Sort key is a sortable column of the view
    - Status filter is one of the view's status options
    - Extra filter fields exist and hold allowed values
    - Page size is one of the configured page size options or the
      view's own default page size

Design Notes:
    - Fail-fast principle
    - All problems collected into one error message
    - The pipeline itself never needs this: it is total over any state
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from roster_pipeline.config.models import RosterConfig
from roster_pipeline.errors import ValidationError
from roster_pipeline.pipeline.view_state import ViewState

if TYPE_CHECKING:
    from roster_pipeline.registry.view_registry import ListView

logger = logging.getLogger(__name__)


class ViewStateValidator:
    """Validates view states against a view definition and config."""

    def validate(
        self,
        state: ViewState,
        view: "ListView",
        config: Optional[RosterConfig] = None,
    ) -> None:
        """
        Validate a view state.

        Args:
            state: The requested view state
            view: View the state is applied to
            config: Roster configuration (page size menu)

        Raises:
            ValidationError: If validation fails
        """
        errors: List[str] = []
        fields: List[str] = []

        sort_error = self._validate_sort_key(state, view)
        if sort_error:
            errors.append(sort_error)
            fields.append("sort_key")

        status_error = self._validate_status(state, view)
        if status_error:
            errors.append(status_error)
            fields.append("status_filter")

        filter_errors = self._validate_filters(state, view)
        if filter_errors:
            errors.extend(filter_errors)
            fields.append("filters")

        size_error = self._validate_page_size(state, view, config or RosterConfig())
        if size_error:
            errors.append(size_error)
            fields.append("page_size")

        if errors:
            error_message = "; ".join(errors)
            logger.error(f"View state validation failed for {view.name}: {error_message}")
            raise ValidationError(error_message, field=fields[0])

        logger.debug(f"View state validated for {view.name}")

    def _validate_sort_key(self, state: ViewState, view: "ListView") -> Optional[str]:
        if state.sort_key is None or state.sort_key in view.sortable_keys:
            return None
        allowed = ", ".join(view.sortable_keys)
        return f"Sort key '{state.sort_key}' is not sortable. Sortable: {allowed}"

    def _validate_status(self, state: ViewState, view: "ListView") -> Optional[str]:
        if state.status_filter in view.status_options:
            return None
        allowed = ", ".join(view.status_options)
        return f"Status '{state.status_filter}' not supported. Supported: {allowed}"

    def _validate_filters(self, state: ViewState, view: "ListView") -> List[str]:
        errors: List[str] = []
        for field_name, value in state.filters.items():
            options = view.categorical_filters.get(field_name)
            if options is None:
                errors.append(f"Unknown filter '{field_name}' for view {view.name}")
            elif value not in options:
                errors.append(f"Value '{value}' not allowed for filter '{field_name}'")
        return errors

    def _validate_page_size(
        self, state: ViewState, view: "ListView", config: RosterConfig
    ) -> Optional[str]:
        options = list(config.global_settings.page_size_options)
        if view.default_page_size is not None and view.default_page_size not in options:
            options.append(view.default_page_size)
        if state.page_size in options:
            return None
        allowed = ", ".join(str(size) for size in options)
        return f"Page size {state.page_size} not offered. Offered: {allowed}"
