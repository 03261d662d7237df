"""
Unit Tests for ViewRegistry and the Built-in Views.

Tests:
    - View registration and unregistration
    - Lookup by name
    - Thread-safety
    - Column sets of the built-in views
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import List

import pytest

from roster_pipeline.errors import ViewNotFound
from roster_pipeline.registry.catalog import (
    PAYMENTS_VIEW,
    REPORT_FORMATS_VIEW,
    SUBJECTS_VIEW,
    builtin_views,
    default_registry,
)
from roster_pipeline.registry.view_registry import ListView, ViewRegistry


def renamed(view: ListView, name: str) -> ListView:
    return replace(view, name=name)


class TestViewRegistryRegistration:
    """Tests for view registration."""

    def test_register_and_get(self) -> None:
        registry = ViewRegistry()

        registry.register(SUBJECTS_VIEW)

        assert len(registry) == 1
        assert registry.get("subjects") is SUBJECTS_VIEW
        assert "subjects" in registry

    def test_register_duplicate_raises(self) -> None:
        registry = ViewRegistry([SUBJECTS_VIEW])

        with pytest.raises(ValueError, match="already registered"):
            registry.register(SUBJECTS_VIEW)

    def test_default_sort_must_be_sortable(self) -> None:
        """
        SCENARIO: View whose default sort key is not a sortable column
        EXPECTED: Registration rejected
        """
        broken = replace(SUBJECTS_VIEW, default_sort_key="status")

        with pytest.raises(ValueError, match="not a sortable column"):
            ViewRegistry().register(broken)

    def test_default_filter_must_be_an_option(self) -> None:
        """
        SCENARIO: Payments view defaulting to a period outside its picker
        EXPECTED: Registration rejected
        """
        broken = replace(PAYMENTS_VIEW, default_filters={"period": "1999-01"})

        with pytest.raises(ValueError, match="not one of its filter options"):
            ViewRegistry().register(broken)

    def test_unsorted_view_registers(self) -> None:
        registry = ViewRegistry([REPORT_FORMATS_VIEW])

        assert registry.require("report_formats").default_sort_key is None

    def test_unregister(self) -> None:
        registry = ViewRegistry([SUBJECTS_VIEW])

        assert registry.unregister("subjects") is True
        assert registry.unregister("subjects") is False
        assert registry.get("subjects") is None

    def test_require_unknown_raises_view_not_found(self) -> None:
        registry = ViewRegistry()

        with pytest.raises(ViewNotFound) as exc_info:
            registry.require("timetable")

        assert exc_info.value.status == 404
        assert "timetable" in str(exc_info.value)

    def test_list_all_keeps_registration_order(self) -> None:
        registry = default_registry()

        assert list(registry.list_all()) == registry.names == [
            "subjects", "classes", "teachers", "admins", "roles", "students",
            "payments", "assessment_categories", "report_formats",
        ]


class TestViewRegistryThreadSafety:
    """Tests for concurrent registration."""

    def test_concurrent_registration(self) -> None:
        """
        SCENARIO: Many threads register distinct views at once
        EXPECTED: Every view registered exactly once
        """
        registry = ViewRegistry()
        errors: List[Exception] = []

        def register(index: int) -> None:
            try:
                registry.register(renamed(SUBJECTS_VIEW, f"subjects-{index}"))
            except Exception as e:  # pragma: no cover - collected for assertion
                errors.append(e)

        threads = [threading.Thread(target=register, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == 20


class TestBuiltinViews:
    """Tests for the catalog of list pages."""

    @pytest.mark.parametrize(
        "name, searchable",
        [
            ("subjects", ["code", "name", "description"]),
            ("classes", ["name", "homeroom_teacher", "capacity", "total_students", "total_subjects", "status"]),
            ("teachers", ["id", "full_name", "email", "subjects", "homeroom_class", "status"]),
            ("admins", ["name", "email"]),
            ("roles", ["name"]),
            ("students", ["id", "name", "email", "current_class", "status"]),
            ("payments", ["name", "student_class"]),
            ("assessment_categories", ["name", "assessment_type", "related_to"]),
            ("report_formats", ["title"]),
        ],
    )
    def test_searchable_columns(self, registry: ViewRegistry, name: str, searchable: List[str]) -> None:
        assert registry.require(name).searchable_keys == searchable

    @pytest.mark.parametrize(
        "name, sortable",
        [
            ("subjects", ["code", "name", "description"]),
            ("teachers", ["id", "full_name", "email", "subjects", "homeroom_class", "status"]),
            ("admins", ["name", "email", "role", "features", "status"]),
            ("roles", ["name", "features"]),
            ("payments", ["name", "student_class", "amount", "status", "due", "paid_at"]),
            ("assessment_categories", []),
            ("report_formats", []),
        ],
    )
    def test_sortable_columns(self, registry: ViewRegistry, name: str, sortable: List[str]) -> None:
        assert registry.require(name).sortable_keys == sortable

    def test_students_have_extra_filters(self, registry: ViewRegistry) -> None:
        students = registry.require("students")

        assert set(students.categorical_filters) == {"current_class", "flag"}
        assert students.categorical_filters["flag"] == ("All", "green", "yellow", "red")

    def test_build_record_set(self, registry: ViewRegistry) -> None:
        record_set = registry.require("teachers").build_record_set(10)

        assert len(record_set) == 10
        assert record_set.entity == "teacher"

    def test_to_dict(self) -> None:
        data = SUBJECTS_VIEW.to_dict()

        assert data["default_sort"] == {"key": "code", "direction": "asc"}
        assert data["columns"] == ["code", "name", "description", "status"]

    def test_builtin_views_are_all_registrable(self) -> None:
        assert len(ViewRegistry(builtin_views())) == 9

    def test_payments_filter_by_period_and_class(self, registry: ViewRegistry) -> None:
        """
        SCENARIO: Payments view with its month picker and class dropdown
        EXPECTED: Both are categorical filters, the period preselected on 2025-08
        """
        payments = registry.require("payments")

        assert set(payments.categorical_filters) == {"period", "student_class"}
        assert "2025-08" in payments.categorical_filters["period"]
        assert payments.default_filters == {"period": "2025-08"}
        assert payments.status_options == ("All", "Paid", "Unpaid")

    def test_assessment_categories_page_size(self, registry: ViewRegistry) -> None:
        view = registry.require("assessment_categories")

        assert view.default_page_size == 5
        assert view.to_dict()["default_page_size"] == 5
